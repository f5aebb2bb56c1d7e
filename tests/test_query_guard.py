"""Tests for aumai_cfguard.query_guard."""

from __future__ import annotations

import pytest

from aumai_cfguard.errors import InvalidVariables, RejectedQuery
from aumai_cfguard.query_guard import (
    MSG_BAD_JSON,
    MSG_DISALLOWED,
    MSG_EMPTY,
    MSG_NOT_A_STRING,
    MSG_NOT_OBJECT,
    MSG_NOT_READ_ONLY,
    check_query,
    validate_query,
    validate_variables,
)

# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


class TestValidateQuery:
    def test_introspection_rejected(self) -> None:
        with pytest.raises(RejectedQuery, match=MSG_DISALLOWED):
            validate_query("{ __schema { types { name } } }")

    def test_mutation_rejected(self) -> None:
        with pytest.raises(RejectedQuery, match=MSG_DISALLOWED):
            validate_query("mutation { deleteZone }")

    def test_named_query_accepted(self) -> None:
        assert validate_query("query { zones { id } }") == "query { zones { id } }"

    def test_anonymous_query_accepted(self) -> None:
        assert validate_query("{ viewer { zones { id } } }") == "{ viewer { zones { id } } }"

    def test_result_is_trimmed(self) -> None:
        assert validate_query("  \n query Q { viewer { a } }\n") == "query Q { viewer { a } }"


class TestCheckQuery:
    @pytest.mark.parametrize(
        "text",
        [
            "{ __type(name: \"Zone\") { fields { name } } }",
            "query { viewer { __SCHEMA { types { name } } } }",
            "MUTATION { purge }",
            "mutation Purge($id: ID!) { purge(id: $id) }",
            "subscription { events }",
            "query { a } mutation { b }",
            "subscription OnEvent @live { events }",
        ],
    )
    def test_blocklisted(self, text: str) -> None:
        decision = check_query(text)
        assert decision.accepted is False
        assert decision.reason == MSG_DISALLOWED

    @pytest.mark.parametrize(
        "text",
        [
            "fragment F on Zone { id }",
            "viewer { zones { id } }",
            "# comment\n{ viewer { a } }",
        ],
    )
    def test_non_query_opener_rejected(self, text: str) -> None:
        decision = check_query(text)
        assert decision.accepted is False
        assert decision.reason == MSG_NOT_READ_ONLY

    @pytest.mark.parametrize("text", [None, 42, ["query { a }"], ""])
    def test_non_string_or_empty_rejected(self, text: object) -> None:
        assert check_query(text).reason == MSG_NOT_A_STRING

    def test_whitespace_only_rejected(self) -> None:
        assert check_query("   \t\n").reason == MSG_EMPTY

    def test_field_named_like_keyword_allowed(self) -> None:
        assert check_query("query { viewer { mutationCount subscriptionTier } }").accepted is True

    def test_uppercase_query_keyword_allowed(self) -> None:
        assert check_query("QUERY { viewer { a } }").accepted is True

    def test_reason_absent_when_accepted(self) -> None:
        assert check_query("{ viewer { a } }").reason is None


# ---------------------------------------------------------------------------
# Variables
# ---------------------------------------------------------------------------


class TestValidateVariables:
    def test_object_parsed(self) -> None:
        assert validate_variables('{"a":1}') == {"a": 1}

    def test_array_rejected(self) -> None:
        with pytest.raises(InvalidVariables, match=MSG_NOT_OBJECT):
            validate_variables("[1,2]")

    def test_invalid_json_rejected(self) -> None:
        with pytest.raises(InvalidVariables, match=MSG_BAD_JSON):
            validate_variables("not json")

    def test_absent_returns_empty(self) -> None:
        assert validate_variables(None) == {}

    def test_empty_string_returns_empty(self) -> None:
        assert validate_variables("") == {}

    @pytest.mark.parametrize("text", ["null", "3", '"zone"', "true"])
    def test_scalars_rejected(self, text: str) -> None:
        with pytest.raises(InvalidVariables, match=MSG_NOT_OBJECT):
            validate_variables(text)
