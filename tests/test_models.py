"""Tests for aumai_cfguard.models."""

from __future__ import annotations

import datetime

import pytest
from pydantic import ValidationError

from aumai_cfguard.models import (
    AuditRecord,
    BucketSnapshot,
    OperationSpec,
    Outcome,
    ParameterSpec,
    ResponseEnvelope,
)

# ---------------------------------------------------------------------------
# AuditRecord
# ---------------------------------------------------------------------------


class TestAuditRecord:
    def test_defaults(self) -> None:
        record = AuditRecord(operation="list_zones", outcome=Outcome.SUCCESS)
        assert record.parameters == {}
        assert record.error_summary is None
        assert record.duration_ms == 0
        assert record.timestamp.tzinfo is not None

    def test_operation_stripped(self) -> None:
        assert AuditRecord(operation="  get_zone ", outcome="success").operation == "get_zone"

    def test_blank_operation_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AuditRecord(operation="  ", outcome="success")

    def test_negative_duration_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AuditRecord(operation="op", outcome="failure", duration_ms=-1)

    def test_unknown_outcome_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AuditRecord(operation="op", outcome="partial")

    def test_json_dump_is_iso_timestamp(self) -> None:
        stamp = datetime.datetime(2026, 1, 2, 3, 4, 5, tzinfo=datetime.UTC)
        dumped = AuditRecord(operation="op", outcome="success", timestamp=stamp).model_dump(mode="json")
        assert dumped["timestamp"].startswith("2026-01-02T03:04:05")
        assert dumped["outcome"] == "success"


# ---------------------------------------------------------------------------
# BucketSnapshot
# ---------------------------------------------------------------------------


class TestBucketSnapshot:
    def test_valid(self) -> None:
        snap = BucketSnapshot(capacity=10, tokens=3.5, refill_rate=1.0, last_refill=0.0)
        assert snap.tokens == 3.5

    def test_tokens_above_capacity_rejected(self) -> None:
        with pytest.raises(ValidationError, match="exceed capacity"):
            BucketSnapshot(capacity=2, tokens=2.5, refill_rate=1.0, last_refill=0.0)

    def test_negative_tokens_rejected(self) -> None:
        with pytest.raises(ValidationError):
            BucketSnapshot(capacity=2, tokens=-0.1, refill_rate=1.0, last_refill=0.0)


# ---------------------------------------------------------------------------
# ResponseEnvelope
# ---------------------------------------------------------------------------


class TestResponseEnvelope:
    def test_success_envelope(self) -> None:
        env = ResponseEnvelope.model_validate(
            {
                "success": True,
                "errors": [],
                "messages": [],
                "result": [{"id": "z1"}],
                "result_info": {"page": 1, "per_page": 20, "total_pages": 1, "count": 1, "total_count": 1},
            }
        )
        assert env.result == [{"id": "z1"}]
        assert env.result_info is not None
        assert env.result_info.total_count == 1

    def test_null_lists_become_empty(self) -> None:
        env = ResponseEnvelope.model_validate({"success": False, "errors": None, "messages": None})
        assert env.errors == []
        assert env.messages == []

    def test_error_entries_parsed(self) -> None:
        env = ResponseEnvelope.model_validate(
            {"success": False, "errors": [{"code": 7003, "message": "no"}]}
        )
        assert env.errors[0].code == 7003

    def test_missing_success_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ResponseEnvelope.model_validate({"result": {}})


# ---------------------------------------------------------------------------
# ParameterSpec / OperationSpec
# ---------------------------------------------------------------------------


class TestParameterSpec:
    def test_path_string_schema(self) -> None:
        param = ParameterSpec(name="zone_id", max_length=64, description="The zone ID")
        assert param.json_schema() == {
            "type": "string",
            "description": "The zone ID",
            "minLength": 1,
            "maxLength": 64,
        }

    def test_query_integer_schema(self) -> None:
        param = ParameterSpec(name="per_page", location="query", type="integer", minimum=1, maximum=1000)
        assert param.json_schema() == {"type": "integer", "minimum": 1, "maximum": 1000}

    def test_query_key_prefers_wire_name(self) -> None:
        assert ParameterSpec(name="actor_email", location="query", wire_name="actor.email").query_key == "actor.email"
        assert ParameterSpec(name="name", location="query").query_key == "name"


class TestOperationSpec:
    def test_input_schema(self) -> None:
        spec = OperationSpec(
            name="get_zone",
            path="/zones/{zone_id}",
            parameters=[ParameterSpec(name="zone_id"), ParameterSpec(name="q", location="query", required=False)],
        )
        schema = spec.input_schema()
        assert schema["type"] == "object"
        assert set(schema["properties"]) == {"zone_id", "q"}
        assert schema["required"] == ["zone_id"]
        assert schema["additionalProperties"] is False

    def test_undeclared_placeholder_rejected(self) -> None:
        with pytest.raises(ValidationError, match="zone_id"):
            OperationSpec(name="get_zone", path="/zones/{zone_id}")

    def test_placeholder_declared_as_query_rejected(self) -> None:
        with pytest.raises(ValidationError, match="undeclared"):
            OperationSpec(
                name="get_zone",
                path="/zones/{zone_id}",
                parameters=[ParameterSpec(name="zone_id", location="query")],
            )

    def test_undeclared_part_placeholder_rejected(self) -> None:
        with pytest.raises(ValidationError, match="account_id"):
            OperationSpec(
                name="combo",
                kind="composite",
                path="/zones/{zone_id}",
                parameters=[ParameterSpec(name="zone_id")],
                parts={"a": "/accounts/{account_id}"},
            )

    def test_composite_without_parts_rejected(self) -> None:
        with pytest.raises(ValidationError, match="no parts"):
            OperationSpec(name="combo", kind="composite", path="/x")

    def test_unknown_optional_part_rejected(self) -> None:
        with pytest.raises(ValidationError, match="unknown parts"):
            OperationSpec(
                name="combo",
                kind="composite",
                path="/x",
                parts={"a": "/a"},
                optional_parts=["b"],
            )

    def test_blank_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            OperationSpec(name=" ", path="/x")
