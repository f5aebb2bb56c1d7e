"""Read-only filter for the GraphQL analytics endpoint.

This is a static blocklist applied before anything is sent upstream.  It
does not parse GraphQL and is not a substitute for server-side
authorization; it keeps obviously disallowed request shapes off the wire.
"""

from __future__ import annotations

import json
import re
from typing import Any, cast

from aumai_cfguard.errors import InvalidVariables, RejectedQuery
from aumai_cfguard.models import QueryAcceptance

BLOCKED_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"__schema", re.IGNORECASE),
    re.compile(r"__type", re.IGNORECASE),
    re.compile(r"\bmutation\b\s*(?:[_a-z][_a-z0-9]*\s*)?[({@]", re.IGNORECASE),
    re.compile(r"\bsubscription\b\s*(?:[_a-z][_a-z0-9]*\s*)?[({@]", re.IGNORECASE),
)

_READ_OPENER = re.compile(r"^(?:query\b|\{)", re.IGNORECASE)

MSG_NOT_A_STRING = "GraphQL query must be a non-empty string"
MSG_EMPTY = "GraphQL query cannot be empty"
MSG_DISALLOWED = "GraphQL query contains disallowed operations"
MSG_NOT_READ_ONLY = "GraphQL query must be a read-only query operation"
MSG_BAD_JSON = "Invalid JSON in GraphQL variables parameter"
MSG_NOT_OBJECT = "GraphQL variables must be a JSON object"


def check_query(text: object) -> QueryAcceptance:
    """Decide whether *text* may be sent to the GraphQL endpoint.

    Args:
        text: The candidate query.

    Returns:
        :class:`~aumai_cfguard.models.QueryAcceptance` with a static
        ``reason`` when rejected.
    """
    if not isinstance(text, str) or not text:
        return QueryAcceptance(accepted=False, reason=MSG_NOT_A_STRING)

    trimmed = text.strip()
    if not trimmed:
        return QueryAcceptance(accepted=False, reason=MSG_EMPTY)

    for pattern in BLOCKED_PATTERNS:
        if pattern.search(trimmed):
            return QueryAcceptance(accepted=False, reason=MSG_DISALLOWED)

    if not _READ_OPENER.match(trimmed):
        return QueryAcceptance(accepted=False, reason=MSG_NOT_READ_ONLY)

    return QueryAcceptance(accepted=True)


def validate_query(text: object) -> str:
    """Return the trimmed query or raise :class:`RejectedQuery`."""
    decision = check_query(text)
    if not decision.accepted:
        raise RejectedQuery(decision.reason or MSG_DISALLOWED)
    return cast(str, text).strip()


def validate_variables(text: str | None) -> dict[str, Any]:
    """Parse GraphQL variables from a JSON string.

    Returns ``{}`` when *text* is absent or empty.

    Raises:
        InvalidVariables: If *text* is not valid JSON or not a JSON object.
    """
    if not text:
        return {}
    try:
        parsed: Any = json.loads(text)
    except (TypeError, json.JSONDecodeError) as exc:
        raise InvalidVariables(MSG_BAD_JSON) from exc
    if not isinstance(parsed, dict):
        raise InvalidVariables(MSG_NOT_OBJECT)
    return parsed


__all__ = [
    "BLOCKED_PATTERNS",
    "check_query",
    "validate_query",
    "validate_variables",
]
