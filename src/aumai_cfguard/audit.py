"""Structured, redacted audit records for aumai-cfguard."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import structlog

from aumai_cfguard.models import AuditRecord, Outcome

REDACTED = "[REDACTED]"

# Substring match on purpose: new parameter names appear over time.
SENSITIVE_KEY_TERMS: tuple[str, ...] = (
    "api_key",
    "token",
    "secret",
    "password",
    "key",
    "credential",
)

_fallback = logging.getLogger(__name__)


def is_sensitive_key(key: object) -> bool:
    """Return True when *key* looks like it names a credential."""
    lowered = str(key).lower()
    return any(term in lowered for term in SENSITIVE_KEY_TERMS)


def redact_parameters(parameters: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of *parameters* with sensitive values replaced.

    Nested mappings, including mappings inside lists, are redacted
    recursively.  The input is never modified.
    """
    return {
        key: REDACTED if is_sensitive_key(key) else _redact_value(value)
        for key, value in parameters.items()
    }


def _redact_value(value: Any) -> Any:  # noqa: ANN401
    if isinstance(value, Mapping):
        return redact_parameters(value)
    if isinstance(value, (list, tuple)):
        return [_redact_value(item) for item in value]
    return value


class AuditSink:
    """Emit one self-contained audit line per outbound call attempt.

    Records go through a structlog logger which :func:`aumai_cfguard.log.configure_logging`
    points at stderr, away from the stdio channel the tool host reads.
    :meth:`record` never raises; an emission failure is reported through the
    standard ``logging`` module instead.

    Example::

        sink = AuditSink()
        sink.record("list_zones", {"per_page": 50}, Outcome.SUCCESS, duration_ms=112)
    """

    def __init__(self, logger: Any | None = None) -> None:  # noqa: ANN401
        self._logger = logger if logger is not None else structlog.get_logger("aumai_cfguard.audit")

    def record(
        self,
        operation: str,
        parameters: Mapping[str, Any] | None,
        outcome: Outcome | str,
        error_summary: str | None = None,
        duration_ms: int | float = 0,
    ) -> AuditRecord | None:
        """Redact, build and emit an :class:`~aumai_cfguard.models.AuditRecord`.

        Returns:
            The emitted record, or ``None`` when building or emitting it failed.
        """
        try:
            entry = AuditRecord(
                operation=operation,
                parameters=redact_parameters(parameters or {}),
                outcome=Outcome(outcome),
                error_summary=error_summary,
                duration_ms=max(0, int(round(duration_ms))),
            )
            fields = entry.model_dump(mode="json", exclude_none=True)
            self._logger.info("audit", type="audit", **fields)
            return entry
        except Exception:  # noqa: BLE001
            _fallback.exception("failed to emit audit record for %r", operation)
            return None


__all__ = [
    "REDACTED",
    "SENSITIVE_KEY_TERMS",
    "AuditSink",
    "is_sensitive_key",
    "redact_parameters",
]
