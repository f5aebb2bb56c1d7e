"""Exception hierarchy for aumai-cfguard.

Every message carried by these exceptions is safe to hand back across the
tool boundary: upstream error text never reaches them.
"""

from __future__ import annotations


class CfGuardError(Exception):
    """Base class for all errors raised by aumai-cfguard."""


class UpstreamError(CfGuardError):
    """The upstream API reported ``success=false`` or sent an unreadable body.

    Attributes:
        messages: Safe, code-mapped summaries (deduplicated, in order).
        codes: The raw numeric error codes reported upstream.
    """

    def __init__(self, messages: list[str], codes: list[int] | None = None) -> None:
        self.messages = list(messages)
        self.codes = list(codes or [])
        super().__init__(f"Cloudflare API error: {'; '.join(self.messages)}")


class TransportError(CfGuardError):
    """Network, TLS or timeout failure before a response was received."""


class RejectedQuery(CfGuardError):
    """A GraphQL query failed the read-only filter."""


class InvalidVariables(CfGuardError):
    """GraphQL variables were not a JSON object."""


class ParameterValidationError(CfGuardError):
    """Tool arguments did not match the operation's input schema."""


class UnknownOperationError(CfGuardError):
    """No operation is registered under the requested name."""


class RateLimitTimeout(CfGuardError):
    """A bounded ``acquire`` gave up before a token became available."""


class EmptyCredentialError(CfGuardError, ValueError):
    """The credential handed to the vault was empty."""


class MissingCredentialError(CfGuardError):
    """No API token was configured."""


__all__ = [
    "CfGuardError",
    "EmptyCredentialError",
    "InvalidVariables",
    "MissingCredentialError",
    "ParameterValidationError",
    "RateLimitTimeout",
    "RejectedQuery",
    "TransportError",
    "UnknownOperationError",
    "UpstreamError",
]
