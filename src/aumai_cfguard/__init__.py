"""AumAI CFGuard: a read-only, rate-limited, audited Cloudflare API gateway.

Public API::

    from aumai_cfguard import (
        AuditRecord,
        AuditSink,
        CredentialVault,
        GatewayConfig,
        OperationRegistry,
        OperationSpec,
        RequestGateway,
        TokenBucketRateLimiter,
        check_query,
        default_registry,
    )
"""

from aumai_cfguard.audit import AuditSink, is_sensitive_key, redact_parameters
from aumai_cfguard.catalog import build_catalog, default_registry
from aumai_cfguard.config import GatewayConfig
from aumai_cfguard.errors import (
    CfGuardError,
    EmptyCredentialError,
    InvalidVariables,
    MissingCredentialError,
    ParameterValidationError,
    RateLimitTimeout,
    RejectedQuery,
    TransportError,
    UnknownOperationError,
    UpstreamError,
)
from aumai_cfguard.gateway import RequestGateway
from aumai_cfguard.models import (
    AuditRecord,
    BucketSnapshot,
    OperationSpec,
    Outcome,
    ParameterSpec,
    QueryAcceptance,
    ResponseEnvelope,
)
from aumai_cfguard.operations import OperationRegistry
from aumai_cfguard.query_guard import check_query, validate_query, validate_variables
from aumai_cfguard.rate_limiter import TokenBucketRateLimiter
from aumai_cfguard.vault import CredentialVault

__version__ = "0.1.0"

__all__ = [
    # models
    "AuditRecord",
    "BucketSnapshot",
    "OperationSpec",
    "Outcome",
    "ParameterSpec",
    "QueryAcceptance",
    "ResponseEnvelope",
    # guards
    "AuditSink",
    "CredentialVault",
    "TokenBucketRateLimiter",
    "check_query",
    "is_sensitive_key",
    "redact_parameters",
    "validate_query",
    "validate_variables",
    # dispatch
    "GatewayConfig",
    "OperationRegistry",
    "RequestGateway",
    "build_catalog",
    "default_registry",
    # errors
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
