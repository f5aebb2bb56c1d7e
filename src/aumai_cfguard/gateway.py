"""Guarded request dispatch for the Cloudflare API."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Callable, Mapping
from typing import Any

import httpx
import pydantic
import structlog

from aumai_cfguard.audit import AuditSink
from aumai_cfguard.config import GatewayConfig
from aumai_cfguard.errors import CfGuardError, TransportError, UpstreamError
from aumai_cfguard.models import EnvelopeError, OperationSpec, Outcome, ResponseEnvelope
from aumai_cfguard.operations import build_query, render_path, validate_arguments
from aumai_cfguard.query_guard import validate_query, validate_variables
from aumai_cfguard.rate_limiter import TokenBucketRateLimiter
from aumai_cfguard.vault import CredentialVault

GRAPHQL_PATH = "/graphql"

GENERIC_ERROR_MESSAGE = "An error occurred processing your request"

# Upstream error codes whose meaning is safe to pass back to the caller.
SAFE_ERROR_MESSAGES: Mapping[int, str] = {
    6003: "Invalid request parameters",
    6100: "Invalid request headers",
    6200: "Invalid request body",
    7000: "Authentication error",
    7003: "Forbidden - insufficient permissions",
    9109: "Resource not found",
    10000: "Rate limit exceeded",
}

logger = structlog.get_logger(__name__)


def safe_error_messages(errors: list[EnvelopeError]) -> list[str]:
    """Map upstream errors to allowlisted summaries, deduplicated in order.

    Upstream ``message`` text is never used.  An empty error list yields the
    generic message.
    """
    messages: list[str] = []
    for error in errors:
        message = SAFE_ERROR_MESSAGES.get(error.code, GENERIC_ERROR_MESSAGE)
        if message not in messages:
            messages.append(message)
    return messages or [GENERIC_ERROR_MESSAGE]


class RequestGateway:
    """Single choke point for every outbound call.

    Each call passes through the same sequence: rate-limit admission, a
    transient credential reveal for the ``Authorization`` header, the HTTP
    exchange, envelope parsing with safe error mapping, and exactly one audit
    record whatever the outcome.

    Example::

        config = GatewayConfig.from_env()
        async with RequestGateway.from_config(config) as gateway:
            zones = await gateway.invoke(registry.get("list_zones"), {"per_page": 5})
    """

    def __init__(
        self,
        vault: CredentialVault,
        limiter: TokenBucketRateLimiter,
        sink: AuditSink,
        client: httpx.AsyncClient,
        *,
        acquire_timeout: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._vault = vault
        self._limiter = limiter
        self._sink = sink
        self._client = client
        self._acquire_timeout = acquire_timeout
        self._clock = clock

    @classmethod
    def from_config(
        cls,
        config: GatewayConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> RequestGateway:
        """Compose a gateway from *config*.

        *transport* replaces the network transport, which lets tests plug in
        :class:`httpx.MockTransport`.
        """
        vault = CredentialVault(config.api_token.get_secret_value())
        limiter = TokenBucketRateLimiter(
            capacity=config.rate_capacity, refill_rate=config.refill_rate
        )
        client = httpx.AsyncClient(
            base_url=config.base_url,
            timeout=config.http_timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )
        return cls(vault, limiter, AuditSink(), client)

    @property
    def limiter(self) -> TokenBucketRateLimiter:
        return self._limiter

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> RequestGateway:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    async def request(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
        *,
        operation: str | None = None,
        audit_parameters: Mapping[str, Any] | None = None,
    ) -> Any:  # noqa: ANN401
        """Issue one guarded REST call and return the decoded envelope.

        Args:
            method: HTTP method.
            path: Path relative to the API base, already percent-encoded.
            params: Query-string parameters; ``None`` values are dropped.
            operation: Name recorded in the audit line; defaults to
                ``"METHOD /path"``.
            audit_parameters: Parameters recorded (after redaction) in the
                audit line; defaults to *params*.

        Raises:
            UpstreamError: On ``success=false`` or an unreadable body.
            TransportError: When no response was received.
            RateLimitTimeout: When an acquire timeout is configured and expires.
        """
        query = {k: v for k, v in (params or {}).items() if v is not None}
        return await self._call(
            method.upper(),
            path,
            query=query,
            operation=operation,
            audit_parameters=query if audit_parameters is None else audit_parameters,
            envelope=True,
        )

    async def graphql(
        self,
        query: str,
        variables: str | None = None,
        *,
        operation: str | None = None,
    ) -> Any:  # noqa: ANN401
        """Send a read-only GraphQL query and return the raw response body.

        The query guard runs before a rate-limit token is taken, so rejected
        queries cost nothing and are not audited as outbound attempts.

        Raises:
            RejectedQuery: If the query fails the read-only filter.
            InvalidVariables: If *variables* is not a JSON object string.
        """
        try:
            text = validate_query(query)
            body: dict[str, Any] = {"query": text}
            if variables:
                body["variables"] = validate_variables(variables)
        except CfGuardError as exc:
            logger.warning("graphql_rejected", reason=str(exc))
            raise
        return await self._call(
            "POST",
            GRAPHQL_PATH,
            json_body=body,
            operation=operation or f"POST {GRAPHQL_PATH}",
            audit_parameters={
                "query_length": len(text),
                "has_variables": bool(variables),
            },
            envelope=False,
        )

    async def invoke(self, spec: OperationSpec, arguments: Mapping[str, Any] | None = None) -> Any:  # noqa: ANN401
        """Validate *arguments* against *spec* and dispatch it.

        Returns:
            The raw upstream JSON for REST and GraphQL operations, or a
            ``{part: result}`` mapping for composite operations.

        Raises:
            ParameterValidationError: Before any network call when the
                arguments do not match the operation's schema.
        """
        cleaned = validate_arguments(spec, arguments)
        if spec.kind == "graphql":
            return await self.graphql(
                cleaned["query"], cleaned.get("variables"), operation=spec.name
            )
        if spec.kind == "composite":
            return await self._invoke_composite(spec, cleaned)
        path = render_path(spec.path, spec, cleaned)
        return await self.request(
            spec.method,
            path,
            build_query(spec, cleaned),
            operation=spec.name,
            audit_parameters=cleaned,
        )

    async def _invoke_composite(self, spec: OperationSpec, arguments: dict[str, Any]) -> dict[str, Any]:
        paths = {part: render_path(template, spec, arguments) for part, template in spec.parts.items()}

        async def fetch(part: str) -> Any:  # noqa: ANN401
            try:
                payload = await self.request(
                    spec.method,
                    paths[part],
                    operation=f"{spec.name}:{part}",
                    audit_parameters=arguments,
                )
            except CfGuardError:
                if part in spec.optional_parts:
                    return None
                raise
            return payload.get("result")

        names = list(paths)
        results = await asyncio.gather(*(fetch(name) for name in names))
        return dict(zip(names, results))

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    async def _call(
        self,
        method: str,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        json_body: Mapping[str, Any] | None = None,
        operation: str | None,
        audit_parameters: Mapping[str, Any],
        envelope: bool,
    ) -> Any:  # noqa: ANN401
        await self._limiter.acquire(timeout=self._acquire_timeout)

        started = self._clock()
        outcome = Outcome.FAILURE
        error_summary: str | None = None
        try:
            response = await self._send(method, path, query, json_body)
            payload = _decode(response)
            if envelope:
                _check_envelope(payload)
            elif isinstance(payload, dict) and payload.get("success") is False:
                _check_envelope(payload)
            outcome = Outcome.SUCCESS
            return payload
        except CfGuardError as exc:
            error_summary = str(exc)
            raise
        except Exception as exc:
            error_summary = type(exc).__name__
            raise
        finally:
            self._sink.record(
                operation or f"{method} {path}",
                audit_parameters,
                outcome,
                error_summary=error_summary,
                duration_ms=(self._clock() - started) * 1000,
            )

    async def _send(
        self,
        method: str,
        path: str,
        query: Mapping[str, Any] | None,
        json_body: Mapping[str, Any] | None,
    ) -> httpx.Response:
        with self._vault.revealed() as token:
            headers = {
                "Authorization": b"Bearer " + bytes(token),
                "Content-Type": "application/json",
            }
            try:
                return await self._client.request(
                    method,
                    path,
                    params=dict(query) if query else None,
                    json=dict(json_body) if json_body is not None else None,
                    headers=headers,
                )
            except httpx.HTTPError as exc:
                raise TransportError(
                    f"Request to Cloudflare API failed: {type(exc).__name__}: {exc}"
                ) from exc


def _decode(response: httpx.Response) -> Any:  # noqa: ANN401
    try:
        return response.json()
    except ValueError as exc:
        raise UpstreamError([GENERIC_ERROR_MESSAGE]) from exc


def _check_envelope(payload: Any) -> ResponseEnvelope:  # noqa: ANN401
    try:
        parsed = ResponseEnvelope.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise UpstreamError([GENERIC_ERROR_MESSAGE]) from exc
    if not parsed.success:
        raise UpstreamError(
            safe_error_messages(parsed.errors),
            codes=[error.code for error in parsed.errors],
        )
    return parsed


__all__ = [
    "GENERIC_ERROR_MESSAGE",
    "GRAPHQL_PATH",
    "SAFE_ERROR_MESSAGES",
    "RequestGateway",
    "safe_error_messages",
]
