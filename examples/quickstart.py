"""aumai-cfguard quickstart example.

Demonstrates:
- Browsing the operation catalog.
- Checking GraphQL queries against the read-only filter.
- Holding the API token in a CredentialVault.
- Redacting audit parameters.
- Token-bucket rate limiting.
- Calling operations through a RequestGateway against a stubbed upstream.

Run this file directly (no network access or real token needed)::

    python examples/quickstart.py
"""

from __future__ import annotations

import asyncio
import json

import httpx

from aumai_cfguard import (
    AuditSink,
    CredentialVault,
    RequestGateway,
    TokenBucketRateLimiter,
    UpstreamError,
    check_query,
    default_registry,
    redact_parameters,
)
from aumai_cfguard.log import configure_logging

# ---------------------------------------------------------------------------
# Demo 1: Operation catalog
# ---------------------------------------------------------------------------


def demo_catalog() -> None:
    """List a few catalog entries and show one input schema."""
    print("=" * 60)
    print("Demo 1: Operation catalog")
    print("=" * 60)

    registry = default_registry()
    print(f"  {len(registry)} operations registered")
    for spec in registry.search("dns")[:5]:
        print(f"    {spec.name:<32} {spec.method} {spec.path}")

    schema = registry.get("list_zones").input_schema()
    print("  list_zones input schema:")
    print("    " + json.dumps(schema["properties"]["per_page"]))
    print()


# ---------------------------------------------------------------------------
# Demo 2: GraphQL read-only filter
# ---------------------------------------------------------------------------


def demo_query_guard() -> None:
    print("=" * 60)
    print("Demo 2: GraphQL read-only filter")
    print("=" * 60)

    for query in (
        "query { viewer { zones { zoneTag } } }",
        "{ viewer { accounts { accountTag } } }",
        "{ __schema { types { name } } }",
        "mutation { deleteZone }",
    ):
        decision = check_query(query)
        status = "ACCEPT" if decision.accepted else "REJECT"
        reason = f" ({decision.reason})" if decision.reason else ""
        print(f"  [{status}] {query}{reason}")
    print()


# ---------------------------------------------------------------------------
# Demo 3: Vault and redaction
# ---------------------------------------------------------------------------


def demo_vault_and_redaction() -> None:
    print("=" * 60)
    print("Demo 3: CredentialVault and parameter redaction")
    print("=" * 60)

    vault = CredentialVault("example-token-not-real")
    print(f"  repr: {vault!r}")
    with vault.revealed() as token:
        print(f"  revealed {len(token)} bytes for one header")
    print(f"  buffer after use is zeroed: {not any(token)}")

    params = {"zone_id": "023e105f", "api_key": "abc", "nested": {"user_password": "x"}}
    print(f"  redacted: {redact_parameters(params)}")
    print()


# ---------------------------------------------------------------------------
# Demo 4: Rate limiting
# ---------------------------------------------------------------------------


async def demo_rate_limiting() -> None:
    print("=" * 60)
    print("Demo 4: TokenBucketRateLimiter")
    print("=" * 60)

    limiter = TokenBucketRateLimiter(capacity=3, refill_rate=20.0)
    loop = asyncio.get_running_loop()
    start = loop.time()
    for i in range(5):
        await limiter.acquire()
        print(f"  call {i + 1} admitted at +{(loop.time() - start) * 1000:.0f}ms")
    print(f"  snapshot: {limiter.snapshot().model_dump()}")
    print()


# ---------------------------------------------------------------------------
# Demo 5: Gateway against a stubbed upstream
# ---------------------------------------------------------------------------


def _stub_upstream(request: httpx.Request) -> httpx.Response:
    if request.url.path.endswith("/zones/forbidden"):
        return httpx.Response(
            403,
            json={"success": False, "errors": [{"code": 7003, "message": "internal detail"}]},
        )
    return httpx.Response(
        200,
        json={"success": True, "errors": [], "messages": [], "result": [{"id": "z1", "name": "example.com"}]},
    )


async def demo_gateway() -> None:
    """Audit lines for each call appear on stderr."""
    print("=" * 60)
    print("Demo 5: RequestGateway (audit records go to stderr)")
    print("=" * 60)

    registry = default_registry()
    client = httpx.AsyncClient(
        base_url="https://api.cloudflare.com/client/v4",
        transport=httpx.MockTransport(_stub_upstream),
    )
    gateway = RequestGateway(
        CredentialVault("example-token-not-real"),
        TokenBucketRateLimiter(),
        AuditSink(),
        client,
    )
    async with gateway:
        zones = await gateway.invoke(registry.get("list_zones"), {"per_page": 5})
        print(f"  list_zones -> {zones['result']}")
        try:
            await gateway.invoke(registry.get("get_zone"), {"zone_id": "forbidden"})
        except UpstreamError as exc:
            print(f"  get_zone -> {exc}")
    print()


def main() -> None:
    configure_logging("INFO", json_output=True)
    demo_catalog()
    demo_query_guard()
    demo_vault_and_redaction()
    asyncio.run(demo_rate_limiting())
    asyncio.run(demo_gateway())


if __name__ == "__main__":
    main()
