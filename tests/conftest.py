"""Shared test fixtures for aumai-cfguard tests."""

from __future__ import annotations

import asyncio
import datetime
import json
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from aumai_cfguard.audit import AuditSink
from aumai_cfguard.catalog import default_registry
from aumai_cfguard.gateway import RequestGateway
from aumai_cfguard.operations import OperationRegistry
from aumai_cfguard.rate_limiter import TokenBucketRateLimiter
from aumai_cfguard.vault import CredentialVault

TEST_TOKEN = "cf-test-token-0123456789abcdef"
BASE_URL = "https://api.cloudflare.test/client/v4"

Handler = Callable[[httpx.Request], httpx.Response]


# ---------------------------------------------------------------------------
# Time
# ---------------------------------------------------------------------------


class FakeClock:
    """Monotonic clock whose ``sleep`` advances time instead of waiting."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds
        await asyncio.sleep(0)


@pytest.fixture()
def fake_clock() -> FakeClock:
    """A clock starting at t=0."""
    return FakeClock()


# ---------------------------------------------------------------------------
# Guards
# ---------------------------------------------------------------------------


@pytest.fixture()
def api_token() -> str:
    """The plaintext credential every test vault holds."""
    return TEST_TOKEN


@pytest.fixture()
def vault() -> CredentialVault:
    """A vault holding TEST_TOKEN."""
    return CredentialVault(TEST_TOKEN)


@pytest.fixture()
def limiter(fake_clock: FakeClock) -> TokenBucketRateLimiter:
    """A full default-sized bucket driven by fake_clock."""
    return TokenBucketRateLimiter(clock=fake_clock, sleep=fake_clock.sleep)


@pytest.fixture(scope="session")
def registry() -> OperationRegistry:
    """The full operation catalog."""
    return default_registry()


# ---------------------------------------------------------------------------
# Gateway with a stubbed upstream
# ---------------------------------------------------------------------------


@pytest.fixture()
def make_gateway(
    vault: CredentialVault,
    limiter: TokenBucketRateLimiter,
    fake_clock: FakeClock,
) -> Callable[..., RequestGateway]:
    """Return a factory building a gateway whose upstream is *handler*."""

    def factory(
        handler: Handler,
        *,
        rate_limiter: TokenBucketRateLimiter | None = None,
        acquire_timeout: float | None = None,
    ) -> RequestGateway:
        client = httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))
        return RequestGateway(
            vault,
            rate_limiter if rate_limiter is not None else limiter,
            AuditSink(),
            client,
            acquire_timeout=acquire_timeout,
            clock=fake_clock,
        )

    return factory


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def audit_log_file(tmp_path: Path) -> Path:
    """Write a captured stderr stream mixing audit records and other events."""
    recent = datetime.datetime.now(datetime.UTC).isoformat()
    lines = [
        {"event": "server_starting", "level": "info", "timestamp": "2026-10-18T09:00:00+00:00"},
        {
            "event": "audit",
            "type": "audit",
            "level": "info",
            "timestamp": "2000-01-01T00:00:00+00:00",
            "operation": "list_accounts",
            "parameters": {},
            "outcome": "success",
            "duration_ms": 40,
        },
        {
            "event": "audit",
            "type": "audit",
            "level": "info",
            "timestamp": recent,
            "operation": "get_zone",
            "parameters": {"zone_id": "abc"},
            "outcome": "failure",
            "error_summary": "Cloudflare API error: Resource not found",
            "duration_ms": 85,
        },
        {
            "event": "audit",
            "type": "audit",
            "level": "info",
            "timestamp": recent,
            "operation": "list_zones",
            "parameters": {"per_page": 5},
            "outcome": "success",
            "duration_ms": 120,
        },
    ]
    text = "\n".join(json.dumps(line) for line in lines)
    text += "\nTraceback (most recent call last):\n  not json\n"
    file_path = tmp_path / "cfguard.log"
    file_path.write_text(text, encoding="utf-8")
    return file_path
