"""Environment-driven configuration for aumai-cfguard.

Environment variables:
  CLOUDFLARE_API_TOKEN     bearer token (required)
  CLOUDFLARE_API_BASE_URL  upstream base URL
  CFGUARD_RATE_CAPACITY    token-bucket burst size
  CFGUARD_REFILL_RATE      tokens added per second
  CFGUARD_HTTP_TIMEOUT     per-request timeout in seconds
  CFGUARD_LOG_LEVEL        DEBUG, INFO, WARNING, ERROR
  CFGUARD_LOG_FORMAT       json or console
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Literal
from urllib.parse import urlsplit

from pydantic import BaseModel, Field, SecretStr, field_validator

from aumai_cfguard.errors import MissingCredentialError
from aumai_cfguard.rate_limiter import DEFAULT_CAPACITY, DEFAULT_REFILL_RATE

CLOUDFLARE_API_BASE = "https://api.cloudflare.com/client/v4"

TOKEN_ENV_VAR = "CLOUDFLARE_API_TOKEN"

_LOOPBACK_HOSTS = frozenset({"localhost", "127.0.0.1", "::1"})

_ENV_FIELDS: dict[str, str] = {
    "CLOUDFLARE_API_BASE_URL": "base_url",
    "CFGUARD_RATE_CAPACITY": "rate_capacity",
    "CFGUARD_REFILL_RATE": "refill_rate",
    "CFGUARD_HTTP_TIMEOUT": "http_timeout",
    "CFGUARD_LOG_LEVEL": "log_level",
    "CFGUARD_LOG_FORMAT": "log_format",
}


class GatewayConfig(BaseModel):
    """Settings for one gateway process."""

    api_token: SecretStr
    base_url: str = CLOUDFLARE_API_BASE
    rate_capacity: int = Field(default=DEFAULT_CAPACITY, ge=1)
    refill_rate: float = Field(default=DEFAULT_REFILL_RATE, gt=0.0)
    http_timeout: float = Field(default=30.0, gt=0.0)
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    @field_validator("api_token")
    @classmethod
    def token_not_blank(cls, value: SecretStr) -> SecretStr:
        """Reject blank tokens."""
        if not value.get_secret_value().strip():
            raise ValueError("api_token must not be blank")
        return value

    @field_validator("base_url")
    @classmethod
    def base_url_https(cls, value: str) -> str:
        """Require an https URL without a trailing slash.

        Plain ``http://`` is accepted only for loopback hosts, so the bearer
        token never crosses the network in cleartext.
        """
        stripped = value.strip().rstrip("/")
        parts = urlsplit(stripped)
        if not parts.hostname:
            raise ValueError("base_url must be an absolute https URL")
        if parts.scheme == "https":
            return stripped
        if parts.scheme == "http" and parts.hostname in _LOOPBACK_HOSTS:
            return stripped
        raise ValueError("base_url must use https (http is allowed for loopback hosts only)")

    @field_validator("log_level")
    @classmethod
    def log_level_upper(cls, value: str) -> str:
        return value.strip().upper()

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GatewayConfig:
        """Build a config from environment variables.

        Raises:
            MissingCredentialError: If ``CLOUDFLARE_API_TOKEN`` is unset or blank.
            pydantic.ValidationError: If any other value is malformed.
        """
        env = os.environ if environ is None else environ
        token = env.get(TOKEN_ENV_VAR, "")
        if not token.strip():
            raise MissingCredentialError(f"{TOKEN_ENV_VAR} environment variable is required")
        values: dict[str, object] = {"api_token": token}
        for var, field_name in _ENV_FIELDS.items():
            raw = env.get(var)
            if raw is not None and raw.strip():
                values[field_name] = raw.strip()
        return cls.model_validate(values)


__all__ = ["CLOUDFLARE_API_BASE", "TOKEN_ENV_VAR", "GatewayConfig"]
