"""Pydantic models for aumai-cfguard."""

from __future__ import annotations

import datetime
import re
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

PATH_PLACEHOLDER = re.compile(r"\{([a-z0-9_]+)\}")


class Outcome(str, Enum):
    """Result of one outbound call attempt."""

    SUCCESS = "success"
    FAILURE = "failure"


class AuditRecord(BaseModel):
    """One redacted record per outbound call attempt."""

    timestamp: datetime.datetime = Field(
        default_factory=lambda: datetime.datetime.now(datetime.UTC)
    )
    operation: str = Field(..., description="Operation name or 'METHOD /path'")
    parameters: dict[str, Any] = Field(default_factory=dict)
    outcome: Outcome
    error_summary: str | None = None
    duration_ms: int = Field(default=0, ge=0)

    @field_validator("operation")
    @classmethod
    def operation_not_empty(cls, value: str) -> str:
        """Reject blank operation identifiers."""
        stripped = value.strip()
        if not stripped:
            raise ValueError("operation must not be blank")
        return stripped


class QueryAcceptance(BaseModel):
    """Pass/fail decision for a GraphQL query, with a reason on failure."""

    accepted: bool
    reason: str | None = None


class BucketSnapshot(BaseModel):
    """Point-in-time view of a token bucket."""

    capacity: int = Field(..., ge=1)
    tokens: float = Field(..., ge=0.0)
    refill_rate: float = Field(..., gt=0.0, description="Tokens added per second")
    last_refill: float

    @model_validator(mode="after")
    def tokens_within_capacity(self) -> BucketSnapshot:
        """Enforce ``tokens <= capacity``."""
        if self.tokens > self.capacity:
            raise ValueError("tokens must not exceed capacity")
        return self


# ---------------------------------------------------------------------------
# Upstream response envelope
# ---------------------------------------------------------------------------


class EnvelopeError(BaseModel):
    code: int = 0
    message: str = ""


class ResultInfo(BaseModel):
    """Pagination block attached to list responses."""

    page: int | None = None
    per_page: int | None = None
    total_pages: int | None = None
    count: int | None = None
    total_count: int | None = None


class ResponseEnvelope(BaseModel):
    """The fixed-shape JSON wrapper returned by every REST endpoint."""

    success: bool
    errors: list[EnvelopeError] = Field(default_factory=list)
    messages: list[Any] = Field(default_factory=list)
    result: Any = None
    result_info: ResultInfo | None = None

    @field_validator("errors", "messages", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        """Some endpoints send ``null`` instead of an empty list."""
        return [] if value is None else value


# ---------------------------------------------------------------------------
# Operation descriptors
# ---------------------------------------------------------------------------


class ParameterSpec(BaseModel):
    """One typed tool argument and where it goes in the outbound request."""

    name: str
    location: Literal["path", "query", "body"] = "path"
    type: Literal["string", "integer"] = "string"
    required: bool = True
    description: str = ""
    max_length: int | None = Field(default=None, ge=1)
    minimum: int | None = None
    maximum: int | None = None
    wire_name: str | None = Field(
        default=None,
        description="Query-string key when it differs from the argument name",
    )

    @property
    def query_key(self) -> str:
        return self.wire_name or self.name

    def json_schema(self) -> dict[str, Any]:
        """Return the JSON Schema fragment for this parameter."""
        schema: dict[str, Any] = {"type": self.type}
        if self.description:
            schema["description"] = self.description
        if self.type == "string":
            if self.location == "path":
                schema["minLength"] = 1
            if self.max_length is not None:
                schema["maxLength"] = self.max_length
        else:
            if self.minimum is not None:
                schema["minimum"] = self.minimum
            if self.maximum is not None:
                schema["maximum"] = self.maximum
        return schema


class OperationSpec(BaseModel):
    """Declarative description of one read-only upstream operation.

    ``path`` is a template whose ``{placeholders}`` must each be declared as a
    path parameter.  Composite operations fan out to ``parts`` (part name to
    path template) and merge the results; parts listed in ``optional_parts``
    yield ``None`` instead of failing the whole operation.
    """

    name: str = Field(..., description="Tool name, e.g. 'list_zones'")
    description: str = ""
    method: Literal["GET", "POST"] = "GET"
    path: str
    kind: Literal["rest", "composite", "graphql"] = "rest"
    parameters: list[ParameterSpec] = Field(default_factory=list)
    parts: dict[str, str] = Field(default_factory=dict)
    optional_parts: list[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, value: str) -> str:
        """Reject blank operation names."""
        stripped = value.strip()
        if not stripped:
            raise ValueError("operation name must not be blank")
        return stripped

    @model_validator(mode="after")
    def placeholders_declared(self) -> OperationSpec:
        """Every path placeholder needs a matching path parameter."""
        declared = {p.name for p in self.parameters if p.location == "path"}
        templates = [self.path, *self.parts.values()]
        for template in templates:
            missing = set(PATH_PLACEHOLDER.findall(template)) - declared
            if missing:
                raise ValueError(
                    f"operation '{self.name}' path uses undeclared parameters: "
                    f"{', '.join(sorted(missing))}"
                )
        if self.kind == "composite" and not self.parts:
            raise ValueError(f"composite operation '{self.name}' has no parts")
        unknown = set(self.optional_parts) - set(self.parts)
        if unknown:
            raise ValueError(
                f"operation '{self.name}' marks unknown parts optional: "
                f"{', '.join(sorted(unknown))}"
            )
        return self

    def input_schema(self) -> dict[str, Any]:
        """Return the JSON Schema object describing this operation's arguments."""
        return {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.parameters},
            "required": [p.name for p in self.parameters if p.required],
            "additionalProperties": False,
        }


__all__ = [
    "PATH_PLACEHOLDER",
    "AuditRecord",
    "BucketSnapshot",
    "EnvelopeError",
    "OperationSpec",
    "Outcome",
    "ParameterSpec",
    "QueryAcceptance",
    "ResponseEnvelope",
    "ResultInfo",
]
