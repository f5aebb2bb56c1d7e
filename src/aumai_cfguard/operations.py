"""Operation registry, argument validation and request rendering."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import quote

import jsonschema

from aumai_cfguard.errors import ParameterValidationError, UnknownOperationError
from aumai_cfguard.models import OperationSpec

_DOT_SEGMENTS = frozenset({".", ".."})


class OperationRegistry:
    """Register and look up :class:`~aumai_cfguard.models.OperationSpec` objects.

    Thread-safe.  Operations are keyed by name; re-registering with the same
    name overwrites the previous descriptor.

    Example::

        registry = OperationRegistry()
        registry.register(OperationSpec(name="list_accounts", path="/accounts"))
        spec = registry.get("list_accounts")
    """

    def __init__(self, specs: Iterable[OperationSpec] = ()) -> None:
        self._specs: dict[str, OperationSpec] = {}
        self._lock = threading.Lock()
        for spec in specs:
            self.register(spec)

    def register(self, spec: OperationSpec) -> None:
        """Add or replace an operation descriptor."""
        with self._lock:
            self._specs[spec.name] = spec

    def get(self, name: str) -> OperationSpec:
        """Return the descriptor for *name*.

        Raises:
            UnknownOperationError: If no operation is registered under *name*.
        """
        with self._lock:
            spec = self._specs.get(name)
        if spec is None:
            raise UnknownOperationError(f"unknown operation '{name}'")
        return spec

    def all_names(self) -> list[str]:
        """Return a sorted list of all registered operation names."""
        with self._lock:
            return sorted(self._specs.keys())

    def all_specs(self) -> list[OperationSpec]:
        """Return all descriptors sorted by name."""
        with self._lock:
            return [self._specs[name] for name in sorted(self._specs)]

    def search(self, term: str) -> list[OperationSpec]:
        """Return descriptors whose name, path or description contains *term*."""
        needle = term.lower()
        return [
            spec
            for spec in self.all_specs()
            if needle in spec.name.lower()
            or needle in spec.path.lower()
            or needle in spec.description.lower()
        ]

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._specs

    def __len__(self) -> int:
        with self._lock:
            return len(self._specs)


def validate_arguments(spec: OperationSpec, arguments: Mapping[str, Any] | None) -> dict[str, Any]:
    """Check *arguments* against the operation's JSON Schema.

    ``None`` values are treated as absent so hosts that send explicit nulls
    for optional arguments are accepted.

    Returns:
        The cleaned argument dict.

    Raises:
        ParameterValidationError: On any schema violation.
    """
    cleaned = {k: v for k, v in (arguments or {}).items() if v is not None}
    error = _validate_json_schema(cleaned, spec.input_schema())
    if error is not None:
        raise ParameterValidationError(f"invalid arguments for '{spec.name}': {error}")
    return cleaned


def render_path(template: str, spec: OperationSpec, arguments: Mapping[str, Any]) -> str:
    """Substitute path parameters into *template*, percent-encoding each value.

    Raises:
        ParameterValidationError: If a value is a bare dot segment.
    """
    values: dict[str, str] = {}
    for param in spec.parameters:
        if param.location != "path" or param.name not in arguments:
            continue
        value = arguments[param.name]
        raw = str(int(value)) if param.type == "integer" else str(value)
        if raw in _DOT_SEGMENTS:
            raise ParameterValidationError(
                f"invalid arguments for '{spec.name}': '{param.name}' must not be '{raw}'"
            )
        values[param.name] = quote(raw, safe="")
    return template.format(**values)


def build_query(spec: OperationSpec, arguments: Mapping[str, Any]) -> dict[str, Any]:
    """Return the query-string mapping for *arguments*, using wire names."""
    query: dict[str, Any] = {}
    for param in spec.parameters:
        value = arguments.get(param.name)
        if param.location != "query" or value is None:
            continue
        # JSON numbers such as 50.0 pass an integer schema.
        query[param.query_key] = int(value) if param.type == "integer" else value
    return query


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------


def _validate_json_schema(data: dict[str, Any], schema: dict[str, Any]) -> str | None:
    """Validate *data* against *schema* using jsonschema.

    Returns:
        An error message string, or ``None`` when validation passes.
    """
    try:
        jsonschema.validate(instance=data, schema=schema)
        return None
    except jsonschema.ValidationError as exc:
        return str(exc.message)
    except jsonschema.SchemaError as exc:
        return f"invalid operation schema definition: {exc.message!s}"


__all__ = [
    "OperationRegistry",
    "build_query",
    "render_path",
    "validate_arguments",
]
