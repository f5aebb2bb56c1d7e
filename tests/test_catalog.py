"""Tests for aumai_cfguard.catalog."""

from __future__ import annotations

import jsonschema
import pytest

from aumai_cfguard.catalog import (
    GRAPHQL_OPERATION,
    MAX_ID_LENGTH,
    PATH_PARAMETER_DESCRIPTIONS,
    build_catalog,
    path_parameter,
    query_parameter,
    rest_operation,
)
from aumai_cfguard.models import PATH_PLACEHOLDER
from aumai_cfguard.operations import OperationRegistry


class TestCatalogShape:
    def test_operation_names_unique(self) -> None:
        names = [spec.name for spec in build_catalog()]
        assert len(names) == len(set(names))

    def test_registry_holds_whole_catalog(self, registry: OperationRegistry) -> None:
        assert len(registry) == len(build_catalog())
        assert len(registry) >= 350

    def test_every_operation_is_read_only(self, registry: OperationRegistry) -> None:
        for spec in registry.all_specs():
            if spec.kind == "graphql":
                assert spec.method == "POST"
                assert spec.path == "/graphql"
            else:
                assert spec.method == "GET", spec.name

    def test_every_operation_described(self, registry: OperationRegistry) -> None:
        assert all(spec.description for spec in registry.all_specs())

    def test_every_placeholder_has_a_description(self, registry: OperationRegistry) -> None:
        for spec in registry.all_specs():
            for name in PATH_PLACEHOLDER.findall(spec.path):
                assert name in PATH_PARAMETER_DESCRIPTIONS, f"{spec.name}: {name}"

    def test_input_schemas_are_valid_json_schema(self, registry: OperationRegistry) -> None:
        for spec in registry.all_specs():
            jsonschema.Draft202012Validator.check_schema(spec.input_schema())

    def test_identifiers_capped(self, registry: OperationRegistry) -> None:
        schema = registry.get("get_zone").input_schema()
        assert schema["properties"]["zone_id"]["maxLength"] == MAX_ID_LENGTH
        assert schema["required"] == ["zone_id"]

    @pytest.mark.parametrize(
        "name",
        [
            "list_accounts",
            "get_account",
            "get_audit_logs",
            "list_zones",
            "get_zone",
            "get_zone_settings",
            "list_dns_records",
            "get_ssl_settings",
            "get_argo_settings",
            "get_cache_settings",
            "list_kv_keys",
            "get_intel_asn",
            "graphql_analytics",
        ],
    )
    def test_well_known_operations_present(self, registry: OperationRegistry, name: str) -> None:
        assert name in registry


class TestFilteredOperations:
    def test_audit_log_filters_use_dotted_wire_names(self, registry: OperationRegistry) -> None:
        spec = registry.get("get_audit_logs")
        wire = {p.name: p.query_key for p in spec.parameters if p.location == "query"}
        assert wire["actor_email"] == "actor.email"
        assert wire["actor_ip"] == "actor.ip"
        assert wire["action_type"] == "action.type"
        assert wire["zone_name"] == "zone.name"
        assert wire["per_page"] == "per_page"

    def test_list_zones_account_filter(self, registry: OperationRegistry) -> None:
        spec = registry.get("list_zones")
        account = next(p for p in spec.parameters if p.name == "account_id")
        assert account.location == "query"
        assert account.required is False
        assert account.query_key == "account.id"

    def test_paging_bounds(self, registry: OperationRegistry) -> None:
        props = registry.get("list_zones").input_schema()["properties"]
        assert props["per_page"] == {
            "type": "integer",
            "description": "Results per page (max 1000)",
            "minimum": 1,
            "maximum": 1000,
        }
        assert props["page"]["maximum"] == 10_000

    def test_origin_ca_requires_zone_query(self, registry: OperationRegistry) -> None:
        schema = registry.get("list_origin_ca_certificates").input_schema()
        assert schema["required"] == ["zone_id"]

    def test_integer_path_parameter(self, registry: OperationRegistry) -> None:
        props = registry.get("get_intel_asn").input_schema()["properties"]
        assert props["asn"]["type"] == "integer"


class TestCompositeOperations:
    def test_ssl_settings_parts(self, registry: OperationRegistry) -> None:
        spec = registry.get("get_ssl_settings")
        assert spec.kind == "composite"
        assert list(spec.parts) == ["ssl_mode", "min_tls_version", "tls_1_3", "universal_ssl"]
        assert spec.optional_parts == ["universal_ssl"]

    def test_argo_parts_all_optional(self, registry: OperationRegistry) -> None:
        spec = registry.get("get_argo_settings")
        assert set(spec.optional_parts) == set(spec.parts) == {"smart_routing", "tiered_caching"}

    def test_cache_parts_required(self, registry: OperationRegistry) -> None:
        spec = registry.get("get_cache_settings")
        assert set(spec.parts) == {"cache_level", "browser_cache_ttl"}
        assert spec.optional_parts == []


class TestGraphqlOperation:
    def test_query_bounded(self) -> None:
        props = GRAPHQL_OPERATION.input_schema()["properties"]
        assert props["query"]["maxLength"] == 10_000
        assert props["variables"]["maxLength"] == 10_000
        assert GRAPHQL_OPERATION.input_schema()["required"] == ["query"]


class TestBuilders:
    def test_rest_operation_derives_path_parameters(self) -> None:
        spec = rest_operation("get_thing", "/accounts/{account_id}/things/{thing_id}", "Get a thing")
        assert [p.name for p in spec.parameters] == ["account_id", "thing_id"]
        assert spec.parameters[0].description == "The account ID"

    def test_rest_operation_dedupes_repeated_placeholder(self) -> None:
        spec = rest_operation("odd", "/zones/{zone_id}/x/{zone_id}", "Odd")
        assert [p.name for p in spec.parameters] == ["zone_id"]

    def test_path_parameter_defaults(self) -> None:
        param = path_parameter("zone_id")
        assert param.location == "path"
        assert param.required is True
        assert param.max_length == MAX_ID_LENGTH

    def test_query_parameter_integer(self) -> None:
        param = query_parameter("limit", "Limit", integer=True, maximum=5)
        assert param.type == "integer"
        assert param.minimum == 1
        assert param.maximum == 5
        assert param.required is False
