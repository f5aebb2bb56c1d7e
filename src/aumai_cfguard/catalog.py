"""Declarative catalog of every read-only Cloudflare operation exposed as a tool.

Most operations are a plain ``GET`` whose only arguments are identifiers
substituted into the path; those live in :data:`_PATH_OPERATIONS` as
``(name, path template, description)`` rows.  Operations with query-string
filters, fan-out composites and the GraphQL endpoint are spelled out below
the table.
"""

from __future__ import annotations

from aumai_cfguard.models import PATH_PLACEHOLDER, OperationSpec, ParameterSpec
from aumai_cfguard.operations import OperationRegistry

MAX_ID_LENGTH = 64
MAX_EMAIL_LENGTH = 254
MAX_NAME_LENGTH = 253  # DNS hostname
MAX_IP_LENGTH = 45  # IPv6
MAX_DATE_LENGTH = 30  # ISO 8601
MAX_ACTION_LENGTH = 50
MAX_URL_LENGTH = 2048
MAX_QUERY_LENGTH = 10_000
MAX_PAGE = 10_000
MAX_PER_PAGE = 1000

PATH_PARAMETER_DESCRIPTIONS: dict[str, str] = {
    "account_id": "The account ID",
    "acl_id": "The ACL ID",
    "address_map_id": "The address map ID",
    "app_id": "The application ID",
    "asn": "The ASN number",
    "asn_id": "The ASN ID",
    "bookmark_id": "The bookmark ID",
    "bucket_name": "The R2 bucket name",
    "build_id": "The build ID",
    "catalog_name": "The catalog name",
    "certificate_id": "The certificate ID",
    "certificate_pack_id": "The certificate pack ID",
    "cluster_id": "The DNS Firewall cluster ID",
    "connector_id": "The connector ID",
    "custom_hostname_id": "The custom hostname ID",
    "custom_page_id": "The custom page ID",
    "database_id": "The D1 database ID",
    "dataset_id": "The dataset ID",
    "dns_record_id": "The DNS record ID",
    "domain_id": "The domain ID",
    "domain_name": "The domain name",
    "evaluation_id": "The evaluation ID",
    "event_id": "The event ID",
    "feed_id": "The feed ID",
    "gateway_id": "The AI Gateway ID",
    "group_id": "The group ID",
    "healthcheck_id": "The healthcheck ID",
    "hostname_route_id": "The hostname route ID",
    "hyperdrive_id": "The Hyperdrive configuration ID",
    "identity_provider_id": "The identity provider ID",
    "index_name": "The Vectorize index name",
    "instance_id": "The instance ID",
    "integration_id": "The integration ID",
    "interconnect_id": "The interconnect ID",
    "job_id": "The job ID",
    "key_id": "The TURN key ID",
    "list_id": "The list ID",
    "livestream_id": "The livestream ID",
    "logo_id": "The logo ID",
    "meeting_id": "The meeting ID",
    "membership_id": "The membership ID",
    "namespace_id": "The KV namespace ID",
    "operation_id": "The operation ID",
    "pagerule_id": "The page rule ID",
    "pattern_id": "The pattern ID",
    "pcap_id": "The packet capture ID",
    "peer_id": "The peer ID",
    "pipeline_name": "The pipeline name",
    "policy_id": "The policy ID",
    "postfix_id": "The message postfix ID",
    "prefix_id": "The prefix ID",
    "preset_id": "The preset ID",
    "profile_id": "The DLP profile ID",
    "project_name": "The project name",
    "query_id": "The query ID",
    "queue_id": "The queue ID",
    "rag_id": "The AutoRAG instance ID",
    "rate_limit_id": "The rate limit rule ID",
    "recording_id": "The recording ID",
    "report_id": "The report ID",
    "request_id": "The request ID",
    "route_id": "The route ID",
    "rule_id": "The rule ID",
    "ruleset_id": "The ruleset ID",
    "scan_id": "The scan ID",
    "schema_id": "The schema ID",
    "script_name": "The Worker script name",
    "service_id": "The service ID",
    "session_id": "The session ID",
    "setting_name": "The setting name (e.g., ssl, min_tls_version, tls_1_3, security_level, waf)",
    "share_id": "The share ID",
    "site_id": "The site ID",
    "store_id": "The store ID",
    "tag_name": "The tag name",
    "target_id": "The target ID",
    "test_id": "The test ID",
    "token_id": "The token ID",
    "tsig_id": "The TSIG key ID",
    "tunnel_id": "The tunnel ID",
    "url": "The page URL",
    "user_id": "The user ID",
    "video_id": "The video ID",
    "view_id": "The view ID",
    "vnet_id": "The virtual network ID",
    "waiting_room_id": "The waiting room ID",
    "webhook_id": "The webhook ID",
    "widget_id": "The Turnstile widget sitekey",
    "workflow_name": "The workflow name",
    "zone_id": "The zone ID",
}

_INTEGER_PATH_PARAMETERS = frozenset({"asn", "asn_id", "feed_id"})

_PATH_PARAMETER_MAX_LENGTH: dict[str, int] = {
    "domain_name": MAX_NAME_LENGTH,
    "url": MAX_URL_LENGTH,
}


def path_parameter(name: str) -> ParameterSpec:
    """Return the descriptor for a required path identifier."""
    description = PATH_PARAMETER_DESCRIPTIONS.get(name, "")
    if name in _INTEGER_PATH_PARAMETERS:
        return ParameterSpec(name=name, type="integer", minimum=0, description=description)
    return ParameterSpec(
        name=name,
        max_length=_PATH_PARAMETER_MAX_LENGTH.get(name, MAX_ID_LENGTH),
        description=description,
    )


def query_parameter(
    name: str,
    description: str,
    *,
    max_length: int | None = None,
    integer: bool = False,
    maximum: int | None = None,
    required: bool = False,
    wire_name: str | None = None,
) -> ParameterSpec:
    """Return the descriptor for a query-string filter."""
    if integer:
        return ParameterSpec(
            name=name,
            location="query",
            type="integer",
            required=required,
            minimum=1,
            maximum=maximum,
            description=description,
            wire_name=wire_name,
        )
    return ParameterSpec(
        name=name,
        location="query",
        required=required,
        max_length=max_length,
        description=description,
        wire_name=wire_name,
    )


def rest_operation(
    name: str,
    path: str,
    description: str,
    *query: ParameterSpec,
) -> OperationSpec:
    """Build a ``GET`` descriptor whose path parameters come from *path*."""
    placeholders = dict.fromkeys(PATH_PLACEHOLDER.findall(path))
    return OperationSpec(
        name=name,
        path=path,
        description=description,
        parameters=[path_parameter(p) for p in placeholders] + list(query),
    )


def _per_page(description: str = "Results per page (max 1000)") -> ParameterSpec:
    return query_parameter("per_page", description, integer=True, maximum=MAX_PER_PAGE)


def _page() -> ParameterSpec:
    return query_parameter("page", "Page number", integer=True, maximum=MAX_PAGE)


def _date(name: str, description: str) -> ParameterSpec:
    return query_parameter(name, description, max_length=MAX_DATE_LENGTH)


# (name, path template, description)
_PATH_OPERATIONS: tuple[tuple[str, str, str], ...] = (
    # ACCOUNTS
    ("list_accounts", "/accounts", "List all Cloudflare accounts accessible with the current API token"),
    ("get_account", "/accounts/{account_id}", "Get details for a specific Cloudflare account"),
    ("list_account_members", "/accounts/{account_id}/members", "List all members of a Cloudflare account"),
    # ZONES
    ("get_zone", "/zones/{zone_id}", "Get details for a specific zone"),
    ("get_zone_settings", "/zones/{zone_id}/settings", "Get all settings for a zone including SSL, security, caching, and performance settings"),
    # SSL/TLS
    ("list_certificate_packs", "/zones/{zone_id}/ssl/certificate_packs", "List SSL certificate packs for a zone"),
    ("get_ssl_verification", "/zones/{zone_id}/ssl/verification", "Get SSL verification status for a zone's certificates"),
    ("list_custom_certificates", "/zones/{zone_id}/custom_certificates", "List custom SSL certificates uploaded to a zone"),
    ("get_universal_ssl_settings", "/zones/{zone_id}/ssl/universal/settings", "Get Universal SSL settings for a zone"),
    # RATE LIMITING
    ("get_rate_limiting_rules", "/zones/{zone_id}/rulesets/phases/http_ratelimit/entrypoint", "Get rate limiting rules for a zone (modern WAF rulesets API)"),
    ("list_legacy_rate_limits", "/zones/{zone_id}/rate_limits", "List legacy rate limiting rules for a zone (deprecated API)"),
    # RULESETS (WAF, Firewall, etc.)
    ("list_zone_rulesets", "/zones/{zone_id}/rulesets", "List all rulesets for a zone (includes WAF, rate limiting, transform rules, etc.)"),
    ("get_ruleset", "/zones/{zone_id}/rulesets/{ruleset_id}", "Get details of a specific ruleset"),
    ("get_waf_custom_rules", "/zones/{zone_id}/rulesets/phases/http_request_firewall_custom/entrypoint", "Get custom WAF rules for a zone"),
    ("get_waf_managed_rules", "/zones/{zone_id}/rulesets/phases/http_request_firewall_managed/entrypoint", "Get managed WAF rules configuration for a zone"),
    # FIREWALL
    ("list_firewall_rules", "/zones/{zone_id}/firewall/rules", "List firewall rules for a zone"),
    # PAGE RULES
    ("list_page_rules", "/zones/{zone_id}/pagerules", "List page rules for a zone"),
    # WORKERS
    ("list_workers", "/accounts/{account_id}/workers/scripts", "List Worker scripts in an account"),
    ("list_worker_routes", "/zones/{zone_id}/workers/routes", "List Worker routes for a zone"),
    # LOAD BALANCING
    ("list_load_balancers", "/zones/{zone_id}/load_balancers", "List load balancers for a zone"),
    ("list_origin_pools", "/accounts/{account_id}/load_balancers/pools", "List load balancer origin pools for an account"),
    # ACCESS (Zero Trust)
    ("list_access_apps", "/accounts/{account_id}/access/apps", "List Cloudflare Access applications for an account"),
    ("list_access_policies", "/accounts/{account_id}/access/policies", "List Cloudflare Access policies for an account"),
    # BOT MANAGEMENT
    ("get_bot_management", "/zones/{zone_id}/bot_management", "Get bot management settings for a zone"),
    # WAITING ROOM
    ("list_waiting_rooms", "/zones/{zone_id}/waiting_rooms", "List waiting rooms for a zone"),
    # ACCOUNT ROLES
    ("list_account_roles", "/accounts/{account_id}/roles", "List all roles available in a Cloudflare account"),
    # ACCOUNT RULESETS
    ("list_account_rulesets", "/accounts/{account_id}/rulesets", "List all rulesets at the account level"),
    ("get_account_ruleset", "/accounts/{account_id}/rulesets/{ruleset_id}", "Get a specific account-level ruleset"),
    # ACCESS
    ("list_access_groups", "/accounts/{account_id}/access/groups", "List Cloudflare Access groups for an account"),
    ("list_access_service_tokens", "/accounts/{account_id}/access/service_tokens", "List Cloudflare Access service tokens for an account"),
    # WORKERS
    ("list_worker_services", "/accounts/{account_id}/workers/services", "List Worker services in an account"),
    # LOAD BALANCING
    ("list_load_balancer_monitors", "/accounts/{account_id}/load_balancers/monitors", "List health monitors for load balancers"),
    # TRANSFORM RULES
    ("get_origin_rules", "/zones/{zone_id}/rulesets/phases/http_request_origin/entrypoint", "Get origin rules for a zone (override origin server, host header, etc.)"),
    ("get_url_rewrite_rules", "/zones/{zone_id}/rulesets/phases/http_request_transform/entrypoint", "Get URL rewrite/transform rules for a zone"),
    ("get_request_header_rules", "/zones/{zone_id}/rulesets/phases/http_request_late_transform/entrypoint", "Get HTTP request header modification rules for a zone"),
    ("get_response_header_rules", "/zones/{zone_id}/rulesets/phases/http_response_headers_transform/entrypoint", "Get HTTP response header modification rules for a zone"),
    # CACHE RULES
    ("get_cache_rules", "/zones/{zone_id}/rulesets/phases/http_request_cache_settings/entrypoint", "Get cache rules for a zone"),
    # DDOS
    ("get_ddos_l7_rules", "/zones/{zone_id}/rulesets/phases/ddos_l7/entrypoint", "Get Layer 7 DDoS protection rules for a zone"),
    ("get_ddos_l4_rules", "/accounts/{account_id}/rulesets/phases/ddos_l4/entrypoint", "Get Layer 4 DDoS protection rules for an account"),
    # SPECTRUM
    ("list_spectrum_apps", "/zones/{zone_id}/spectrum/apps", "List Spectrum applications for a zone (TCP/UDP proxy)"),
    # API SHIELD
    ("list_api_shield_operations", "/zones/{zone_id}/api_gateway/operations", "List API Shield operations/endpoints for a zone"),
    ("list_api_shield_schemas", "/zones/{zone_id}/api_gateway/schemas", "List API Shield schemas for a zone"),
    ("get_api_shield_config", "/zones/{zone_id}/api_gateway/configuration", "Get API Shield configuration for a zone"),
    # D1 DATABASES
    ("list_d1_databases", "/accounts/{account_id}/d1/database", "List D1 SQL databases in an account"),
    ("get_d1_database", "/accounts/{account_id}/d1/database/{database_id}", "Get details of a D1 database"),
    # R2 STORAGE
    ("list_r2_buckets", "/accounts/{account_id}/r2/buckets", "List R2 storage buckets in an account"),
    # KV NAMESPACES
    ("list_kv_namespaces", "/accounts/{account_id}/storage/kv/namespaces", "List Workers KV namespaces in an account"),
    ("get_kv_namespace", "/accounts/{account_id}/storage/kv/namespaces/{namespace_id}", "Get details of a KV namespace"),
    # DURABLE OBJECTS
    ("list_durable_object_namespaces", "/accounts/{account_id}/workers/durable_objects/namespaces", "List Durable Object namespaces in an account"),
    # QUEUES
    ("list_queues", "/accounts/{account_id}/queues", "List Cloudflare Queues in an account"),
    ("get_queue", "/accounts/{account_id}/queues/{queue_id}", "Get details of a Cloudflare Queue"),
    # TUNNELS
    ("list_tunnels", "/accounts/{account_id}/cfd_tunnel", "List Cloudflare Tunnels in an account"),
    ("get_tunnel", "/accounts/{account_id}/cfd_tunnel/{tunnel_id}", "Get details of a Cloudflare Tunnel"),
    ("list_tunnel_connections", "/accounts/{account_id}/cfd_tunnel/{tunnel_id}/connections", "List active connections for a Cloudflare Tunnel"),
    # LOGPUSH
    ("list_logpush_jobs_zone", "/zones/{zone_id}/logpush/jobs", "List Logpush jobs for a zone"),
    ("list_logpush_jobs_account", "/accounts/{account_id}/logpush/jobs", "List Logpush jobs for an account"),
    # EMAIL ROUTING
    ("get_email_routing_settings", "/zones/{zone_id}/email/routing", "Get email routing settings for a zone"),
    ("list_email_routing_rules", "/zones/{zone_id}/email/routing/rules", "List email routing rules for a zone"),
    ("list_email_routing_addresses", "/accounts/{account_id}/email/routing/addresses", "List verified destination email addresses"),
    # PAGES
    ("list_pages_projects", "/accounts/{account_id}/pages/projects", "List Cloudflare Pages projects in an account"),
    ("get_pages_project", "/accounts/{account_id}/pages/projects/{project_name}", "Get details of a Pages project"),
    ("list_pages_deployments", "/accounts/{account_id}/pages/projects/{project_name}/deployments", "List deployments for a Pages project"),
    # STREAM
    ("list_stream_videos", "/accounts/{account_id}/stream", "List videos in Cloudflare Stream"),
    ("get_stream_video", "/accounts/{account_id}/stream/{video_id}", "Get details of a Stream video"),
    # IMAGES
    ("list_images", "/accounts/{account_id}/images/v1", "List images in Cloudflare Images"),
    ("get_images_stats", "/accounts/{account_id}/images/v1/stats", "Get Cloudflare Images usage statistics"),
    # REGISTRAR
    ("list_registrar_domains", "/accounts/{account_id}/registrar/domains", "List domains registered with Cloudflare Registrar"),
    ("get_registrar_domain", "/accounts/{account_id}/registrar/domains/{domain_name}", "Get details of a domain in Cloudflare Registrar"),
    # HEALTHCHECKS
    ("list_healthchecks", "/zones/{zone_id}/healthchecks", "List healthchecks for a zone"),
    ("get_healthcheck", "/zones/{zone_id}/healthchecks/{healthcheck_id}", "Get details of a healthcheck"),
    # IP ACCESS RULES
    ("list_ip_access_rules", "/zones/{zone_id}/firewall/access_rules/rules", "List IP access rules for a zone (IP blocking/allowing)"),
    # ZONE LOCKDOWN
    ("list_zone_lockdown_rules", "/zones/{zone_id}/firewall/lockdowns", "List zone lockdown rules (IP allowlisting for URLs)"),
    # USER AGENT RULES
    ("list_user_agent_rules", "/zones/{zone_id}/firewall/ua_rules", "List user agent blocking rules for a zone"),
    # CLIENT CERTIFICATES (mTLS)
    ("list_client_certificates", "/zones/{zone_id}/client_certificates", "List client certificates for mTLS"),
    # AUTHENTICATED ORIGIN PULLS
    ("get_authenticated_origin_pulls", "/zones/{zone_id}/origin_tls_client_auth/settings", "Get Authenticated Origin Pulls settings for a zone"),
    # FILTERS
    ("list_filters", "/zones/{zone_id}/filters", "List filters used by firewall rules"),
    # SNIPPETS
    ("list_snippets", "/zones/{zone_id}/snippets", "List Cloudflare Snippets for a zone"),
    # WEB3 HOSTNAMES
    ("list_web3_hostnames", "/zones/{zone_id}/web3/hostnames", "List Web3 hostnames for a zone"),
    # ZARAZ
    ("get_zaraz_config", "/zones/{zone_id}/zaraz/config", "Get Zaraz configuration for a zone"),
    # INDIVIDUAL LOOKUPS
    ("get_zone_setting", "/zones/{zone_id}/settings/{setting_name}", "Get a specific zone setting by name (e.g., ssl, min_tls_version, security_level)"),
    ("get_certificate_pack", "/zones/{zone_id}/ssl/certificate_packs/{certificate_pack_id}", "Get details of a specific SSL certificate pack"),
    ("get_custom_certificate", "/zones/{zone_id}/custom_certificates/{certificate_id}", "Get details of a specific custom SSL certificate"),
    ("get_legacy_rate_limit", "/zones/{zone_id}/rate_limits/{rate_limit_id}", "Get details of a specific legacy rate limit rule"),
    ("get_dns_record", "/zones/{zone_id}/dns_records/{dns_record_id}", "Get details of a specific DNS record"),
    ("get_page_rule", "/zones/{zone_id}/pagerules/{pagerule_id}", "Get details of a specific page rule"),
    ("get_worker_script", "/accounts/{account_id}/workers/scripts/{script_name}", "Get metadata for a specific Worker script"),
    ("get_custom_hostname", "/zones/{zone_id}/custom_hostnames/{custom_hostname_id}", "Get details of a specific custom hostname"),
    ("get_waiting_room", "/zones/{zone_id}/waiting_rooms/{waiting_room_id}", "Get details of a specific waiting room"),
    # WORKERS AI
    ("list_ai_models", "/accounts/{account_id}/ai/models/search", "List available Workers AI models"),
    # VECTORIZE
    ("list_vectorize_indexes", "/accounts/{account_id}/vectorize/indexes", "List Vectorize indexes (vector databases) in an account"),
    ("get_vectorize_index", "/accounts/{account_id}/vectorize/indexes/{index_name}", "Get details of a Vectorize index"),
    # AI GATEWAY
    ("list_ai_gateways", "/accounts/{account_id}/ai-gateway/gateways", "List AI Gateway instances in an account"),
    ("get_ai_gateway_logs", "/accounts/{account_id}/ai-gateway/gateways/{gateway_id}/logs", "Get logs for an AI Gateway"),
    # WORKERS SECRETS
    ("list_worker_secrets", "/accounts/{account_id}/workers/scripts/{script_name}/secrets", "List secret names for a Worker script (does not return secret values)"),
    # WORKERS DEPLOYMENTS
    ("list_worker_deployments", "/accounts/{account_id}/workers/scripts/{script_name}/deployments", "List deployments for a Worker script (useful for rollback decisions)"),
    # WORKERS TAIL LOGS
    ("list_worker_tails", "/accounts/{account_id}/workers/scripts/{script_name}/tails", "List active tail log sessions for a Worker script"),
    # USER
    ("get_user", "/user", "Get current authenticated user details (email, ID, etc.)"),
    ("verify_token", "/user/tokens/verify", "Verify the current API token and get its status"),
    # BILLING
    ("get_billing_profile", "/accounts/{account_id}/billing/profile", "Get billing profile for an account (payment status, etc.)"),
    # ZONE SUBSCRIPTION
    ("get_zone_subscription", "/zones/{zone_id}/subscription", "Get zone subscription tier (Free/Pro/Business/Enterprise) - determines available features"),
    # DEVICES (ZERO TRUST)
    ("list_devices", "/accounts/{account_id}/devices", "List devices enrolled in Zero Trust/WARP"),
    ("list_device_posture_rules", "/accounts/{account_id}/devices/posture", "List device posture rules (compliance requirements)"),
    ("list_device_policies", "/accounts/{account_id}/devices/policies", "List device policies for Zero Trust"),
    # DNSSEC
    ("get_dnssec", "/zones/{zone_id}/dnssec", "Get DNSSEC status for a zone"),
    # PAGE SHIELD
    ("get_page_shield_settings", "/zones/{zone_id}/page_shield", "Get Page Shield settings for a zone (client-side security monitoring)"),
    ("list_page_shield_scripts", "/zones/{zone_id}/page_shield/scripts", "List scripts detected by Page Shield"),
    ("list_page_shield_connections", "/zones/{zone_id}/page_shield/connections", "List connections detected by Page Shield"),
    ("list_page_shield_policies", "/zones/{zone_id}/page_shield/policies", "List Page Shield policies"),
    # SECURITY CENTER
    ("list_security_insights", "/zones/{zone_id}/security-center/insights", "List Security Center insights for a zone (security issues and recommendations)"),
    # ALERTING/NOTIFICATIONS
    ("list_notification_policies", "/accounts/{account_id}/alerting/v3/policies", "List notification/alerting policies for an account"),
    ("list_notification_history", "/accounts/{account_id}/alerting/v3/history", "List notification history (past alerts sent)"),
    ("list_available_alerts", "/accounts/{account_id}/alerting/v3/available_alerts", "List available alert types that can be configured"),
    ("list_notification_webhooks", "/accounts/{account_id}/alerting/v3/destinations/webhooks", "List configured notification webhook destinations"),
    # TUNNEL CONFIGURATIONS
    ("get_tunnel_configuration", "/accounts/{account_id}/cfd_tunnel/{tunnel_id}/configurations", "Get configuration for a Cloudflare Tunnel (ingress rules, etc.)"),
    # TURNSTILE (CHALLENGES)
    ("list_turnstile_widgets", "/accounts/{account_id}/challenges/widgets", "List Turnstile widgets (CAPTCHA alternatives) for an account"),
    ("get_turnstile_widget", "/accounts/{account_id}/challenges/widgets/{widget_id}", "Get details of a specific Turnstile widget"),
    # GATEWAY (ZERO TRUST)
    ("list_gateway_rules", "/accounts/{account_id}/gateway/rules", "List Zero Trust Gateway rules (DNS/HTTP/Network filtering)"),
    ("get_gateway_configuration", "/accounts/{account_id}/gateway/configuration", "Get Zero Trust Gateway configuration settings"),
    ("list_gateway_locations", "/accounts/{account_id}/gateway/locations", "List Gateway locations (DNS resolver endpoints)"),
    ("list_gateway_proxy_endpoints", "/accounts/{account_id}/gateway/proxy_endpoints", "List Gateway proxy endpoints"),
    # HYPERDRIVE
    ("list_hyperdrive_configs", "/accounts/{account_id}/hyperdrive/configs", "List Hyperdrive configurations (database connection accelerators)"),
    ("get_hyperdrive_config", "/accounts/{account_id}/hyperdrive/configs/{hyperdrive_id}", "Get details of a Hyperdrive configuration"),
    # URL NORMALIZATION
    ("get_url_normalization", "/zones/{zone_id}/url_normalization", "Get URL normalization settings for a zone"),
    # MANAGED HEADERS
    ("get_managed_headers", "/zones/{zone_id}/managed_headers", "Get managed request/response headers configuration"),
    # KEYLESS SSL
    ("list_keyless_certificates", "/zones/{zone_id}/keyless_certificates", "List Keyless SSL certificates for a zone"),
    # MAGIC TRANSIT
    ("list_magic_transit_ipsec_tunnels", "/accounts/{account_id}/magic/ipsec_tunnels", "List Magic Transit IPsec tunnels for an account"),
    ("get_magic_transit_ipsec_tunnel", "/accounts/{account_id}/magic/ipsec_tunnels/{tunnel_id}", "Get details of a specific Magic Transit IPsec tunnel"),
    ("list_magic_transit_gre_tunnels", "/accounts/{account_id}/magic/gre_tunnels", "List Magic Transit GRE tunnels for an account"),
    ("get_magic_transit_gre_tunnel", "/accounts/{account_id}/magic/gre_tunnels/{tunnel_id}", "Get details of a specific Magic Transit GRE tunnel"),
    ("list_magic_transit_routes", "/accounts/{account_id}/magic/routes", "List Magic Transit static routes for an account"),
    ("get_magic_transit_route", "/accounts/{account_id}/magic/routes/{route_id}", "Get details of a specific Magic Transit static route"),
    ("list_magic_transit_connectors", "/accounts/{account_id}/magic/connectors", "List Magic Transit connectors for an account"),
    ("get_magic_transit_connector", "/accounts/{account_id}/magic/connectors/{connector_id}", "Get details of a specific Magic Transit connector"),
    ("list_magic_transit_sites", "/accounts/{account_id}/magic/sites", "List Magic WAN sites for an account"),
    ("get_magic_transit_site", "/accounts/{account_id}/magic/sites/{site_id}", "Get details of a specific Magic WAN site"),
    # DNS FIREWALL
    ("list_dns_firewall_clusters", "/accounts/{account_id}/dns_firewall", "List DNS Firewall clusters for an account"),
    ("get_dns_firewall_cluster", "/accounts/{account_id}/dns_firewall/{cluster_id}", "Get details of a specific DNS Firewall cluster"),
    ("get_dns_firewall_analytics", "/accounts/{account_id}/dns_firewall/{cluster_id}/dns_analytics/report", "Get DNS Firewall analytics for a cluster"),
    # SECONDARY DNS
    ("get_secondary_dns_primary", "/zones/{zone_id}/secondary_dns/primaries", "Get secondary DNS primary nameserver configuration for a zone"),
    ("list_secondary_dns_peers", "/accounts/{account_id}/secondary_dns/peers", "List secondary DNS peers for an account"),
    ("get_secondary_dns_peer", "/accounts/{account_id}/secondary_dns/peers/{peer_id}", "Get details of a specific secondary DNS peer"),
    ("list_secondary_dns_tsigs", "/accounts/{account_id}/secondary_dns/tsigs", "List secondary DNS TSIG keys for an account"),
    ("get_secondary_dns_tsig", "/accounts/{account_id}/secondary_dns/tsigs/{tsig_id}", "Get details of a specific secondary DNS TSIG key"),
    ("get_secondary_dns_incoming", "/zones/{zone_id}/secondary_dns/incoming", "Get secondary DNS incoming zone transfer configuration"),
    ("get_secondary_dns_outgoing", "/zones/{zone_id}/secondary_dns/outgoing", "Get secondary DNS outgoing zone transfer configuration"),
    ("list_secondary_dns_acls", "/accounts/{account_id}/secondary_dns/acls", "List secondary DNS ACLs for an account"),
    ("get_secondary_dns_acl", "/accounts/{account_id}/secondary_dns/acls/{acl_id}", "Get details of a specific secondary DNS ACL"),
    # SPEED API
    ("list_speed_tests", "/zones/{zone_id}/speed_api/pages/{url}/tests", "List speed tests for a zone URL"),
    ("get_speed_test", "/zones/{zone_id}/speed_api/pages/{url}/tests/{test_id}", "Get details of a specific speed test"),
    ("get_speed_schedule", "/zones/{zone_id}/speed_api/schedule/{url}", "Get scheduled speed test configuration for a URL"),
    ("list_speed_available_regions", "/zones/{zone_id}/speed_api/availabilities", "List available regions for speed tests"),
    ("get_speed_page_trend", "/zones/{zone_id}/speed_api/pages/{url}/trend", "Get speed trends for a page over time"),
    # CALLS (WebRTC)
    ("list_calls_apps", "/accounts/{account_id}/calls/apps", "List Cloudflare Calls applications (WebRTC)"),
    ("get_calls_app", "/accounts/{account_id}/calls/apps/{app_id}", "Get details of a specific Calls application"),
    ("list_calls_turn_keys", "/accounts/{account_id}/calls/turn_keys", "List TURN keys for Cloudflare Calls"),
    ("get_calls_turn_key", "/accounts/{account_id}/calls/turn_keys/{key_id}", "Get details of a specific TURN key"),
    # DLP (Data Loss Prevention)
    ("list_dlp_profiles", "/accounts/{account_id}/dlp/profiles", "List DLP profiles for an account"),
    ("get_dlp_profile", "/accounts/{account_id}/dlp/profiles/{profile_id}", "Get details of a specific DLP profile"),
    ("list_dlp_datasets", "/accounts/{account_id}/dlp/datasets", "List DLP datasets for an account"),
    ("get_dlp_dataset", "/accounts/{account_id}/dlp/datasets/{dataset_id}", "Get details of a specific DLP dataset"),
    ("list_dlp_patterns", "/accounts/{account_id}/dlp/patterns", "List predefined DLP patterns available"),
    ("get_dlp_payload_log_settings", "/accounts/{account_id}/dlp/payload_log", "Get DLP payload logging settings for an account"),
    # CLOUDFLARE IPS
    ("get_cloudflare_ips", "/ips", "Get Cloudflare's IP ranges (IPv4 and IPv6) - useful for allowlisting"),
    # MEMBERSHIPS
    ("list_memberships", "/memberships", "List account memberships for the authenticated user"),
    ("get_membership", "/memberships/{membership_id}", "Get details of a specific account membership"),
    # ACCESS
    ("list_access_bookmarks", "/accounts/{account_id}/access/bookmarks", "List Access bookmarks for an account"),
    ("get_access_bookmark", "/accounts/{account_id}/access/bookmarks/{bookmark_id}", "Get details of an Access bookmark"),
    ("list_access_certificates", "/accounts/{account_id}/access/certificates", "List Access mTLS certificates for an account"),
    ("get_access_certificate", "/accounts/{account_id}/access/certificates/{certificate_id}", "Get details of an Access mTLS certificate"),
    ("get_access_certificate_settings", "/accounts/{account_id}/access/certificates/settings", "Get Access mTLS certificate settings"),
    ("list_access_custom_pages", "/accounts/{account_id}/access/custom_pages", "List Access custom pages for an account"),
    ("get_access_custom_page", "/accounts/{account_id}/access/custom_pages/{custom_page_id}", "Get details of an Access custom page"),
    ("list_access_identity_providers", "/accounts/{account_id}/access/identity_providers", "List Access identity providers for an account"),
    ("get_access_identity_provider", "/accounts/{account_id}/access/identity_providers/{identity_provider_id}", "Get details of an Access identity provider"),
    ("get_access_keys", "/accounts/{account_id}/access/keys", "Get Access keys configuration (signing keys for tokens)"),
    ("list_access_logs", "/accounts/{account_id}/access/logs/access_requests", "List Access request logs for an account"),
    ("get_access_organization", "/accounts/{account_id}/access/organizations", "Get Access organization settings for an account"),
    ("list_access_tags", "/accounts/{account_id}/access/tags", "List Access tags for an account"),
    ("get_access_tag", "/accounts/{account_id}/access/tags/{tag_name}", "Get details of an Access tag"),
    ("list_access_users", "/accounts/{account_id}/access/users", "List Access users for an account"),
    ("list_access_user_active_sessions", "/accounts/{account_id}/access/users/{user_id}/active_sessions", "List active sessions for an Access user"),
    ("list_access_user_failed_logins", "/accounts/{account_id}/access/users/{user_id}/failed_logins", "List failed logins for an Access user"),
    # AI GATEWAY
    ("list_ai_gateway_datasets", "/accounts/{account_id}/ai-gateway/gateways/{gateway_id}/datasets", "List datasets for an AI Gateway"),
    ("get_ai_gateway_dataset", "/accounts/{account_id}/ai-gateway/gateways/{gateway_id}/datasets/{dataset_id}", "Get details of an AI Gateway dataset"),
    ("list_ai_gateway_evaluations", "/accounts/{account_id}/ai-gateway/gateways/{gateway_id}/evaluations", "List evaluations for an AI Gateway"),
    ("get_ai_gateway_evaluation", "/accounts/{account_id}/ai-gateway/gateways/{gateway_id}/evaluations/{evaluation_id}", "Get details of an AI Gateway evaluation"),
    ("list_ai_gateway_routes", "/accounts/{account_id}/ai-gateway/gateways/{gateway_id}/routes", "List routes for an AI Gateway"),
    ("get_ai_gateway_route", "/accounts/{account_id}/ai-gateway/gateways/{gateway_id}/routes/{route_id}", "Get details of an AI Gateway route"),
    # IP ADDRESSING (BYOIP)
    ("list_address_maps", "/accounts/{account_id}/addressing/address_maps", "List IP address maps for an account"),
    ("get_address_map", "/accounts/{account_id}/addressing/address_maps/{address_map_id}", "Get details of an IP address map"),
    ("list_ip_prefixes", "/accounts/{account_id}/addressing/prefixes", "List IP prefixes (BYOIP) for an account"),
    ("get_ip_prefix", "/accounts/{account_id}/addressing/prefixes/{prefix_id}", "Get details of an IP prefix"),
    ("get_ip_prefix_bgp_status", "/accounts/{account_id}/addressing/prefixes/{prefix_id}/bgp/status", "Get BGP status for an IP prefix"),
    ("list_ip_prefix_delegations", "/accounts/{account_id}/addressing/prefixes/{prefix_id}/delegations", "List delegations for an IP prefix"),
    ("list_addressing_services", "/accounts/{account_id}/addressing/services", "List addressing services for an account"),
    # URL SCANNER
    ("get_url_scan", "/accounts/{account_id}/urlscanner/scan/{scan_id}", "Get URL scan result"),
    ("get_url_scan_har", "/accounts/{account_id}/urlscanner/scan/{scan_id}/har", "Get HAR file from URL scan"),
    # AI SEARCH
    ("list_ai_search_instances", "/accounts/{account_id}/ai-search/instances", "List AI Search instances for an account"),
    ("get_ai_search_instance", "/accounts/{account_id}/ai-search/instances/{instance_id}", "Get details of an AI Search instance"),
    ("list_ai_search_items", "/accounts/{account_id}/ai-search/instances/{instance_id}/items", "List items in an AI Search instance"),
    ("list_ai_search_jobs", "/accounts/{account_id}/ai-search/instances/{instance_id}/jobs", "List jobs for an AI Search instance"),
    ("get_ai_search_job", "/accounts/{account_id}/ai-search/instances/{instance_id}/jobs/{job_id}", "Get details of an AI Search job"),
    # WORKERS BUILDS
    ("list_worker_builds", "/accounts/{account_id}/builds", "List Worker builds for an account"),
    ("get_worker_build", "/accounts/{account_id}/builds/{build_id}", "Get details of a Worker build"),
    # WORKERS WORKFLOWS
    ("list_workflows", "/accounts/{account_id}/workflows", "List Workers Workflows for an account"),
    ("get_workflow", "/accounts/{account_id}/workflows/{workflow_name}", "Get details of a Workers Workflow"),
    ("list_workflow_instances", "/accounts/{account_id}/workflows/{workflow_name}/instances", "List instances of a Workers Workflow"),
    ("get_workflow_instance", "/accounts/{account_id}/workflows/{workflow_name}/instances/{instance_id}", "Get details of a workflow instance"),
    # CNI (INTERCONNECT)
    ("list_cni_interconnects", "/accounts/{account_id}/cni/interconnects", "List Cloud Network Interconnects for an account"),
    ("get_cni_interconnect", "/accounts/{account_id}/cni/interconnects/{interconnect_id}", "Get details of a Cloud Network Interconnect"),
    ("list_cni_slots", "/accounts/{account_id}/cni/slots", "List CNI slots for an account"),
    ("get_cni_settings", "/accounts/{account_id}/cni/settings", "Get CNI settings for an account"),
    # R2 PIPELINES
    ("list_r2_pipelines", "/accounts/{account_id}/pipelines", "List R2 pipelines for an account"),
    ("get_r2_pipeline", "/accounts/{account_id}/pipelines/{pipeline_name}", "Get details of an R2 pipeline"),
    # IAM/PERMISSIONS
    ("list_permission_groups", "/accounts/{account_id}/iam/permission_groups", "List IAM permission groups for an account"),
    ("get_permission_group", "/accounts/{account_id}/iam/permission_groups/{group_id}", "Get details of an IAM permission group"),
    ("list_resource_groups", "/accounts/{account_id}/iam/resource_groups", "List IAM resource groups for an account"),
    ("get_resource_group", "/accounts/{account_id}/iam/resource_groups/{group_id}", "Get details of an IAM resource group"),
    # ZERO TRUST RISK SCORING
    ("list_risk_scoring_behaviors", "/accounts/{account_id}/zt_risk_scoring/behaviors", "List Zero Trust risk scoring behaviors"),
    ("list_risk_scoring_integrations", "/accounts/{account_id}/zt_risk_scoring/integrations", "List Zero Trust risk scoring integrations"),
    ("get_risk_scoring_integration", "/accounts/{account_id}/zt_risk_scoring/integrations/{integration_id}", "Get details of a risk scoring integration"),
    # R2 CATALOG
    ("list_r2_catalogs", "/accounts/{account_id}/r2-catalog/catalogs", "List R2 catalogs for an account"),
    ("get_r2_catalog", "/accounts/{account_id}/r2-catalog/catalogs/{catalog_name}", "Get details of an R2 catalog"),
    # TEAM NETWORK ROUTES
    ("list_teamnet_routes", "/accounts/{account_id}/teamnet/routes", "List team network routes for an account"),
    ("list_teamnet_virtual_networks", "/accounts/{account_id}/teamnet/virtual_networks", "List team virtual networks for an account"),
    ("get_teamnet_virtual_network", "/accounts/{account_id}/teamnet/virtual_networks/{vnet_id}", "Get details of a team virtual network"),
    # SECRETS STORE
    ("list_secrets_stores", "/accounts/{account_id}/secrets_store/stores", "List secrets stores for an account"),
    ("get_secrets_store", "/accounts/{account_id}/secrets_store/stores/{store_id}", "Get details of a secrets store"),
    ("list_secrets_store_secrets", "/accounts/{account_id}/secrets_store/stores/{store_id}/secrets", "List secrets in a secrets store (names only)"),
    # PACKET CAPTURES
    ("list_pcaps", "/accounts/{account_id}/pcaps", "List packet captures for an account"),
    ("get_pcap", "/accounts/{account_id}/pcaps/{pcap_id}", "Get details of a packet capture"),
    ("get_pcap_ownership", "/accounts/{account_id}/pcaps/ownership", "Get packet capture ownership info"),
    # MAGIC NETWORK MONITORING
    ("get_mnm_config", "/accounts/{account_id}/mnm/config", "Get Magic Network Monitoring configuration"),
    ("list_mnm_rules", "/accounts/{account_id}/mnm/rules", "List Magic Network Monitoring rules"),
    ("get_mnm_rule", "/accounts/{account_id}/mnm/rules/{rule_id}", "Get details of a Magic Network Monitoring rule"),
    # WARP CONNECTOR
    ("list_warp_connectors", "/accounts/{account_id}/warp_connector", "List WARP connectors for an account"),
    ("get_warp_connector", "/accounts/{account_id}/warp_connector/{connector_id}", "Get details of a WARP connector"),
    # MTLS CERTIFICATES (ACCOUNT)
    ("list_account_mtls_certificates", "/accounts/{account_id}/mtls_certificates", "List mTLS certificates at account level"),
    ("get_account_mtls_certificate", "/accounts/{account_id}/mtls_certificates/{certificate_id}", "Get details of an account mTLS certificate"),
    # ACCOUNT DNS SETTINGS
    ("get_account_dns_settings", "/accounts/{account_id}/dns_settings", "Get DNS settings for an account"),
    ("list_dns_views", "/accounts/{account_id}/dns_settings/views", "List DNS views for an account"),
    ("get_dns_view", "/accounts/{account_id}/dns_settings/views/{view_id}", "Get details of a DNS view"),
    # ZONE: API SCHEMA VALIDATION
    ("get_schema_validation_settings", "/zones/{zone_id}/schema_validation/settings", "Get API schema validation settings for a zone"),
    ("list_api_schemas", "/zones/{zone_id}/schema_validation/schemas", "List API schemas for a zone"),
    # ZONE: TOKEN VALIDATION
    ("get_token_validation_settings", "/zones/{zone_id}/token_validation/settings", "Get token validation settings for a zone"),
    # ZONE: SMART SHIELD
    ("get_smart_shield_settings", "/zones/{zone_id}/smart_shield", "Get Smart Shield settings for a zone"),
    # ZONE: LOGS
    ("get_zone_logs_retention", "/zones/{zone_id}/logs/control/retention/flag", "Get zone logs retention settings"),
    # ZONE: LEAKED CREDENTIAL CHECKS
    ("get_leaked_credential_check_settings", "/zones/{zone_id}/leaked-credential-checks", "Get leaked credential check settings for a zone"),
    ("list_leaked_credential_detections", "/zones/{zone_id}/leaked-credential-checks/detections", "List leaked credential detections for a zone"),
    # ZONE: ADVANCED CERTIFICATE MANAGER
    ("get_total_tls_settings", "/zones/{zone_id}/acm/total_tls", "Get Total TLS settings for a zone (Advanced Certificate Manager)"),
    # ZONE: DNS ANALYTICS
    ("get_dns_analytics_report", "/zones/{zone_id}/dns_analytics/report", "Get DNS analytics report for a zone"),
    # ZONE: FRAUD DETECTION
    ("get_fraud_detection_settings", "/zones/{zone_id}/fraud_detection", "Get fraud detection settings for a zone"),
    # ZONE: CLOUD CONNECTOR
    ("list_cloud_connector_rules", "/zones/{zone_id}/cloud_connector/rules", "List cloud connector rules for a zone"),
    # ZONE: DCV DELEGATION
    ("get_dcv_delegation", "/zones/{zone_id}/dcv_delegation/uuid", "Get DCV delegation UUID for a zone"),
    # INTEL
    ("get_intel_asn", "/accounts/{account_id}/intel/asn/{asn}", "Get intelligence about an ASN"),
    ("get_intel_domain_history", "/accounts/{account_id}/intel/domain-history", "Get domain history intelligence"),
    ("list_intel_indicator_feeds", "/accounts/{account_id}/intel/indicator-feeds", "List threat indicator feeds"),
    ("get_intel_indicator_feed", "/accounts/{account_id}/intel/indicator-feeds/{feed_id}", "Get details of a threat indicator feed"),
    ("list_intel_sinkholes", "/accounts/{account_id}/intel/sinkholes", "List Cloudflare sinkholes"),
    ("list_intel_ip_lists", "/accounts/{account_id}/intel/ip-lists", "List IP lists for threat intelligence"),
    # RULES/LISTS
    ("list_account_rules_lists", "/accounts/{account_id}/rules/lists", "List account-level rules lists (IP lists, hostname lists, etc.)"),
    ("get_account_rules_list", "/accounts/{account_id}/rules/lists/{list_id}", "Get details of an account rules list"),
    ("list_account_rules_list_items", "/accounts/{account_id}/rules/lists/{list_id}/items", "List items in an account rules list"),
    # API TOKENS
    ("list_account_tokens", "/accounts/{account_id}/tokens", "List API tokens for an account"),
    ("get_account_token", "/accounts/{account_id}/tokens/{token_id}", "Get details of an API token"),
    ("verify_account_token", "/accounts/{account_id}/tokens/verify", "Verify an API token is valid"),
    ("list_token_permission_groups", "/accounts/{account_id}/tokens/permission_groups", "List available permission groups for API tokens"),
    # RUM (Real User Monitoring)
    ("list_rum_sites", "/accounts/{account_id}/rum/site_info/list", "List Real User Monitoring sites"),
    ("get_rum_site", "/accounts/{account_id}/rum/site_info/{site_id}", "Get details of a RUM site"),
    # ABUSE REPORTS
    ("list_abuse_reports", "/accounts/{account_id}/abuse-reports", "List abuse reports for an account"),
    ("get_abuse_report", "/accounts/{account_id}/abuse-reports/{report_id}", "Get details of an abuse report"),
    # INFRASTRUCTURE TARGETS
    ("list_infrastructure_targets", "/accounts/{account_id}/infrastructure/targets", "List infrastructure targets"),
    ("get_infrastructure_target", "/accounts/{account_id}/infrastructure/targets/{target_id}", "Get details of an infrastructure target"),
    # CONNECTIVITY SERVICES
    ("list_connectivity_services", "/accounts/{account_id}/connectivity/directory/services", "List connectivity directory services"),
    ("get_connectivity_service", "/accounts/{account_id}/connectivity/directory/services/{service_id}", "Get details of a connectivity service"),
    # DIAGNOSTICS
    ("list_endpoint_healthchecks", "/accounts/{account_id}/diagnostics/endpoint-healthchecks", "List endpoint healthchecks for diagnostics"),
    ("get_endpoint_healthcheck", "/accounts/{account_id}/diagnostics/endpoint-healthchecks/{healthcheck_id}", "Get details of an endpoint healthcheck"),
    # CONTAINERS
    ("list_containers", "/accounts/{account_id}/containers", "List containers for an account"),
    # EVENT NOTIFICATIONS
    ("get_r2_event_notification_config", "/accounts/{account_id}/event_notifications/r2/{bucket_name}/configuration", "Get R2 bucket event notification configuration"),
    # ZONE: API GATEWAY
    ("get_api_gateway_config", "/zones/{zone_id}/api_gateway/configuration", "Get API Gateway configuration for a zone"),
    ("get_api_gateway_discovery", "/zones/{zone_id}/api_gateway/discovery", "Get API Gateway discovery status"),
    ("list_api_gateway_operations", "/zones/{zone_id}/api_gateway/operations", "List API Gateway operations for a zone"),
    ("get_api_gateway_operation", "/zones/{zone_id}/api_gateway/operations/{operation_id}", "Get details of an API Gateway operation"),
    ("list_api_gateway_schemas", "/zones/{zone_id}/api_gateway/schemas", "List API Gateway schemas for a zone"),
    ("list_api_gateway_user_schemas", "/zones/{zone_id}/api_gateway/user_schemas", "List API Gateway user-uploaded schemas"),
    ("get_api_gateway_user_schema", "/zones/{zone_id}/api_gateway/user_schemas/{schema_id}", "Get details of an API Gateway user schema"),
    ("get_api_gateway_settings", "/zones/{zone_id}/api_gateway/settings/schema_validation", "Get API Gateway schema validation settings"),
    # ZONE: SPECTRUM (Analytics)
    ("get_spectrum_analytics_summary", "/zones/{zone_id}/spectrum/analytics/events/summary", "Get Spectrum analytics summary"),
    # ZONE: CONTENT UPLOAD SCAN
    ("get_content_upload_scan_settings", "/zones/{zone_id}/content-upload-scan/settings", "Get content upload scan (malware) settings for a zone"),
    # ZONE: HOLD
    ("get_zone_hold", "/zones/{zone_id}/hold", "Get zone hold status"),
    # SHARES (R2)
    ("get_r2_share", "/accounts/{account_id}/shares/{share_id}", "Get details of an R2 share"),
    ("list_r2_share_recipients", "/accounts/{account_id}/shares/{share_id}/recipients", "List recipients of an R2 share"),
    ("list_r2_share_resources", "/accounts/{account_id}/shares/{share_id}/resources", "List resources in an R2 share"),
    # SLURPER (MIGRATION)
    ("list_slurper_jobs", "/accounts/{account_id}/slurper/jobs", "List migration (slurper) jobs"),
    ("get_slurper_job", "/accounts/{account_id}/slurper/jobs/{job_id}", "Get details of a migration job"),
    ("get_slurper_job_progress", "/accounts/{account_id}/slurper/jobs/{job_id}/progress", "Get progress of a migration job"),
    # BOTNET FEED
    ("get_botnet_feed_asn_config", "/accounts/{account_id}/botnet_feed/configs/asn", "Get botnet feed ASN configuration"),
    ("get_botnet_feed_asn_report", "/accounts/{account_id}/botnet_feed/asn/{asn_id}/full_report", "Get botnet feed report for an ASN"),
    # AUTORAG
    ("list_autorag_files", "/accounts/{account_id}/autorag/rags/{rag_id}/files", "List files in an AutoRAG instance"),
    ("list_autorag_jobs", "/accounts/{account_id}/autorag/rags/{rag_id}/jobs", "List jobs for an AutoRAG instance"),
    ("get_autorag_job", "/accounts/{account_id}/autorag/rags/{rag_id}/jobs/{job_id}", "Get details of an AutoRAG job"),
    # DEX (Digital Experience)
    ("list_dex_colos", "/accounts/{account_id}/dex/colos", "List DEX colocations"),
    ("list_dex_fleet_status_devices", "/accounts/{account_id}/dex/fleet-status/devices", "List DEX fleet status by device"),
    ("get_dex_fleet_status_live", "/accounts/{account_id}/dex/fleet-status/live", "Get live DEX fleet status"),
    ("get_dex_fleet_status_over_time", "/accounts/{account_id}/dex/fleet-status/over-time", "Get DEX fleet status over time"),
    ("list_dex_tests_overview", "/accounts/{account_id}/dex/tests/overview", "List DEX tests overview"),
    ("get_dex_tests_unique_devices", "/accounts/{account_id}/dex/tests/unique-devices", "Get unique devices for DEX tests"),
    ("get_dex_http_test", "/accounts/{account_id}/dex/http-tests/{test_id}", "Get DEX HTTP test details"),
    ("get_dex_traceroute_test", "/accounts/{account_id}/dex/traceroute-tests/{test_id}", "Get DEX traceroute test details"),
    ("list_dex_rules", "/accounts/{account_id}/dex/rules", "List DEX rules"),
    ("get_dex_rule", "/accounts/{account_id}/dex/rules/{rule_id}", "Get DEX rule details"),
    ("list_dex_commands", "/accounts/{account_id}/dex/commands", "List DEX commands"),
    ("get_dex_commands_quota", "/accounts/{account_id}/dex/commands/quota", "Get DEX commands quota"),
    # BRAND PROTECTION
    ("list_brand_protection_alerts", "/accounts/{account_id}/brand-protection/alerts", "List brand protection alerts"),
    ("list_brand_protection_brands", "/accounts/{account_id}/brand-protection/brands", "List registered brands for brand protection"),
    ("list_brand_protection_logos", "/accounts/{account_id}/brand-protection/logos", "List brand protection logos"),
    ("get_brand_protection_logo", "/accounts/{account_id}/brand-protection/logos/{logo_id}", "Get brand protection logo details"),
    ("list_brand_protection_matches", "/accounts/{account_id}/brand-protection/matches", "List brand protection matches (potential infringements)"),
    ("list_brand_protection_logo_matches", "/accounts/{account_id}/brand-protection/logo-matches", "List brand protection logo matches"),
    ("list_brand_protection_queries", "/accounts/{account_id}/brand-protection/queries", "List brand protection queries"),
    ("get_brand_protection_domain_info", "/accounts/{account_id}/brand-protection/domain-info", "Get brand protection domain info"),
    ("list_brand_protection_tracked_domains", "/accounts/{account_id}/brand-protection/tracked-domains", "List brand protection tracked domains"),
    ("list_brand_protection_recent_submissions", "/accounts/{account_id}/brand-protection/recent-submissions", "List recent brand protection submissions"),
    # EMAIL SECURITY
    ("list_email_security_investigate", "/accounts/{account_id}/email-security/investigate", "List email security investigation results"),
    ("get_email_security_message", "/accounts/{account_id}/email-security/investigate/{postfix_id}", "Get email security message details"),
    ("get_email_security_message_detections", "/accounts/{account_id}/email-security/investigate/{postfix_id}/detections", "Get email security message detections"),
    ("list_email_security_submissions", "/accounts/{account_id}/email-security/submissions", "List email security submissions"),
    ("list_email_security_allow_policies", "/accounts/{account_id}/email-security/settings/allow_policies", "List email security allow policies"),
    ("get_email_security_allow_policy", "/accounts/{account_id}/email-security/settings/allow_policies/{policy_id}", "Get email security allow policy details"),
    ("list_email_security_block_senders", "/accounts/{account_id}/email-security/settings/block_senders", "List email security blocked senders"),
    ("get_email_security_block_sender", "/accounts/{account_id}/email-security/settings/block_senders/{pattern_id}", "Get email security blocked sender details"),
    ("list_email_security_domains", "/accounts/{account_id}/email-security/settings/domains", "List email security domains"),
    ("get_email_security_domain", "/accounts/{account_id}/email-security/settings/domains/{domain_id}", "Get email security domain details"),
    ("list_email_security_impersonation_registry", "/accounts/{account_id}/email-security/settings/impersonation_registry", "List email security impersonation registry"),
    ("list_email_security_trusted_domains", "/accounts/{account_id}/email-security/settings/trusted_domains", "List email security trusted domains"),
    ("get_email_security_phishguard_reports", "/accounts/{account_id}/email-security/phishguard/reports", "Get email security Phishguard reports"),
    # REALTIME KIT
    ("list_realtime_apps", "/accounts/{account_id}/realtime/kit/apps", "List Realtime Kit apps"),
    ("get_realtime_analytics_daywise", "/accounts/{account_id}/realtime/kit/{app_id}/analytics/daywise", "Get Realtime Kit daily analytics"),
    ("list_realtime_livestreams", "/accounts/{account_id}/realtime/kit/{app_id}/livestreams", "List Realtime Kit livestreams"),
    ("get_realtime_livestream", "/accounts/{account_id}/realtime/kit/{app_id}/livestreams/{livestream_id}", "Get Realtime Kit livestream details"),
    ("list_realtime_meetings", "/accounts/{account_id}/realtime/kit/{app_id}/meetings", "List Realtime Kit meetings"),
    ("get_realtime_meeting", "/accounts/{account_id}/realtime/kit/{app_id}/meetings/{meeting_id}", "Get Realtime Kit meeting details"),
    ("list_realtime_meeting_participants", "/accounts/{account_id}/realtime/kit/{app_id}/meetings/{meeting_id}/participants", "List participants in a Realtime Kit meeting"),
    ("list_realtime_presets", "/accounts/{account_id}/realtime/kit/{app_id}/presets", "List Realtime Kit presets"),
    ("get_realtime_preset", "/accounts/{account_id}/realtime/kit/{app_id}/presets/{preset_id}", "Get Realtime Kit preset details"),
    ("list_realtime_recordings", "/accounts/{account_id}/realtime/kit/{app_id}/recordings", "List Realtime Kit recordings"),
    ("get_realtime_recording", "/accounts/{account_id}/realtime/kit/{app_id}/recordings/{recording_id}", "Get Realtime Kit recording details"),
    ("list_realtime_sessions", "/accounts/{account_id}/realtime/kit/{app_id}/sessions", "List Realtime Kit sessions"),
    ("get_realtime_session", "/accounts/{account_id}/realtime/kit/{app_id}/sessions/{session_id}", "Get Realtime Kit session details"),
    ("get_realtime_session_summary", "/accounts/{account_id}/realtime/kit/{app_id}/sessions/{session_id}/summary", "Get Realtime Kit session summary"),
    ("get_realtime_session_transcript", "/accounts/{account_id}/realtime/kit/{app_id}/sessions/{session_id}/transcript", "Get Realtime Kit session transcript"),
    ("list_realtime_webhooks", "/accounts/{account_id}/realtime/kit/{app_id}/webhooks", "List Realtime Kit webhooks"),
    ("get_realtime_webhook", "/accounts/{account_id}/realtime/kit/{app_id}/webhooks/{webhook_id}", "Get Realtime Kit webhook details"),
    # ZERO TRUST SETTINGS
    ("get_zerotrust_connectivity_settings", "/accounts/{account_id}/zerotrust/connectivity_settings", "Get Zero Trust connectivity settings"),
    ("list_zerotrust_hostname_routes", "/accounts/{account_id}/zerotrust/routes/hostname", "List Zero Trust hostname routes"),
    ("get_zerotrust_hostname_route", "/accounts/{account_id}/zerotrust/routes/hostname/{hostname_route_id}", "Get Zero Trust hostname route details"),
    ("list_zerotrust_subnets", "/accounts/{account_id}/zerotrust/subnets", "List Zero Trust subnets"),
    # CLOUDFORCE ONE
    ("list_cloudforce_one_events", "/accounts/{account_id}/cloudforce-one/events", "List Cloudforce One threat events"),
    ("get_cloudforce_one_event", "/accounts/{account_id}/cloudforce-one/events/{event_id}", "Get Cloudforce One threat event details"),
    ("get_cloudforce_one_events_aggregate", "/accounts/{account_id}/cloudforce-one/events/aggregate", "Get Cloudforce One events aggregate"),
    ("list_cloudforce_one_categories", "/accounts/{account_id}/cloudforce-one/events/categories", "List Cloudforce One event categories"),
    ("list_cloudforce_one_countries", "/accounts/{account_id}/cloudforce-one/events/countries", "List Cloudforce One event countries"),
    ("list_cloudforce_one_datasets", "/accounts/{account_id}/cloudforce-one/events/dataset", "List Cloudforce One datasets"),
    ("get_cloudforce_one_dataset", "/accounts/{account_id}/cloudforce-one/events/dataset/{dataset_id}", "Get Cloudforce One dataset details"),
    ("list_cloudforce_one_indicators", "/accounts/{account_id}/cloudforce-one/events/indicators", "List Cloudforce One threat indicators"),
    ("list_cloudforce_one_indicator_types", "/accounts/{account_id}/cloudforce-one/events/indicator-types", "List Cloudforce One indicator types"),
    ("list_cloudforce_one_tags", "/accounts/{account_id}/cloudforce-one/events/tags", "List Cloudforce One tags"),
    ("list_cloudforce_one_target_industries", "/accounts/{account_id}/cloudforce-one/events/targetIndustries", "List Cloudforce One target industries"),
    ("list_cloudforce_one_queries", "/accounts/{account_id}/cloudforce-one/events/queries", "List Cloudforce One queries"),
    ("get_cloudforce_one_query", "/accounts/{account_id}/cloudforce-one/events/queries/{query_id}", "Get Cloudforce One query details"),
    ("get_cloudforce_one_request", "/accounts/{account_id}/cloudforce-one/requests/{request_id}", "Get Cloudforce One request details"),
    ("get_cloudforce_one_requests_quota", "/accounts/{account_id}/cloudforce-one/requests/quota", "Get Cloudforce One requests quota"),
    ("list_cloudforce_one_request_types", "/accounts/{account_id}/cloudforce-one/requests/types", "List Cloudforce One request types"),
    ("get_cloudforce_one_scans_config", "/accounts/{account_id}/cloudforce-one/scans/config", "Get Cloudforce One scans configuration"),
)


def _filtered_operations() -> list[OperationSpec]:
    return [
        rest_operation(
            "get_audit_logs",
            "/accounts/{account_id}/audit_logs",
            "Get audit logs for a Cloudflare account. Returns recent activity including"
            " user actions, API calls, and configuration changes.",
            _date("since", "Start date in ISO 8601 format (e.g., 2024-01-01T00:00:00Z)"),
            _date("before", "End date in ISO 8601 format"),
            query_parameter(
                "actor_email",
                "Filter by actor email address",
                max_length=MAX_EMAIL_LENGTH,
                wire_name="actor.email",
            ),
            query_parameter(
                "actor_ip",
                "Filter by actor IP address",
                max_length=MAX_IP_LENGTH,
                wire_name="actor.ip",
            ),
            query_parameter(
                "action_type",
                "Filter by action type (e.g., 'add', 'delete', 'edit')",
                max_length=MAX_ACTION_LENGTH,
                wire_name="action.type",
            ),
            query_parameter(
                "zone_name",
                "Filter by zone name",
                max_length=MAX_NAME_LENGTH,
                wire_name="zone.name",
            ),
            _per_page(),
            _page(),
        ),
        rest_operation(
            "list_zones",
            "/zones",
            "List all zones (domains) in the account",
            query_parameter(
                "account_id",
                "Filter by account ID",
                max_length=MAX_ID_LENGTH,
                wire_name="account.id",
            ),
            query_parameter("name", "Filter by zone name (domain)", max_length=MAX_NAME_LENGTH),
            query_parameter(
                "status",
                "Filter by status (active, pending, initializing, moved, deleted)",
                max_length=MAX_ACTION_LENGTH,
            ),
            _per_page(),
            _page(),
        ),
        rest_operation(
            "list_dns_records",
            "/zones/{zone_id}/dns_records",
            "List DNS records for a zone",
            query_parameter(
                "type",
                "Filter by record type (A, AAAA, CNAME, MX, TXT, etc.)",
                max_length=MAX_ACTION_LENGTH,
            ),
            query_parameter("name", "Filter by record name", max_length=MAX_NAME_LENGTH),
            _per_page(),
        ),
        rest_operation(
            "list_custom_hostnames",
            "/zones/{zone_id}/custom_hostnames",
            "List custom hostnames (SSL for SaaS) for a zone",
            query_parameter("hostname", "Filter by hostname", max_length=MAX_NAME_LENGTH),
            _per_page(),
        ),
        rest_operation(
            "get_zone_analytics",
            "/zones/{zone_id}/analytics/dashboard",
            "Get analytics dashboard data for a zone",
            _date(
                "since",
                "Start date in ISO 8601 format or relative"
                " (e.g., -1440 for last 24 hours in minutes)",
            ),
            _date("until", "End date in ISO 8601 format"),
        ),
        rest_operation(
            "get_analytics_by_colo",
            "/zones/{zone_id}/analytics/colos",
            "Get zone analytics broken down by Cloudflare colo/data center",
            _date("since", "Start date"),
            _date("until", "End date"),
        ),
        rest_operation(
            "list_kv_keys",
            "/accounts/{account_id}/storage/kv/namespaces/{namespace_id}/keys",
            "List keys in a KV namespace",
            query_parameter("prefix", "Filter keys by prefix", max_length=512),
            query_parameter("limit", "Maximum keys to return", integer=True, maximum=1000),
        ),
        rest_operation(
            "list_origin_ca_certificates",
            "/certificates",
            "List Origin CA certificates for a zone",
            query_parameter(
                "zone_id", "The zone ID", max_length=MAX_ID_LENGTH, required=True
            ),
        ),
        rest_operation(
            "get_intel_domain",
            "/accounts/{account_id}/intel/domain",
            "Get intelligence about a domain",
            query_parameter("domain", "Domain to query", max_length=MAX_NAME_LENGTH),
        ),
        rest_operation(
            "get_intel_ip",
            "/accounts/{account_id}/intel/ip",
            "Get intelligence about an IP address",
            query_parameter("ipv4", "IPv4 address to query", max_length=MAX_IP_LENGTH),
            query_parameter("ipv6", "IPv6 address to query", max_length=MAX_IP_LENGTH),
        ),
        rest_operation(
            "get_intel_whois",
            "/accounts/{account_id}/intel/whois",
            "Get WHOIS information for a domain",
            query_parameter("domain", "Domain to query", max_length=MAX_NAME_LENGTH),
        ),
        rest_operation(
            "get_brand_protection_url_info",
            "/accounts/{account_id}/brand-protection/url-info",
            "Get brand protection URL info",
            query_parameter("url", "URL to check", max_length=MAX_URL_LENGTH),
        ),
    ]


def _composite_operations() -> list[OperationSpec]:
    zone = [path_parameter("zone_id")]
    return [
        OperationSpec(
            name="get_ssl_settings",
            kind="composite",
            path="/zones/{zone_id}/settings",
            description="Get SSL/TLS settings for a zone including encryption mode and TLS version",
            parameters=zone,
            parts={
                "ssl_mode": "/zones/{zone_id}/settings/ssl",
                "min_tls_version": "/zones/{zone_id}/settings/min_tls_version",
                "tls_1_3": "/zones/{zone_id}/settings/tls_1_3",
                "universal_ssl": "/zones/{zone_id}/ssl/universal/settings",
            },
            optional_parts=["universal_ssl"],
        ),
        OperationSpec(
            name="get_argo_settings",
            kind="composite",
            path="/zones/{zone_id}/argo",
            description="Get Argo Smart Routing and Tiered Caching settings for a zone",
            parameters=zone,
            parts={
                "smart_routing": "/zones/{zone_id}/argo/smart_routing",
                "tiered_caching": "/zones/{zone_id}/argo/tiered_caching",
            },
            optional_parts=["smart_routing", "tiered_caching"],
        ),
        OperationSpec(
            name="get_cache_settings",
            kind="composite",
            path="/zones/{zone_id}/settings",
            description="Get cache settings for a zone",
            parameters=zone,
            parts={
                "cache_level": "/zones/{zone_id}/settings/cache_level",
                "browser_cache_ttl": "/zones/{zone_id}/settings/browser_cache_ttl",
            },
        ),
    ]


GRAPHQL_OPERATION = OperationSpec(
    name="graphql_analytics",
    kind="graphql",
    method="POST",
    path="/graphql",
    description=(
        "Query Cloudflare Analytics using GraphQL. Supports zones, accounts,"
        " and various datasets. Read-only queries only."
    ),
    parameters=[
        ParameterSpec(
            name="query",
            location="body",
            max_length=MAX_QUERY_LENGTH,
            description="GraphQL query string",
        ),
        ParameterSpec(
            name="variables",
            location="body",
            required=False,
            max_length=MAX_QUERY_LENGTH,
            description="JSON string of variables for the query",
        ),
    ],
)


def build_catalog() -> list[OperationSpec]:
    """Return every operation descriptor, table rows first."""
    operations = [rest_operation(*row) for row in _PATH_OPERATIONS]
    operations += _filtered_operations()
    operations += _composite_operations()
    operations.append(GRAPHQL_OPERATION)
    return operations


def default_registry() -> OperationRegistry:
    """Return a registry pre-loaded with the full catalog."""
    return OperationRegistry(build_catalog())


__all__ = [
    "GRAPHQL_OPERATION",
    "PATH_PARAMETER_DESCRIPTIONS",
    "build_catalog",
    "default_registry",
    "path_parameter",
    "query_parameter",
    "rest_operation",
]
