"""MCP stdio server exposing every catalog operation as a tool."""

from __future__ import annotations

import json
from typing import Any

import mcp.types as types
import structlog
from mcp.server import Server
from mcp.server.stdio import stdio_server

from aumai_cfguard.catalog import default_registry
from aumai_cfguard.config import GatewayConfig
from aumai_cfguard.errors import CfGuardError
from aumai_cfguard.gateway import GENERIC_ERROR_MESSAGE, RequestGateway
from aumai_cfguard.operations import OperationRegistry

SERVER_NAME = "cloudflare-api"

logger = structlog.get_logger(__name__)


def tool_definitions(registry: OperationRegistry) -> list[types.Tool]:
    """Return one MCP tool per registered operation."""
    return [
        types.Tool(name=spec.name, description=spec.description, inputSchema=spec.input_schema())
        for spec in registry.all_specs()
    ]


async def dispatch_tool(
    gateway: RequestGateway,
    registry: OperationRegistry,
    name: str,
    arguments: dict[str, Any] | None,
) -> list[types.TextContent]:
    """Run the operation *name* and render its result as indented JSON.

    :class:`~aumai_cfguard.errors.CfGuardError` subclasses propagate with
    their own message, which is always safe to show.  Anything else is
    logged and replaced by the generic message.
    """
    spec = registry.get(name)
    try:
        result = await gateway.invoke(spec, arguments or {})
    except CfGuardError:
        raise
    except Exception as exc:
        logger.exception("tool_failed", tool=name)
        raise CfGuardError(GENERIC_ERROR_MESSAGE) from exc
    return [types.TextContent(type="text", text=json.dumps(result, indent=2))]


def create_server(gateway: RequestGateway, registry: OperationRegistry) -> Server:
    """Build the MCP server bound to *gateway* and *registry*."""
    server: Server = Server(SERVER_NAME)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return tool_definitions(registry)

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        return await dispatch_tool(gateway, registry, name, arguments)

    return server


async def run_server(config: GatewayConfig, registry: OperationRegistry | None = None) -> None:
    """Serve the catalog over stdio until the host disconnects."""
    registry = registry if registry is not None else default_registry()
    async with RequestGateway.from_config(config) as gateway:
        server = create_server(gateway, registry)
        logger.info("server_starting", name=SERVER_NAME, tools=len(registry))
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())


__all__ = ["SERVER_NAME", "create_server", "dispatch_tool", "run_server", "tool_definitions"]
