"""MCP server wiring: exposes a ToolServer over the stdio transport."""

from __future__ import annotations

import logging

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from weather_server.config import ServerConfig, default_config
from weather_server.tools import ToolServer

log = logging.getLogger("weather-server")


def create_server(config: ServerConfig | None = None) -> Server:
    """Build an MCP server answering tools/list and tools/call from *config*."""
    config = config or default_config()
    tool_server = ToolServer(config)
    server: Server = Server(config.name, version=config.version, instructions=config.instructions)

    async def list_tools(_request: types.ListToolsRequest) -> types.ServerResult:
        return types.ServerResult(types.ListToolsResult(tools=tool_server.list_capabilities()))

    async def call_tool(request: types.CallToolRequest) -> types.ServerResult:
        outcome = tool_server.invoke(request.params.name, request.params.arguments)
        if isinstance(outcome, types.ErrorData):
            # Raised so the session answers with a JSON-RPC error, not an isError result.
            raise McpError(outcome)
        return types.ServerResult(outcome)

    # Installed directly: the call_tool() decorator folds every exception into
    # an isError result, which would hide METHOD_NOT_FOUND from the client.
    server.request_handlers[types.ListToolsRequest] = list_tools
    server.request_handlers[types.CallToolRequest] = call_tool
    return server


async def serve(server: Server) -> None:
    """Run *server* over stdin/stdout until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        log.info("Weather server running and awaiting MCP requests")
        await server.run(read_stream, write_stream, server.create_initialization_options())
