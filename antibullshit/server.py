"""
MCP Server — stdio Transport

Exposes the three tools to MCP clients (Claude Desktop, Cursor, ...)
over stdin/stdout. stdout carries the protocol; logs go to stderr.

Usage:
    anti-bullshit-mcp
    python -m antibullshit.server

Set VALIDATION_FRAMEWORK to choose the default framework.
"""

from __future__ import annotations

import asyncio
from typing import Any

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from antibullshit.config import settings
from antibullshit.errors import ToolError
from antibullshit.logging import get_logger, setup_logging
from antibullshit.schemas.tools import TOOL_DEFINITIONS
from antibullshit.tools import dispatch

logger = get_logger("server")

server = Server(settings.SERVER_NAME, version=settings.SERVER_VERSION)


def to_mcp_error(error: ToolError) -> McpError:
    """Carry a tool failure onto the wire with its JSON-RPC code."""
    return McpError(types.ErrorData(code=error.code, message=error.message))


async def handle_list_tools() -> list[types.Tool]:
    return [
        types.Tool(
            name=tool["name"],
            description=tool["description"],
            inputSchema=tool["inputSchema"],
        )
        for tool in TOOL_DEFINITIONS
    ]


async def handle_call_tool(name: str, arguments: Any) -> list[types.TextContent]:
    """Run a tool and return its report and JSON payload as two text blocks."""
    try:
        result = dispatch(name, arguments, settings.VALIDATION_FRAMEWORK)
    except ToolError as e:
        logger.warning(
            f"Tool call rejected: {e.message}",
            extra={"tool": name, "error_type": type(e).__name__},
        )
        raise to_mcp_error(e) from e

    return [
        types.TextContent(type="text", text=block["text"])
        for block in result.content()
    ]


async def handle_call_tool_request(req: types.CallToolRequest) -> types.ServerResult:
    """
    Raw tools/call handler.

    McpError raised here reaches the client as a JSON-RPC error carrying
    its code; the call_tool decorator would fold it into an isError result.
    """
    content = await handle_call_tool(req.params.name, req.params.arguments)
    return types.ServerResult(types.CallToolResult(content=content, isError=False))


server.list_tools()(handle_list_tools)
server.request_handlers[types.CallToolRequest] = handle_call_tool_request


async def run_stdio():
    """Serve requests on stdin/stdout until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        logger.info(
            "Anti-bullshit MCP server running on stdio",
            extra={"framework": settings.VALIDATION_FRAMEWORK},
        )
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def main():
    setup_logging()
    try:
        asyncio.run(run_stdio())
    except KeyboardInterrupt:
        logger.info("Server interrupted")


if __name__ == "__main__":
    main()
