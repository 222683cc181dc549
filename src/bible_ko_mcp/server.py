"""
MCP server exposing Korean Bible tools over stdio.

The MCP runtime starts a task per request. Tool calls still run one at
a time: each runs in a worker thread that holds a lock until it finishes.
"""

import asyncio
import logging
import threading
from typing import Any

from mcp.server import Server
from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server
from mcp.types import ServerCapabilities, TextContent, Tool, ToolsCapability

from . import __version__, tools

logger = logging.getLogger(__name__)

SERVER_NAME = "bible-ko-mcp"
SERVER_VERSION = __version__

server = Server(SERVER_NAME)

_call_lock = threading.Lock()


def _call_tool_serialized(tool_name: str, tool_args: dict[str, Any]) -> str:
    with _call_lock:
        return tools.call_tool(tool_name, tool_args)


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List available tools."""
    return tools.TOOLS


@server.call_tool()
async def call_tool(tool_name: str, tool_args: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls. Errors come back as text, never as protocol faults."""
    text = await asyncio.to_thread(_call_tool_serialized, tool_name, tool_args)
    return [TextContent(type="text", text=text)]


async def main():
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Bible Korean MCP Server running on stdio")
        await server.run(
            read_stream,
            write_stream,
            InitializationOptions(
                server_name=SERVER_NAME,
                server_version=SERVER_VERSION,
                capabilities=ServerCapabilities(tools=ToolsCapability()),
            ),
        )


def run_server():
    """Entry point for the serve command."""
    asyncio.run(main())
