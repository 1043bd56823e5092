#!/usr/bin/env python3
"""
Post Bridge MCP Server
A Model Context Protocol server exposing the Post Bridge social media API as tools.
"""

import asyncio
import logging
import sys

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent, Resource

import resources
import tools
from client import PostBridgeClient
from config import SERVER_NAME, ConfigurationError, Settings, load_config

logger = logging.getLogger(__name__)


def create_server(client: PostBridgeClient, settings: Settings) -> Server:
    """Build the MCP server with every handler bound to one API client."""
    app = Server(SERVER_NAME)

    @app.list_tools()
    async def list_tools() -> list[Tool]:
        """List available Post Bridge tools."""
        return tools.TOOLS

    @app.call_tool()
    async def call_tool(name: str, arguments: dict) -> list[TextContent]:
        """Handle tool calls. Errors propagate and are reported to the caller by the runtime."""
        return await tools.call_tool(client, name, arguments)

    @app.list_resources()
    async def list_resources() -> list[Resource]:
        """List available resources."""
        return resources.RESOURCES

    @app.read_resource()
    async def read_resource(uri) -> str:
        """Read a resource by URI."""
        return resources.read_resource(uri, settings)

    return app


def setup_logging(level: str) -> None:
    # stdout is the MCP transport; logs go to stderr
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def main(settings: Settings):
    """Run the MCP server."""
    async with PostBridgeClient(settings) as client:
        app = create_server(client, settings)
        logger.info("Starting %s against %s", SERVER_NAME, settings.base_url)
        async with stdio_server() as (read_stream, write_stream):
            await app.run(
                read_stream,
                write_stream,
                app.create_initialization_options()
            )


def run() -> None:
    """Console entry point."""
    try:
        settings = load_config()
    except ConfigurationError as e:
        setup_logging("INFO")
        logger.error("%s", e)
        sys.exit(1)

    setup_logging(settings.log_level)
    asyncio.run(main(settings))


if __name__ == "__main__":
    run()
