"""
Post Bridge MCP Tools - Tool definitions and dispatcher.
"""

import logging

from mcp.types import Tool, TextContent

from client import PostBridgeClient
from tools import social_accounts, posts, post_results, media

logger = logging.getLogger(__name__)


# Collect all tools
TOOLS: list[Tool] = [
    *social_accounts.TOOLS,
    *posts.TOOLS,
    *post_results.TOOLS,
    *media.TOOLS,
]

# Map tool names to handlers
_HANDLERS = {
    **social_accounts.HANDLERS,
    **posts.HANDLERS,
    **post_results.HANDLERS,
    **media.HANDLERS,
}


async def call_tool(client: PostBridgeClient, name: str, arguments: dict | None) -> list[TextContent]:
    """Dispatch a tool call to the appropriate handler."""
    handler = _HANDLERS.get(name)
    if handler is None:
        raise ValueError(f"Unknown tool: {name}")
    logger.info("tool call: %s", name)
    return await handler(client, arguments or {})
