"""
postbridge://info resource - Server information.
"""

from mcp.types import Resource

from config import SERVER_NAME, Settings, __version__
from tools import TOOLS


URI = "postbridge://info"

RESOURCE = Resource(
    uri=URI,
    name="Post Bridge Server Info",
    mimeType="text/plain",
    description="Information about this Post Bridge MCP server"
)


def read(settings: Settings) -> str:
    """Read the info resource."""
    tool_lines = "\n".join(f"- {tool.name}: {tool.description}" for tool in TOOLS)
    return f"""{SERVER_NAME} v{__version__}

Model Context Protocol server for the Post Bridge social media API.

API base URL: {settings.base_url}

Tools:
{tool_lines}
"""
