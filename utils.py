"""
Shared utilities for Post Bridge MCP Server.
"""

import json
from datetime import datetime, timezone

from mcp.types import TextContent


def format_timestamp(value: datetime) -> str:
    """Render an aware datetime as an ISO-8601 UTC string (e.g. 2025-01-15T14:00:00Z)."""
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def json_result(payload) -> list[TextContent]:
    """Serialize a response payload as a single JSON text block."""
    return [TextContent(type="text", text=json.dumps(payload))]
