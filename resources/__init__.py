"""
Post Bridge MCP Resources - Resource definitions and reader.
"""

from mcp.types import Resource

from config import Settings
from resources import info


# Collect all resources
RESOURCES: list[Resource] = [
    info.RESOURCE,
]

# Map resource URIs to readers
_READERS = {
    info.URI: info.read,
}


def read_resource(uri: str, settings: Settings) -> str:
    """Read a resource by URI."""
    reader = _READERS.get(str(uri))
    if reader is None:
        raise ValueError(f"Unknown resource: {uri}")
    return reader(settings)
