"""
Post tools — list, inspect, create, update and delete posts.

Create and update build the API body from only the arguments the caller
supplied, so "omit" always means "leave to the API / leave unchanged".
"""

from mcp.types import Tool, TextContent

from client import PostBridgeClient
from schemas import IdArgs, PostCreateArgs, PostsListArgs, PostUpdateArgs, input_schema
from utils import json_result


LIST_TOOL = Tool(
    name="posts_list",
    description="Get a paginated result for posts with optional platform and status filters.",
    inputSchema=input_schema(PostsListArgs),
)

GET_TOOL = Tool(
    name="posts_get",
    description="Get a single post by ID.",
    inputSchema=input_schema(IdArgs),
)

CREATE_TOOL = Tool(
    name="posts_create",
    description=(
        "Create a new post. For local media files, use media_upload tool first to get media IDs, "
        "then pass them here."
    ),
    inputSchema=input_schema(PostCreateArgs),
)

UPDATE_TOOL = Tool(
    name="posts_update",
    description="Update an existing post. If updating a 'scheduled' post, always pass 'scheduledAt' to keep schedule.",
    inputSchema=input_schema(PostUpdateArgs),
)

DELETE_TOOL = Tool(
    name="posts_delete",
    description="Delete a post by ID.",
    inputSchema=input_schema(IdArgs),
)


async def handle_list(client: PostBridgeClient, arguments: dict) -> list[TextContent]:
    """Handle posts_list tool call."""
    args = PostsListArgs.model_validate(arguments)
    res = await client.posts.list(args.offset, args.limit, platform=args.platform, status=args.status)
    return json_result(res)


async def handle_get(client: PostBridgeClient, arguments: dict) -> list[TextContent]:
    """Handle posts_get tool call."""
    args = IdArgs.model_validate(arguments)
    return json_result(await client.posts.get(args.id))


async def handle_create(client: PostBridgeClient, arguments: dict) -> list[TextContent]:
    """Handle posts_create tool call."""
    args = PostCreateArgs.model_validate(arguments)
    return json_result(await client.posts.create(args.to_request()))


async def handle_update(client: PostBridgeClient, arguments: dict) -> list[TextContent]:
    """Handle posts_update tool call."""
    args = PostUpdateArgs.model_validate(arguments)
    return json_result(await client.posts.update(args.id, args.to_request()))


async def handle_delete(client: PostBridgeClient, arguments: dict) -> list[TextContent]:
    """Handle posts_delete tool call."""
    args = IdArgs.model_validate(arguments)
    return json_result(await client.posts.delete(args.id))


TOOLS = [LIST_TOOL, GET_TOOL, CREATE_TOOL, UPDATE_TOOL, DELETE_TOOL]

HANDLERS = {
    "posts_list": handle_list,
    "posts_get": handle_get,
    "posts_create": handle_create,
    "posts_update": handle_update,
    "posts_delete": handle_delete,
}
