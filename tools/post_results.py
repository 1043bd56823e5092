"""
Post result tools — per-platform outcome of each published post.
"""

from mcp.types import Tool, TextContent

from client import PostBridgeClient
from schemas import IdArgs, PostResultsListArgs, input_schema
from utils import json_result


LIST_TOOL = Tool(
    name="postResults_list",
    description="Get a paginated result for post results with optional filters.",
    inputSchema=input_schema(PostResultsListArgs),
)

GET_TOOL = Tool(
    name="postResults_get",
    description="Get a post result by ID.",
    inputSchema=input_schema(IdArgs),
)


async def handle_list(client: PostBridgeClient, arguments: dict) -> list[TextContent]:
    args = PostResultsListArgs.model_validate(arguments)
    res = await client.post_results.list(
        args.offset, args.limit, post_id=args.post_id, platform=args.platform,
    )
    return json_result(res)


async def handle_get(client: PostBridgeClient, arguments: dict) -> list[TextContent]:
    args = IdArgs.model_validate(arguments)
    return json_result(await client.post_results.get(args.id))


TOOLS = [LIST_TOOL, GET_TOOL]

HANDLERS = {
    "postResults_list": handle_list,
    "postResults_get": handle_get,
}
