"""
Social account tools — list and inspect the accounts connected to Post Bridge.
"""

from mcp.types import Tool, TextContent

from client import PostBridgeClient
from schemas import SocialAccountGetArgs, SocialAccountsListArgs, input_schema
from utils import json_result


LIST_TOOL = Tool(
    name="socialAccounts_list",
    description="List social accounts from Post Bridge with optional filters: platform(s), username(s), and pagination.",
    inputSchema=input_schema(SocialAccountsListArgs),
)

GET_TOOL = Tool(
    name="socialAccounts_get",
    description="Get a single social account by its numeric ID from Post Bridge.",
    inputSchema=input_schema(SocialAccountGetArgs),
)


async def handle_list(client: PostBridgeClient, arguments: dict) -> list[TextContent]:
    """Handle socialAccounts_list tool call."""
    args = SocialAccountsListArgs.model_validate(arguments)
    res = await client.social_accounts.list(
        args.offset, args.limit, platform=args.platform, username=args.username,
    )
    return json_result(res)


async def handle_get(client: PostBridgeClient, arguments: dict) -> list[TextContent]:
    """Handle socialAccounts_get tool call."""
    args = SocialAccountGetArgs.model_validate(arguments)
    return json_result(await client.social_accounts.get(args.id))


TOOLS = [LIST_TOOL, GET_TOOL]

HANDLERS = {
    "socialAccounts_list": handle_list,
    "socialAccounts_get": handle_get,
}
