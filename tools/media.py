"""
Media tools — signed upload URLs, media records, and local file upload.

media_upload hides the two-step upload protocol: ask Post Bridge for a signed
URL, then PUT the file bytes to it. It always returns a result record and
never raises.
"""

import asyncio
import logging
import os

from mcp.types import Tool, TextContent

from client import PostBridgeClient
from schemas import CreateUploadUrlArgs, IdArgs, MediaListArgs, MediaUploadArgs, input_schema
from utils import json_result

logger = logging.getLogger(__name__)

# Extension -> MIME type. No content sniffing.
MIME_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".mp4": "video/mp4",
    ".mov": "video/quicktime",
}


CREATE_UPLOAD_URL_TOOL = Tool(
    name="media_createUploadUrl",
    description="Create a signed upload URL to upload media.",
    inputSchema=input_schema(CreateUploadUrlArgs),
)

DELETE_TOOL = Tool(
    name="media_delete",
    description="Delete media by ID.",
    inputSchema=input_schema(IdArgs),
)

GET_TOOL = Tool(
    name="media_get",
    description="Get media by ID.",
    inputSchema=input_schema(IdArgs),
)

LIST_TOOL = Tool(
    name="media_list",
    description="Get a paginated result for media with optional filters.",
    inputSchema=input_schema(MediaListArgs),
)

UPLOAD_TOOL = Tool(
    name="media_upload",
    description=(
        "Upload a media file from local filesystem. Handles the entire upload process "
        "and returns the media ID."
    ),
    inputSchema=input_schema(MediaUploadArgs),
)


class UnsupportedFileType(ValueError):
    pass


class UploadFailed(Exception):
    def __init__(self, status_code: int, body: str):
        super().__init__(f"Upload failed with status {status_code}: {body}")
        self.status_code = status_code


def mime_type_for(file_path: str) -> str:
    """Look up the MIME type for a path by its extension."""
    ext = os.path.splitext(file_path)[1].lower()
    mime_type = MIME_TYPES.get(ext)
    if mime_type is None:
        raise UnsupportedFileType(
            f"Unsupported file type: {ext}. Supported types: .png, .jpg, .jpeg, .mp4, .mov"
        )
    return mime_type


def _read_bytes(file_path: str) -> bytes:
    with open(file_path, "rb") as f:
        return f.read()


async def upload_file(client: PostBridgeClient, file_path: str) -> dict:
    """
    Upload a local file to Post Bridge.

    Returns:
        {"mediaId", "fileName", "mimeType", "sizeBytes", "success": True} on success,
        {"success": False, "error": message} if any step fails.
    """
    try:
        size_bytes = os.stat(file_path).st_size
        file_name = os.path.basename(file_path)
        mime_type = mime_type_for(file_path)

        # 1. Signed URL
        upload = await client.media.create_upload_url(file_name, mime_type, size_bytes)

        # 2. File content
        content = await asyncio.to_thread(_read_bytes, file_path)

        # 3. PUT to the signed URL
        resp = await client.upload_to_signed_url(upload["upload_url"], content, mime_type)
        if not resp.is_success:
            raise UploadFailed(resp.status_code, resp.text)

        return {
            "mediaId": upload["media_id"],
            "fileName": file_name,
            "mimeType": mime_type,
            "sizeBytes": size_bytes,
            "success": True,
        }
    except Exception as e:
        logger.warning("media upload of %s failed: %s", file_path, e)
        return {"success": False, "error": str(e)}


async def handle_create_upload_url(client: PostBridgeClient, arguments: dict) -> list[TextContent]:
    """Handle media_createUploadUrl tool call."""
    args = CreateUploadUrlArgs.model_validate(arguments)
    res = await client.media.create_upload_url(args.name, args.mime_type, args.size_bytes)
    return json_result(res)


async def handle_delete(client: PostBridgeClient, arguments: dict) -> list[TextContent]:
    args = IdArgs.model_validate(arguments)
    return json_result(await client.media.delete(args.id))


async def handle_get(client: PostBridgeClient, arguments: dict) -> list[TextContent]:
    args = IdArgs.model_validate(arguments)
    return json_result(await client.media.get(args.id))


async def handle_list(client: PostBridgeClient, arguments: dict) -> list[TextContent]:
    """Handle media_list tool call."""
    args = MediaListArgs.model_validate(arguments)
    res = await client.media.list(args.offset, args.limit, post_id=args.post_id, media_type=args.type)
    return json_result(res)


async def handle_upload(client: PostBridgeClient, arguments: dict) -> list[TextContent]:
    """Handle media_upload tool call."""
    args = MediaUploadArgs.model_validate(arguments)
    return json_result(await upload_file(client, args.file_path))


TOOLS = [CREATE_UPLOAD_URL_TOOL, DELETE_TOOL, GET_TOOL, LIST_TOOL, UPLOAD_TOOL]

HANDLERS = {
    "media_createUploadUrl": handle_create_upload_url,
    "media_delete": handle_delete,
    "media_get": handle_get,
    "media_list": handle_list,
    "media_upload": handle_upload,
}
