"""
Post Bridge API client — async httpx wrapper with bearer auth.

One PostBridgeClient owns a single httpx.AsyncClient and exposes one
resource client per API resource (social accounts, posts, post results, media).
Built once from Settings and handed to every tool handler.
"""

from __future__ import annotations

import logging

import httpx

from config import Settings

logger = logging.getLogger(__name__)

API_PREFIX = "/v1"

# Seconds
API_TIMEOUT = 30.0
UPLOAD_TIMEOUT = 300.0


class PostBridgeAPIError(Exception):
    """Raised when the Post Bridge API answers with a non-2xx status."""

    def __init__(self, method: str, path: str, status_code: int, body: str):
        super().__init__(f"Post Bridge API {method} {path} returned {status_code}: {body}")
        self.method = method
        self.path = path
        self.status_code = status_code
        self.body = body


def _query(**filters) -> dict:
    """Drop filters that were not supplied; lists become repeated query params."""
    return {key: value for key, value in filters.items() if value is not None}


class _Resource:
    """Base for resource clients; all share the parent's HTTP session."""

    def __init__(self, client: "PostBridgeClient"):
        self._client = client

    async def _request(self, method: str, path: str, **kwargs) -> dict | list:
        return await self._client.request(method, path, **kwargs)


class SocialAccountsResource(_Resource):
    async def list(self, offset: int, limit: int, platform: list[str] | None = None,
                   username: list[str] | None = None) -> dict | list:
        params = _query(offset=offset, limit=limit, platform=platform, username=username)
        return await self._request("GET", "/social-accounts", params=params)

    async def get(self, account_id: int) -> dict | list:
        return await self._request("GET", f"/social-accounts/{account_id}")


class PostsResource(_Resource):
    async def list(self, offset: int, limit: int, platform: list[str] | None = None,
                   status: list[str] | None = None) -> dict | list:
        params = _query(offset=offset, limit=limit, platform=platform, status=status)
        return await self._request("GET", "/posts", params=params)

    async def get(self, post_id: str) -> dict | list:
        return await self._request("GET", f"/posts/{post_id}")

    async def create(self, body: dict) -> dict | list:
        return await self._request("POST", "/posts", json=body)

    async def update(self, post_id: str, body: dict) -> dict | list:
        return await self._request("PATCH", f"/posts/{post_id}", json=body)

    async def delete(self, post_id: str) -> dict | list:
        return await self._request("DELETE", f"/posts/{post_id}")


class PostResultsResource(_Resource):
    async def list(self, offset: int, limit: int, post_id: list[str] | None = None,
                   platform: list[str] | None = None) -> dict | list:
        params = _query(offset=offset, limit=limit, post_id=post_id, platform=platform)
        return await self._request("GET", "/post-results", params=params)

    async def get(self, result_id: str) -> dict | list:
        return await self._request("GET", f"/post-results/{result_id}")


class MediaResource(_Resource):
    async def list(self, offset: int, limit: int, post_id: list[str] | None = None,
                   media_type: list[str] | None = None) -> dict | list:
        params = _query(offset=offset, limit=limit, post_id=post_id, type=media_type)
        return await self._request("GET", "/media", params=params)

    async def get(self, media_id: str) -> dict | list:
        return await self._request("GET", f"/media/{media_id}")

    async def delete(self, media_id: str) -> dict | list:
        return await self._request("DELETE", f"/media/{media_id}")

    async def create_upload_url(self, name: str, mime_type: str, size_bytes: int) -> dict:
        body = {"name": name, "mime_type": mime_type, "size_bytes": size_bytes}
        return await self._request("POST", "/media/create-upload-url", json=body)


class PostBridgeClient:
    """Authenticated Post Bridge API session."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings
        self._http = httpx.AsyncClient(
            base_url=f"{settings.base_url}{API_PREFIX}",
            headers={"Authorization": f"Bearer {settings.api_token}"},
            timeout=API_TIMEOUT,
            transport=transport,
        )
        # Signed URLs carry their own authorization; never send the bearer token there
        self._upload_http = httpx.AsyncClient(timeout=UPLOAD_TIMEOUT, transport=transport)

        self.social_accounts = SocialAccountsResource(self)
        self.posts = PostsResource(self)
        self.post_results = PostResultsResource(self)
        self.media = MediaResource(self)

    async def request(self, method: str, path: str, **kwargs) -> dict | list:
        """
        Make an authenticated API request.

        Args:
            method: HTTP method (GET, POST, PATCH, DELETE)
            path: API path below /v1 (e.g. "/posts/{id}")
            **kwargs: Extra args passed to httpx (json, params, etc.)

        Returns:
            Parsed JSON response, or {} for empty bodies.

        Raises:
            PostBridgeAPIError: On a non-2xx response.
            httpx.RequestError: On connection errors.
        """
        logger.debug("%s %s", method, path)
        resp = await self._http.request(method, path, **kwargs)
        if not resp.is_success:
            raise PostBridgeAPIError(method, path, resp.status_code, resp.text)
        if resp.status_code == 204 or not resp.content:
            return {}
        return resp.json()

    async def upload_to_signed_url(self, upload_url: str, content: bytes, mime_type: str) -> httpx.Response:
        """PUT raw bytes to a signed upload URL. The caller inspects the status."""
        logger.debug("PUT signed upload (%d bytes, %s)", len(content), mime_type)
        return await self._upload_http.put(
            upload_url,
            content=content,
            headers={"Content-Type": mime_type},
        )

    async def aclose(self) -> None:
        await self._http.aclose()
        await self._upload_http.aclose()

    async def __aenter__(self) -> "PostBridgeClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
