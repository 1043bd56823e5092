"""
Pytest configuration and fixtures for Post Bridge MCP tests.
"""
import httpx
import pytest

from client import PostBridgeClient
from config import Settings

BASE_URL = "https://api.test"
UPLOAD_URL = "https://uploads.test/signed/abc?sig=xyz"


class FakeAPI:
    """Records every request and answers from a route table keyed by (method, url without query)."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], httpx.Response] = {}

    def add(self, method: str, url: str, status_code: int = 200, json=None, text: str | None = None):
        if json is not None:
            response = httpx.Response(status_code, json=json)
        elif text is not None:
            response = httpx.Response(status_code, text=text)
        else:
            response = httpx.Response(status_code)
        self.routes[(method, url)] = response

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = request.url
        key = (request.method, f"{url.scheme}://{url.host}{url.path}")
        response = self.routes.get(key)
        if response is None:
            return httpx.Response(404, json={"message": f"no route for {key}"})
        return response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def settings():
    return Settings(base_url=BASE_URL, api_token="test-token")


@pytest.fixture
def api():
    return FakeAPI()


@pytest.fixture
def client(settings, api):
    return PostBridgeClient(settings, transport=httpx.MockTransport(api.handler))
