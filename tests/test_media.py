"""
Tests for media tools and the local upload helper.
"""
import json

import pytest
from pydantic import ValidationError

import tools
from tests.conftest import BASE_URL, UPLOAD_URL
from tools.media import mime_type_for, upload_file

CREATE_URL = f"{BASE_URL}/v1/media/create-upload-url"
SIGNED_URL = UPLOAD_URL.split("?")[0]


@pytest.fixture
def png_file(tmp_path):
    path = tmp_path / "cover.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\n" + b"\x00" * 24)
    return path


class TestMimeTypes:

    @pytest.mark.parametrize("name, expected", [
        ("a.png", "image/png"),
        ("a.JPG", "image/jpeg"),
        ("a.jpeg", "image/jpeg"),
        ("clip.mp4", "video/mp4"),
        ("clip.MOV", "video/quicktime"),
    ])
    def test_known_extensions(self, name, expected):
        assert mime_type_for(name) == expected

    def test_unknown_extension(self):
        with pytest.raises(ValueError, match="Unsupported file type: .gif"):
            mime_type_for("anim.gif")


class TestUploadFile:

    @pytest.mark.asyncio
    async def test_png_upload_success(self, client, api, png_file):
        api.add("POST", CREATE_URL, json={"media_id": "med_1", "upload_url": UPLOAD_URL, "name": "cover.png"})
        api.add("PUT", SIGNED_URL, status_code=200)

        result = await upload_file(client, str(png_file))

        assert result == {
            "mediaId": "med_1",
            "fileName": "cover.png",
            "mimeType": "image/png",
            "sizeBytes": 32,
            "success": True,
        }
        create, put = api.requests
        assert json.loads(create.content) == {"name": "cover.png", "mime_type": "image/png", "size_bytes": 32}
        assert put.method == "PUT"
        assert str(put.url) == UPLOAD_URL
        assert put.headers["Content-Type"] == "image/png"
        assert put.content == png_file.read_bytes()
        assert "Authorization" not in put.headers

    @pytest.mark.asyncio
    async def test_unsupported_extension_makes_no_request(self, client, api, tmp_path):
        path = tmp_path / "photo.webp"
        path.write_bytes(b"RIFF")

        result = await upload_file(client, str(path))

        assert result["success"] is False
        assert result["error"].startswith("Unsupported file type")
        assert api.requests == []

    @pytest.mark.asyncio
    async def test_put_failure_is_returned_not_raised(self, client, api, png_file):
        api.add("POST", CREATE_URL, json={"media_id": "med_1", "upload_url": UPLOAD_URL})
        api.add("PUT", SIGNED_URL, status_code=500, text="storage exploded")

        result = await upload_file(client, str(png_file))

        assert result["success"] is False
        assert "500" in result["error"]
        assert "storage exploded" in result["error"]

    @pytest.mark.asyncio
    async def test_missing_file(self, client, api, tmp_path):
        result = await upload_file(client, str(tmp_path / "nope.png"))

        assert result["success"] is False
        assert result["error"]
        assert api.requests == []

    @pytest.mark.asyncio
    async def test_create_url_api_error_is_returned(self, client, api, png_file):
        api.add("POST", CREATE_URL, status_code=401, json={"message": "Unauthorized"})

        result = await upload_file(client, str(png_file))

        assert result["success"] is False
        assert "401" in result["error"]
        assert len(api.requests) == 1


class TestMediaTools:

    @pytest.mark.asyncio
    async def test_upload_tool_returns_json_text(self, client, api, png_file):
        api.add("POST", CREATE_URL, json={"media_id": "med_9", "upload_url": UPLOAD_URL})
        api.add("PUT", SIGNED_URL, status_code=200)

        result = await tools.call_tool(client, "media_upload", {"filePath": str(png_file)})

        payload = json.loads(result[0].text)
        assert payload["success"] is True
        assert payload["mediaId"] == "med_9"

    @pytest.mark.asyncio
    async def test_create_upload_url_tool(self, client, api):
        api.add("POST", CREATE_URL, json={"media_id": "med_2", "upload_url": UPLOAD_URL, "name": "a.mp4"})

        result = await tools.call_tool(client, "media_createUploadUrl", {
            "name": "a.mp4", "mimeType": "video/mp4", "sizeBytes": 1024,
        })

        assert json.loads(result[0].text)["media_id"] == "med_2"
        assert json.loads(api.last.content) == {"name": "a.mp4", "mime_type": "video/mp4", "size_bytes": 1024}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("arguments", [
        {"name": "a.gif", "mimeType": "image/gif", "sizeBytes": 10},
        {"name": "a.png", "mimeType": "image/png", "sizeBytes": 0},
        {"name": "", "mimeType": "image/png", "sizeBytes": 10},
    ])
    async def test_create_upload_url_validation(self, client, api, arguments):
        with pytest.raises(ValidationError):
            await tools.call_tool(client, "media_createUploadUrl", arguments)
        assert api.requests == []

    @pytest.mark.asyncio
    async def test_media_get(self, client, api):
        api.add("GET", f"{BASE_URL}/v1/media/med_1", json={"id": "med_1", "type": "image", "post_ids": []})

        result = await tools.call_tool(client, "media_get", {"id": "med_1"})

        assert json.loads(result[0].text)["type"] == "image"
