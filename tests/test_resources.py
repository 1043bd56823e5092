"""
Tests for the server info resource.
"""
import pytest

import resources


def test_info_lists_base_url_and_tools(settings):
    text = resources.read_resource("postbridge://info", settings)
    assert "https://api.test" in text
    assert "posts_create" in text
    assert "media_upload" in text


def test_unknown_resource(settings):
    with pytest.raises(ValueError, match="Unknown resource"):
        resources.read_resource("postbridge://nope", settings)
