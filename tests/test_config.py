"""
Tests for environment configuration.
"""
import pytest

from config import DEFAULT_BASE_URL, ConfigurationError, load_config


class TestLoadConfig:

    def test_missing_token_is_fatal(self):
        with pytest.raises(ConfigurationError, match="POST_BRIDGE_API_TOKEN"):
            load_config({})

    def test_empty_token_is_fatal(self):
        with pytest.raises(ConfigurationError):
            load_config({"POST_BRIDGE_API_TOKEN": ""})

    def test_defaults(self):
        settings = load_config({"POST_BRIDGE_API_TOKEN": "tok"})
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.api_token == "tok"
        assert settings.log_level == "INFO"

    def test_overrides(self):
        settings = load_config({
            "POST_BRIDGE_API_TOKEN": "tok",
            "POST_BRIDGE_API_BASE_URL": "http://localhost:3000/",
            "POST_BRIDGE_LOG_LEVEL": "debug",
        })
        assert settings.base_url == "http://localhost:3000"
        assert settings.log_level == "DEBUG"

    def test_repr_hides_token(self):
        settings = load_config({"POST_BRIDGE_API_TOKEN": "super-secret"})
        assert "super-secret" not in repr(settings)
