"""
Configuration management for Post Bridge MCP Server.
Reads the API base URL and bearer token from the environment.
"""

import os
from dataclasses import dataclass


__version__ = "0.1.0"

SERVER_NAME = "post-bridge-mcp"

DEFAULT_BASE_URL = "https://api.post-bridge.com"

BASE_URL_ENV = "POST_BRIDGE_API_BASE_URL"
TOKEN_ENV = "POST_BRIDGE_API_TOKEN"
LOG_LEVEL_ENV = "POST_BRIDGE_LOG_LEVEL"


class ConfigurationError(Exception):
    """Raised when required configuration is missing."""


@dataclass(frozen=True)
class Settings:
    base_url: str
    api_token: str
    log_level: str = "INFO"

    def __repr__(self) -> str:
        # Keep the token out of logs and tracebacks
        return f"Settings(base_url={self.base_url!r}, api_token='***', log_level={self.log_level!r})"


def load_config(environ: dict | None = None) -> Settings:
    """
    Build Settings from environment variables.

    Raises:
        ConfigurationError: If POST_BRIDGE_API_TOKEN is not set.
    """
    env = os.environ if environ is None else environ

    token = env.get(TOKEN_ENV)
    if not token:
        raise ConfigurationError(
            f"API token is required. Please set the {TOKEN_ENV} environment variable."
        )

    base_url = env.get(BASE_URL_ENV) or DEFAULT_BASE_URL
    log_level = (env.get(LOG_LEVEL_ENV) or "INFO").upper()

    return Settings(base_url=base_url.rstrip("/"), api_token=token, log_level=log_level)
