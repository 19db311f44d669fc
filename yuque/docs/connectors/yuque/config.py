"""Shared Yuque connector configuration.

This module centralizes the base URL, auth header and environment variable
names used by the REST connector so the connector itself stays small.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

BASE_URL = "https://www.yuque.com/api/v2"

# Personal access token header expected by the API
AUTH_HEADER = "X-Auth-Token"

TOKEN_ENV = "YUQUE_API_TOKEN"
BASE_URL_ENV = "YUQUE_API_BASE_URL"
TIMEOUT_ENV = "YUQUE_API_TIMEOUT"

DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class YuqueConfig:
    """Connection settings for the Yuque API.

    Attributes:
        api_token: Personal access token (empty string for anonymous access)
        base_url: API root, e.g. a self-hosted deployment
        timeout: Total request timeout in seconds
    """

    api_token: str = ""
    base_url: str = BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> YuqueConfig:
        """Build config from environment variables, falling back to defaults.

        Examples:
            >>> YuqueConfig.from_env({"YUQUE_API_TOKEN": "abc"}).api_token
            'abc'
            >>> YuqueConfig.from_env({}).base_url
            'https://www.yuque.com/api/v2'
        """
        env = os.environ if environ is None else environ
        timeout = env.get(TIMEOUT_ENV)
        return cls(
            api_token=env.get(TOKEN_ENV, ""),
            base_url=(env.get(BASE_URL_ENV) or BASE_URL).rstrip("/"),
            timeout=float(timeout) if timeout else DEFAULT_TIMEOUT,
        )

    def headers(self) -> dict[str, str]:
        """Default request headers; the token header is only sent when set."""
        headers = {"Content-Type": "application/json"}
        if self.api_token:
            headers[AUTH_HEADER] = self.api_token
        return headers
