"""
NexMemory Bridge Settings

Configuration is read from the environment once at startup and passed
explicitly to the components that need it:
- NEXMEMORY_API_KEY: Credential sent as bearer token and X-API-Key
- NEXMEMORY_API_URL: Base URL of the knowledge base (default: http://localhost:3000/api)
- DEBUG: Enable debug logging on stderr (default: false)
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional
from urllib.parse import urlsplit

from nexmemory.configs.constants import (
    DEFAULT_API_URL,
    DEFAULT_HTTP_PORT,
    DEFAULT_HTTPS_PORT,
    get_timeout,
)
from nexmemory.exceptions import ConfigurationError


def _is_truthy(value: str) -> bool:
    return value.lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class BridgeConfig:
    """Immutable bridge configuration."""

    api_key: str = ""
    api_url: str = DEFAULT_API_URL
    debug: bool = False
    request_timeout: float = get_timeout("http_request")

    def __post_init__(self) -> None:
        parts = urlsplit(self.api_url)
        if parts.scheme not in ("http", "https") or not parts.hostname:
            raise ConfigurationError(
                "NEXMEMORY_API_URL must be an http(s) URL with a host",
                {"api_url": self.api_url},
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "BridgeConfig":
        """
        Build configuration from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            BridgeConfig instance

        Raises:
            ConfigurationError: If the API URL cannot be used
        """
        if environ is None:
            environ = os.environ
        return cls(
            api_key=environ.get("NEXMEMORY_API_KEY", ""),
            api_url=environ.get("NEXMEMORY_API_URL") or DEFAULT_API_URL,
            debug=_is_truthy(environ.get("DEBUG", "")),
        )

    @property
    def scheme(self) -> str:
        return urlsplit(self.api_url).scheme

    @property
    def hostname(self) -> str:
        return urlsplit(self.api_url).hostname

    @property
    def port(self) -> int:
        """URL port, falling back to the knowledge base defaults."""
        port = urlsplit(self.api_url).port
        if port:
            return port
        return DEFAULT_HTTPS_PORT if self.scheme == "https" else DEFAULT_HTTP_PORT

    @property
    def base_path(self) -> str:
        """Path prefix for every API route, without trailing slash."""
        return urlsplit(self.api_url).path.rstrip("/")
