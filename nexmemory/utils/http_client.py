"""
HTTP Client Adapter

Issues exactly one HTTP request per call against the knowledge base.
Uses `requests` with standardized error handling. No retries, no session
reuse, and the body is never parsed here.

Usage:
    from nexmemory.utils.http_client import HttpClient, HttpRequest

    client = HttpClient()
    response = client.send(HttpRequest(
        scheme="http",
        host="localhost",
        port=3000,
        path="/api/entities/abc",
        method="GET",
        headers={"X-API-Key": "secret"},
    ))
"""

from dataclasses import dataclass, field
from typing import Optional

import requests

from nexmemory.configs import get_logger, get_timeout
from nexmemory.exceptions import HTTPConnectionError, HTTPTimeoutError

logger = get_logger("http")


@dataclass
class HttpRequest:
    """Description of a single HTTP call."""

    host: str
    port: int
    path: str  # Includes query string
    method: str = "GET"
    headers: dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None
    timeout: float = get_timeout("http_request")
    scheme: str = "http"

    @property
    def url(self) -> str:
        return f"{self.scheme}://{self.host}:{self.port}{self.path}"


@dataclass
class HttpResponse:
    """Status, raw body text and headers of a completed call."""

    status: int
    body: str
    headers: dict[str, str] = field(default_factory=dict)


class HttpClient:
    """Thin adapter over `requests` that returns HttpResponse objects."""

    def send(self, request: HttpRequest) -> HttpResponse:
        """
        Issue the request and wait for the full body.

        Args:
            request: Call description

        Returns:
            HttpResponse for any status code

        Raises:
            HTTPTimeoutError: Request exceeded its timeout
            HTTPConnectionError: Socket-level or other transport failure
        """
        url = request.url
        logger.debug(f"{request.method} {url}")
        try:
            response = requests.request(
                request.method,
                url,
                headers=request.headers,
                data=request.body.encode("utf-8") if request.body is not None else None,
                timeout=request.timeout,
            )
        except requests.exceptions.Timeout as e:
            raise HTTPTimeoutError(f"Request timed out after {request.timeout:g}s: {url}") from e
        except requests.exceptions.ConnectionError as e:
            raise HTTPConnectionError(f"Connection failed: {url}: {e}") from e
        except requests.exceptions.RequestException as e:
            raise HTTPConnectionError(f"Request failed: {url}: {e}") from e

        logger.debug(f"{request.method} {url} -> {response.status_code}")
        return HttpResponse(
            status=response.status_code,
            body=response.text,
            headers=dict(response.headers),
        )
