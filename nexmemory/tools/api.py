"""
Knowledge Base API

Builds one HttpRequest per operation against the NexMemory REST API,
attaching the credential headers and the configured timeout.
"""

import json
from typing import Any, Optional
from urllib.parse import quote, urlencode

from nexmemory.configs import BridgeConfig
from nexmemory.utils.http_client import HttpClient, HttpRequest, HttpResponse


def path_segment(value: str) -> str:
    """Percent-encode a value for use as a single path segment."""
    return quote(value, safe="")


class KnowledgeBaseAPI:
    """
    Request builder bound to a configuration and an HTTP client.

    Usage:
        api = KnowledgeBaseAPI(config, HttpClient())
        response = api.request("GET", "/entities/abc")
    """

    def __init__(self, config: BridgeConfig, client: Optional[HttpClient] = None):
        self.config = config
        self.client = client or HttpClient()

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.api_key}",
            "X-API-Key": self.config.api_key,
        }

    def build(
        self,
        method: str,
        path: str,
        query: Optional[dict[str, Any]] = None,
        body: Any = None,
    ) -> HttpRequest:
        """
        Build the call description for an API route.

        Args:
            method: HTTP verb
            path: Route below the configured base path (e.g. "/entities")
            query: Optional query parameters, encoded in insertion order
            body: Optional JSON-serializable body

        Returns:
            HttpRequest ready to send
        """
        full_path = f"{self.config.base_path}{path}"
        if query:
            full_path = f"{full_path}?{urlencode(query)}"
        return HttpRequest(
            scheme=self.config.scheme,
            host=self.config.hostname,
            port=self.config.port,
            path=full_path,
            method=method,
            headers=self.headers,
            body=json.dumps(body) if body is not None else None,
            timeout=self.config.request_timeout,
        )

    def request(
        self,
        method: str,
        path: str,
        query: Optional[dict[str, Any]] = None,
        body: Any = None,
    ) -> HttpResponse:
        """Build and send one request. Transport errors propagate."""
        return self.client.send(self.build(method, path, query=query, body=body))
