"""
NexMemory Exception Hierarchy

Centralized exception classes for the bridge. All bridge-specific exceptions
inherit from NexMemoryError.

Usage:
    from nexmemory.exceptions import ClientError, HTTPTimeoutError

    try:
        response = client.send(request)
    except ClientError as e:
        logger.error(f"Remote call failed: {e}")
"""


class NexMemoryError(Exception):
    """Base exception for all NexMemory bridge errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(NexMemoryError):
    """Error in bridge configuration."""

    pass


# =============================================================================
# Protocol Errors
# =============================================================================


class ProtocolError(NexMemoryError):
    """Base class for JSON-RPC envelope errors."""

    pass


class EnvelopeDecodeError(ProtocolError):
    """Input line could not be decoded into a request envelope."""

    pass


# =============================================================================
# HTTP/Client Errors
# =============================================================================


class ClientError(NexMemoryError):
    """Base class for errors talking to the knowledge base."""

    pass


class HTTPConnectionError(ClientError):
    """Failed to connect to the knowledge base."""

    pass


class HTTPTimeoutError(ClientError):
    """Request to the knowledge base timed out."""

    pass


class ResponseFormatError(ClientError):
    """Knowledge base returned a body that is not valid JSON."""

    pass
