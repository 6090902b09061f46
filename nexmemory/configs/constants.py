"""
NexMemory Constants

Static values for the bridge: protocol literals, JSON-RPC error codes,
remote defaults and timeouts.
"""

# --- Protocol ---

JSONRPC_VERSION = "2.0"
MCP_PROTOCOL_VERSION = "2024-11-05"

# --- JSON-RPC Error Codes ---

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

# --- Remote Service ---

DEFAULT_API_URL = "http://localhost:3000/api"
DEFAULT_HTTP_PORT = 3000  # Port the knowledge base listens on when the URL omits one
DEFAULT_HTTPS_PORT = 443

# --- Timeout Configuration ---
# Centralized timeout values (in seconds)

TIMEOUTS = {
    "http_request": 30,  # Every call to the knowledge base
}

# --- Worker Pool ---

DEFAULT_MAX_WORKERS = 8


def get_timeout(name: str, default: float = 30) -> float:
    """
    Get a timeout value by name.

    Args:
        name: Timeout name (e.g., "http_request")
        default: Value used when the name is unknown

    Returns:
        Timeout in seconds
    """
    return TIMEOUTS.get(name, default)
