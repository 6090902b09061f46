"""
Version Information

Server identity advertised during the MCP initialize handshake.
"""

__version__ = "1.0.0"

SERVER_NAME = "nexmemory-mcp"


def get_server_info() -> dict:
    """
    Get server identity for the initialize response.

    Returns:
        Dict with name and version
    """
    return {
        "name": SERVER_NAME,
        "version": __version__,
    }
