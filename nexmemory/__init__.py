"""
NexMemory MCP Bridge

Bridges stdio-based MCP JSON-RPC requests to the NexMemory knowledge base
REST API.
"""

from nexmemory.version import __version__

__all__ = ["__version__"]
