"""
MCP Stdio-to-HTTP Bridge

Reads MCP JSON-RPC messages from stdin, translates tool calls into NexMemory
REST API requests, and writes responses to stdout.
"""

from nexmemory.bridge.server import BridgeServer, build_server, main

__all__ = ["BridgeServer", "build_server", "main"]
