"""
MCP Method Router

Maps JSON-RPC methods (initialize, tools/list, tools/call, ping) to
responses. Any exception raised while handling a method becomes an
internal error response.
"""

from typing import Any, Callable

from nexmemory.configs import get_logger
from nexmemory.configs.constants import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    JSONRPC_VERSION,
    MCP_PROTOCOL_VERSION,
    METHOD_NOT_FOUND,
)
from nexmemory.models import JsonRpcRequest, JsonRpcResponse
from nexmemory.tools.catalog import TOOL_SCHEMAS
from nexmemory.tools.dispatcher import ToolDispatcher
from nexmemory.version import get_server_info

logger = get_logger("bridge.router")


class InvalidParams(Exception):
    """tools/call request is missing or has malformed params."""

    pass


class MethodRouter:
    """Routes request envelopes to method handlers."""

    def __init__(self, dispatcher: ToolDispatcher):
        self.dispatcher = dispatcher
        self._methods: dict[str, Callable[[JsonRpcRequest], Any]] = {
            "initialize": self.handle_initialize,
            "tools/list": self.handle_tools_list,
            "tools/call": self.handle_tools_call,
            "ping": self.handle_ping,
        }

    def handle(self, request: JsonRpcRequest) -> JsonRpcResponse:
        """
        Produce the response for a request envelope.

        Args:
            request: Decoded request (not a notification)

        Returns:
            Response envelope echoing the request id
        """
        if request.jsonrpc != JSONRPC_VERSION:
            return JsonRpcResponse.failure(request.id, INVALID_REQUEST, "Invalid JSON-RPC version")

        handler = self._methods.get(request.method) if isinstance(request.method, str) else None
        if handler is None:
            logger.warning(f"Unknown method: {request.method}")
            return JsonRpcResponse.failure(
                request.id, METHOD_NOT_FOUND, f"Unknown method: {request.method}"
            )

        try:
            return JsonRpcResponse.success(request.id, handler(request))
        except InvalidParams as e:
            return JsonRpcResponse.failure(request.id, INVALID_PARAMS, str(e))
        except Exception as e:
            logger.exception(f"Error handling {request.method}")
            return JsonRpcResponse.failure(request.id, INTERNAL_ERROR, str(e))

    def handle_initialize(self, request: JsonRpcRequest) -> dict:
        """Handle MCP initialize request."""
        return {
            "protocolVersion": MCP_PROTOCOL_VERSION,
            "capabilities": {
                "tools": {
                    "listChanged": True,
                },
                "resources": {
                    "subscribe": False,
                    "listChanged": False,
                },
            },
            "serverInfo": get_server_info(),
        }

    def handle_tools_list(self, request: JsonRpcRequest) -> dict:
        """Handle MCP tools/list request."""
        return {"tools": list(TOOL_SCHEMAS)}

    def handle_tools_call(self, request: JsonRpcRequest) -> dict:
        """Handle MCP tools/call request."""
        params = request.params if request.params is not None else {}
        if not isinstance(params, dict):
            raise InvalidParams("Tool params must be an object")
        name = params.get("name")
        if not name:
            raise InvalidParams("Tool name is required")
        if not isinstance(name, str):
            raise InvalidParams("Tool name must be a string")

        arguments = params.get("arguments")
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, dict):
            raise InvalidParams("Tool arguments must be an object")

        result = self.dispatcher.call(name, arguments)
        return result.model_dump()

    def handle_ping(self, request: JsonRpcRequest) -> dict:
        """Handle MCP ping request."""
        return {}
