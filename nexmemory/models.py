"""
Envelope Models

Pydantic models for JSON-RPC request/response envelopes and MCP tool results.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict

from nexmemory.configs.constants import JSONRPC_VERSION

RequestId = Union[str, int, float, None]


# --- Request/Response Models ---


class JsonRpcRequest(BaseModel):
    """Incoming JSON-RPC request envelope."""

    model_config = ConfigDict(extra="ignore")

    jsonrpc: Any = None
    # Types of method and params are checked by the router, after the
    # notification filter and the version check
    method: Any = None
    params: Any = None
    id: RequestId = None

    @property
    def is_notification(self) -> bool:
        """A request without an id key must never be answered."""
        return "id" not in self.model_fields_set


class JsonRpcError(BaseModel):
    """Error payload of a response envelope."""

    code: int
    message: str


class JsonRpcResponse(BaseModel):
    """Outgoing JSON-RPC response envelope."""

    jsonrpc: str = JSONRPC_VERSION
    id: RequestId = None
    result: Any = None
    error: Optional[JsonRpcError] = None

    @classmethod
    def success(cls, request_id: RequestId, result: Any) -> "JsonRpcResponse":
        return cls(id=request_id, result=result)

    @classmethod
    def failure(cls, request_id: RequestId, code: int, message: str) -> "JsonRpcResponse":
        return cls(id=request_id, error=JsonRpcError(code=code, message=message))

    def to_wire(self) -> dict[str, Any]:
        """Wire form: id always present, exactly one of result or error."""
        envelope: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            envelope["error"] = self.error.model_dump()
        else:
            envelope["result"] = self.result if self.result is not None else {}
        return envelope


class ContentBlock(BaseModel):
    """Single content block of a tool result."""

    type: str = "text"
    text: str


class ToolResult(BaseModel):
    """MCP tool invocation result."""

    content: list[ContentBlock]
    isError: bool = False

    @classmethod
    def text(cls, text: str, is_error: bool = False) -> "ToolResult":
        return cls(content=[ContentBlock(text=text)], isError=is_error)
