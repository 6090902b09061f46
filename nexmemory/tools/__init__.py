"""
NexMemory Tools

Knowledge base operations exposed to MCP clients.
"""

from nexmemory.tools.api import KnowledgeBaseAPI
from nexmemory.tools.catalog import TOOL_SCHEMAS, get_tool_names
from nexmemory.tools.dispatcher import TOOL_HANDLERS, ToolDispatcher
from nexmemory.tools.outcomes import Failure, Outcome, Success

__all__ = [
    "KnowledgeBaseAPI",
    "TOOL_SCHEMAS",
    "get_tool_names",
    "TOOL_HANDLERS",
    "ToolDispatcher",
    "Failure",
    "Outcome",
    "Success",
]
