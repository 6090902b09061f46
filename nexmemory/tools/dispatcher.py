"""
Tool Dispatcher

Maps a tool name to its handler and turns every outcome, including
transport errors and malformed responses, into an MCP ToolResult.
"""

from typing import Callable

from nexmemory.configs import get_logger
from nexmemory.exceptions import ClientError
from nexmemory.models import ToolResult
from nexmemory.tools import entities, relationships
from nexmemory.tools.api import KnowledgeBaseAPI
from nexmemory.tools.outcomes import Failure, Outcome

logger = get_logger("tools.dispatcher")

ToolHandler = Callable[[KnowledgeBaseAPI, dict], Outcome]

TOOL_HANDLERS: dict[str, ToolHandler] = {
    **entities.HANDLERS,
    **relationships.HANDLERS,
}


class ToolDispatcher:
    """
    Executes tools against the knowledge base.

    call() never raises: failures come back as ToolResult(isError=True).
    """

    def __init__(self, api: KnowledgeBaseAPI, handlers: dict[str, ToolHandler] | None = None):
        self.api = api
        self._handlers = dict(TOOL_HANDLERS if handlers is None else handlers)

    def call(self, name: str, arguments: dict) -> ToolResult:
        """
        Execute a tool.

        Args:
            name: Tool name
            arguments: Tool arguments

        Returns:
            ToolResult with the success text or the failure message
        """
        handler = self._handlers.get(name) if isinstance(name, str) else None
        if handler is None:
            logger.error(f"Unknown tool: {name}")
            return ToolResult.text(f"Unknown tool: {name}", is_error=True)

        logger.info(f"Calling tool: {name}")
        try:
            outcome = handler(self.api, arguments)
        except ClientError as e:
            logger.error(f"Tool {name} failed: {e}")
            outcome = Failure(e.message)
        except Exception as e:
            logger.exception(f"Tool {name} raised unexpectedly")
            outcome = Failure(str(e))

        if isinstance(outcome, Failure):
            logger.debug(f"Tool {name} failed: {outcome.message}")
            return ToolResult.text(outcome.message, is_error=True)
        return ToolResult.text(outcome.text)
