"""
MCP Stdio-to-HTTP Bridge

Reads MCP JSON-RPC messages from stdin, executes tool calls against the
NexMemory knowledge base, and writes responses to stdout.

Lines are read on the main thread and handled on a worker pool, so a slow
HTTP call does not block reading the next request. Responses may therefore
be written in a different order than requests arrived; the id correlates
them.
"""

import os
import signal
import sys
from concurrent.futures import ThreadPoolExecutor
from typing import IO, Optional

from nexmemory.bridge.router import MethodRouter
from nexmemory.bridge.transport import LineWriter, decode_line, iter_lines, parse_error_response
from nexmemory.configs import BridgeConfig, get_logger, setup_logging
from nexmemory.configs.constants import DEFAULT_MAX_WORKERS
from nexmemory.exceptions import ConfigurationError, EnvelopeDecodeError
from nexmemory.models import JsonRpcRequest
from nexmemory.tools.api import KnowledgeBaseAPI
from nexmemory.tools.dispatcher import ToolDispatcher
from nexmemory.utils.http_client import HttpClient

logger = get_logger("bridge")


class BridgeServer:
    """
    Line-oriented JSON-RPC server.

    Usage:
        server = BridgeServer(router)
        server.serve(sys.stdin, sys.stdout)
    """

    def __init__(self, router: MethodRouter, max_workers: int = DEFAULT_MAX_WORKERS):
        self.router = router
        self.max_workers = max_workers

    def serve(self, input_stream: IO[str], output_stream: IO[str]) -> None:
        """
        Process input until end of stream.

        Returns once every request read so far has been answered.
        """
        writer = LineWriter(output_stream)
        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="nexmemory") as pool:
            for line in iter_lines(input_stream):
                try:
                    request = decode_line(line)
                except EnvelopeDecodeError as e:
                    logger.error(f"Invalid JSON: {e}")
                    writer.write(parse_error_response(e))
                    continue

                logger.debug(f"Received: {request.method} (id={request.id})")

                # Notifications never get a response
                if request.is_notification:
                    logger.debug(f"Skipping notification: {request.method}")
                    continue

                pool.submit(self._respond, request, writer)

    def _respond(self, request: JsonRpcRequest, writer: LineWriter) -> None:
        response = self.router.handle(request)
        line = writer.write(response)
        logger.debug(f"Sent: {line[:200]}")


def build_server(config: BridgeConfig, client: Optional[HttpClient] = None) -> BridgeServer:
    """Wire the HTTP client, dispatcher and router for a configuration."""
    api = KnowledgeBaseAPI(config, client or HttpClient())
    return BridgeServer(MethodRouter(ToolDispatcher(api)))


def _install_signal_handlers() -> None:
    def _shutdown(signum, frame):
        logger.info(f"Received {signal.Signals(signum).name}, shutting down")
        # In-flight requests are abandoned
        os._exit(0)

    signal.signal(signal.SIGINT, _shutdown)
    signal.signal(signal.SIGTERM, _shutdown)


def main():
    """Main bridge loop."""
    try:
        config = BridgeConfig.from_env()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(debug=config.debug)
    logger.info(f"MCP Bridge starting, API URL: {config.api_url}")
    if not config.api_key:
        logger.warning("NEXMEMORY_API_KEY is not set; requests will be unauthenticated")

    _install_signal_handlers()
    build_server(config).serve(sys.stdin, sys.stdout)
    logger.info("Input closed, bridge exiting")
