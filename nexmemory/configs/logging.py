"""
NexMemory Logging Configuration

Diagnostics go to stderr only, and only when debug is enabled. Stdout is
reserved for JSON-RPC envelopes.
"""

import logging
import sys
from typing import Optional


def setup_logging(debug: Optional[bool] = None) -> logging.Logger:
    """
    Configure logging for the bridge.

    Args:
        debug: Enable debug output on stderr. When False, all bridge
               logging is discarded.

    Returns:
        Root logger for nexmemory
    """
    # Get root nexmemory logger
    logger = logging.getLogger("nexmemory")

    # Clear existing handlers
    logger.handlers.clear()
    logger.propagate = False

    if not debug:
        logger.setLevel(logging.CRITICAL + 1)
        logger.addHandler(logging.NullHandler())
        return logger

    # Create formatter with component tags
    formatter = logging.Formatter(
        "%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logger.setLevel(logging.DEBUG)
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    stderr_handler.setLevel(logging.DEBUG)
    logger.addHandler(stderr_handler)

    return logger


def get_logger(component: str) -> logging.Logger:
    """
    Get a logger for a specific component.

    Args:
        component: Component name (e.g., "bridge", "tools", "http")

    Returns:
        Logger instance for the component
    """
    return logging.getLogger(f"nexmemory.{component}")
