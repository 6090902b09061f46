"""
NexMemory Configuration Module

Re-exports commonly used functions for cleaner imports across the codebase.
"""

# Logging (most commonly used)
from nexmemory.configs.logging import get_logger, setup_logging

# Constants
from nexmemory.configs.constants import TIMEOUTS, get_timeout

# Settings
from nexmemory.configs.settings import BridgeConfig

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Constants
    "TIMEOUTS",
    "get_timeout",
    # Settings
    "BridgeConfig",
]
