"""
Pytest fixtures for NexMemory bridge tests.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add project root to path for package imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from nexmemory.configs import BridgeConfig, setup_logging  # noqa: E402
from nexmemory.utils.http_client import HttpClient, HttpResponse  # noqa: E402


@pytest.fixture(autouse=True)
def quiet_logging():
    """Reset bridge logging after each test."""
    yield
    setup_logging(debug=False)


@pytest.fixture
def config() -> BridgeConfig:
    """Configuration pointing at a fake knowledge base."""
    return BridgeConfig(api_key="test-key", api_url="http://kb.test:3000/api")


@pytest.fixture
def http_client() -> MagicMock:
    """HTTP client double; set send.return_value or send.side_effect per test."""
    client = MagicMock(spec=HttpClient)
    client.send.return_value = HttpResponse(status=200, body="{}")
    return client


@pytest.fixture
def api(config, http_client):
    from nexmemory.tools.api import KnowledgeBaseAPI

    return KnowledgeBaseAPI(config, http_client)


@pytest.fixture
def dispatcher(api):
    from nexmemory.tools.dispatcher import ToolDispatcher

    return ToolDispatcher(api)


@pytest.fixture
def router(dispatcher):
    from nexmemory.bridge.router import MethodRouter

    return MethodRouter(dispatcher)


def respond(client: MagicMock, status: int, body: str = "") -> None:
    """Make the client double answer every call with the given status/body."""
    client.send.return_value = HttpResponse(status=status, body=body)


def sent_request(client: MagicMock):
    """The HttpRequest passed to the most recent send() call."""
    return client.send.call_args.args[0]
