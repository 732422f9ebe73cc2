"""
pytest configuration and fixtures.
"""

import io
import json
import logging
from typing import Callable

import httpx
import pytest
from rich.console import Console

from naivehttp.config import set_config


@pytest.fixture(autouse=True)
def reset_state():
    """Restore default config and drop log handlers bound to captured streams."""
    yield
    set_config(None)
    logger = logging.getLogger("naivehttp")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


@pytest.fixture
def console_output() -> tuple[Console, io.StringIO]:
    """Non-terminal console writing into a buffer."""
    buffer = io.StringIO()
    console = Console(file=buffer, force_terminal=False, color_system=None, width=80)
    return console, buffer


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    """Requests seen by the echo transport."""
    return []


@pytest.fixture
def echo_transport(recorded_requests) -> httpx.MockTransport:
    """Transport that answers every request with a JSON echo of it."""

    def handler(request: httpx.Request) -> httpx.Response:
        recorded_requests.append(request)
        body = request.read()
        return httpx.Response(
            200,
            json={
                "method": request.method,
                "url": str(request.url),
                "json": json.loads(body) if body else None,
            },
        )

    return httpx.MockTransport(handler)


@pytest.fixture
def make_transport() -> Callable[..., httpx.MockTransport]:
    """Build a transport returning a fixed response."""

    def factory(status_code: int = 200, headers=None, content: bytes = b"") -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, headers=headers, content=content)

        return httpx.MockTransport(handler)

    return factory


@pytest.fixture
def failing_transport() -> httpx.MockTransport:
    """Transport that refuses every connection."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    return httpx.MockTransport(handler)
