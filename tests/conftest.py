"""Shared test fixtures for cuentica.

Provides a fake clock for TTL tests, a factory for clients backed by
:class:`httpx.MockTransport`, and keeps the global output manager silent
and isolated between tests.
"""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from cuentica.client import CuenticaClient
from cuentica.output import OutputManager, reset_output, set_output

API_URL = "https://api.cuentica.test"
API_TOKEN = "test-token"


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _clean_output():
    """Install a silent, colourless output manager for every test."""
    set_output(OutputManager(no_color=True))
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------


class FakeClock:
    """Manually advanced clock returning seconds, like :func:`time.monotonic`."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance_ms(self, ms: float) -> None:
        self.now += ms / 1000


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


# ---------------------------------------------------------------------------
# Client factory
# ---------------------------------------------------------------------------


@pytest.fixture
def make_client() -> Callable[..., CuenticaClient]:
    """Return a factory building a client whose transport is *handler*.

    Extra keyword arguments are :class:`~cuentica.models.ClientConfig`
    fields or constructor options (``cache=``, ``output=``).
    """

    def _factory(handler: Callable[[httpx.Request], Any], **options: Any) -> CuenticaClient:
        options.setdefault("api_token", API_TOKEN)
        options.setdefault("api_url", API_URL)
        return CuenticaClient(transport=httpx.MockTransport(handler), **options)

    return _factory


class RecordingHandler:
    """MockTransport handler returning canned responses and recording requests.

    Responses are returned in order; the last one repeats once exhausted.
    """

    def __init__(self, *responses: httpx.Response) -> None:
        self.responses = list(responses) or [httpx.Response(200, json={})]
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        canned = self.responses[min(len(self.requests), len(self.responses)) - 1]
        return httpx.Response(
            canned.status_code, headers=canned.headers, content=canned.content,
        )

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def record() -> Callable[..., RecordingHandler]:
    """Return a factory for :class:`RecordingHandler` instances."""
    return RecordingHandler
