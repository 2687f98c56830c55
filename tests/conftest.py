"""Shared test fixtures for wordpress_sdk.

Provides a colourless diagnostics manager, config-environment isolation, and a
small recording server built on :class:`httpx.MockTransport` so that tests
can drive the SDK end to end without network access.
"""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from wordpress_sdk.output import OutputManager, reset_output, set_output
from wordpress_sdk.wordpress import WordPress

SITE = "https://site.example"


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _plain_output() -> None:
    """Install a colourless, non-verbose OutputManager for every test."""
    set_output(OutputManager(no_color=True))
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Config isolation
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Clear every WORDPRESS_SDK_* variable so real settings never leak in."""
    for var in [
        "WORDPRESS_SDK_SERVER",
        "WORDPRESS_SDK_TOKEN",
        "WORDPRESS_SDK_USERNAME",
        "WORDPRESS_SDK_APP_PASSWORD",
        "WORDPRESS_SDK_TIMEOUT",
    ]:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


# ---------------------------------------------------------------------------
# Recording mock server
# ---------------------------------------------------------------------------


class RecordingServer:
    """Answers requests from a queue of responses and records what it saw.

    Each queued item is either an :class:`httpx.Response` or a callable
    taking the request and returning one. The last item is repeated once
    the queue runs dry.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response | Callable[[httpx.Request], httpx.Response]] = []

    def queue(self, *responses: httpx.Response | Callable[[httpx.Request], httpx.Response]) -> None:
        self._responses.extend(responses)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        item = self._responses.pop(0) if len(self._responses) > 1 else self._responses[0]
        if callable(item) and not isinstance(item, httpx.Response):
            return item(request)
        return httpx.Response(
            item.status_code,
            headers=item.headers,
            content=item.content,
        )

    @property
    def urls(self) -> list[str]:
        return [str(r.url) for r in self.requests]

    def json_body(self, index: int = -1) -> Any:
        return json.loads(self.requests[index].content)


@pytest.fixture
def server() -> RecordingServer:
    return RecordingServer()


@pytest.fixture
def wp(server: RecordingServer) -> WordPress:
    """A WordPress SDK instance for ``https://site.example`` backed by *server*."""
    instance = WordPress(SITE, transport=httpx.MockTransport(server))
    yield instance
    instance.close()
