from __future__ import annotations

from collections.abc import Callable
from typing import Iterator

import httpx
import pytest

from wmata.core.config import get_settings
from wmata.services.wmata_client import WMATAClient

TEST_API_KEY = "test-key"
TEST_BASE_URL = "https://api.wmata.test"


class RecordingTransport:
    """Serve canned bodies keyed by URL path and remember every request."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[str, Callable[[httpx.Request], httpx.Response]] = {}

    def add(
        self,
        path: str,
        body: str = "",
        *,
        status_code: int = 200,
        content_type: str = "application/json",
    ) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                status_code, text=body, headers={"Content-Type": content_type}
            )

        self._routes[path] = handler

    def add_handler(
        self, path: str, handler: Callable[[httpx.Request], httpx.Response]
    ) -> None:
        self._routes[path] = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self._routes.get(request.url.path)
        if handler is None:
            return httpx.Response(404, text=f"no route for {request.url.path}")
        return handler(request)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Settings are cached per process; reset around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def wmata_client(transport: RecordingTransport) -> Iterator[WMATAClient]:
    http_client = httpx.Client(transport=httpx.MockTransport(transport))
    client = WMATAClient(TEST_API_KEY, http_client, base_url=TEST_BASE_URL)
    yield client
    http_client.close()
