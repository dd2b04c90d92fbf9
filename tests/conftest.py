"""Pytest fixtures for the dashboard and mock service tests."""

from datetime import datetime, timezone
from typing import Callable, List

import httpx
import pytest

from src.dashboard.catalog import DEFAULT_CATALOG
from src.dashboard.runner import RequestRunner
from src.dashboard.state import ResultStore
from src.integrations.clients.mocks.telecom import MockValueProvider
from src.integrations.clients.real_http.api_caller import ApiCaller

FIXED_NOW = datetime(2025, 8, 10, 9, 30, 15, 123000, tzinfo=timezone.utc)

PROXY = "https://proxy.test/"


@pytest.fixture
def values():
    """Seeded provider with a frozen clock."""
    return MockValueProvider(seed=1234, clock=lambda: FIXED_NOW)


@pytest.fixture
def store():
    """Empty in-memory ResultStore."""
    return ResultStore()


@pytest.fixture
def calls() -> List[httpx.Request]:
    """Every request seen by the fake transport, in order."""
    return []


def placeholder_handler(calls: List[httpx.Request]) -> Callable[[httpx.Request], httpx.Response]:
    """Fake jsonplaceholder: /404 answers 404, everything else 200/201 with a JSON echo."""

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if request.url.path == "/404":
            return httpx.Response(404, json={})
        if request.method == "POST":
            return httpx.Response(201, json={"id": 101, "echo": request.content.decode() or None})
        return httpx.Response(200, json={"id": 1, "path": request.url.path})

    return handler


@pytest.fixture
def make_runner(store, calls):
    """Factory: RequestRunner over a fake transport (defaults to the placeholder handler)."""

    def _make(handler=None, cors_proxy_url: str = PROXY, catalog=DEFAULT_CATALOG) -> RequestRunner:
        transport = httpx.MockTransport(handler or placeholder_handler(calls))
        return RequestRunner(
            store=store,
            caller=ApiCaller(transport=transport),
            catalog=catalog,
            cors_proxy_url=cors_proxy_url,
        )

    return _make
