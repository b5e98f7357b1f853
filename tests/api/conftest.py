"""Shared fixtures for API tests.

API tests drive the real app through TestClient and replace the
request-scoped dispatcher, so no database is touched.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from src.application.dispatcher import Dispatcher
from src.core.container import get_dispatcher
from src.core.result import Result
from src.main import app


class StubDispatcher:
    """Dispatcher double that records requests and returns a preset result."""

    def __init__(self, result: Result):
        self.result = result
        self.requests: list[object] = []

    async def dispatch(self, request: object) -> Result:
        self.requests.append(request)
        return self.result


@pytest.fixture(autouse=True)
def override_dependencies():
    """Clear dependency overrides after each test."""
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    """Create TestClient for API tests using real app."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def stub_dispatch():
    """Install a StubDispatcher returning ``result`` for the next requests."""

    def install(result: Result) -> StubDispatcher:
        stub = StubDispatcher(result)
        app.dependency_overrides[get_dispatcher] = lambda: stub
        return stub

    return install


@pytest.fixture
def validating_dispatcher():
    """Real Dispatcher over a mock session; rule failures never reach a handler."""
    app.dependency_overrides[get_dispatcher] = lambda: Dispatcher(
        AsyncMock(), logger=MagicMock()
    )
