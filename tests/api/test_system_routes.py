"""API tests for non-versioned system routes.

Validates behavior of root, health, and config endpoints exposed by the
system router.
"""

from unittest.mock import AsyncMock, MagicMock, patch

from fastapi.testclient import TestClient

from src.core.config import settings
from src.main import app


client = TestClient(app)


def _database(connected: bool) -> MagicMock:
    database = MagicMock()
    database.check_connection = AsyncMock(return_value=connected)
    return database


def test_root_endpoint_returns_status_and_version() -> None:
    """Root endpoint should return operational status and app version."""
    response = client.get("/")

    assert response.status_code == 200
    data = response.json()

    assert data["message"] == "OurGame API"
    assert data["status"] == "operational"
    assert data["version"] == settings.app_version


def test_health_endpoint_reports_connected_database() -> None:
    with patch(
        "src.presentation.routers.system.get_database",
        return_value=_database(True),
    ):
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database": "connected"}


def test_health_endpoint_returns_503_when_database_unreachable() -> None:
    with patch(
        "src.presentation.routers.system.get_database",
        return_value=_database(False),
    ):
        response = client.get("/health")

    assert response.status_code == 503
    assert response.json() == {"status": "unhealthy", "database": "unreachable"}


def test_config_endpoint_behavior_depends_on_environment() -> None:
    """Config endpoint should be dev-only and return 403 otherwise."""
    response = client.get("/config")

    if settings.is_development:
        assert response.status_code == 200
        data = response.json()

        assert data["environment"] == settings.environment.value
        assert data["api"]["name"] == settings.app_name
        assert data["database"]["url"] == "<redacted>"
    else:
        assert response.status_code == 403
        assert (
            response.json()["detail"] == "Config endpoint only available in development"
        )


def test_responses_carry_trace_id_header() -> None:
    response = client.get("/", headers={"X-Trace-Id": "trace-123"})

    assert response.headers["X-Trace-Id"] == "trace-123"
