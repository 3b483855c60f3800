"""Tests for main API endpoints."""

import pytest
from fastapi.testclient import TestClient

from lifelessons import main
from lifelessons.exceptions import StorageUnavailableError


def test_root_endpoint(client: TestClient) -> None:
    """Test root endpoint returns welcome message."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to Life Lessons API"}


def test_health_endpoint(client: TestClient) -> None:
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_health_endpoint_reports_unreachable_store(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    def failing_ping() -> None:
        raise StorageUnavailableError("Database ping failed")

    monkeypatch.setattr(main, "ping_database", failing_ping)

    response = client.get("/health")
    assert response.status_code == 503
    assert response.json() == {"status": "unavailable"}
