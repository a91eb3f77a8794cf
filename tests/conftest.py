"""
Shared test fixtures.

Every fixture builds fresh objects, so tests never share session or store
state.
"""

import pytest
from fastapi.testclient import TestClient

from application.services import SessionManager
from backend.main import create_app
from backend.settings import Settings
from infrastructure.memory import InMemoryWorkoutDataStore
from tests.fakes import FakeSessionMarkerStore


@pytest.fixture
def data_store() -> InMemoryWorkoutDataStore:
    """Create an empty data store."""
    return InMemoryWorkoutDataStore()


@pytest.fixture
def marker_store() -> FakeSessionMarkerStore:
    """Create a marker store with no stored session."""
    return FakeSessionMarkerStore()


@pytest.fixture
def session_manager(
    data_store: InMemoryWorkoutDataStore,
    marker_store: FakeSessionMarkerStore,
) -> SessionManager:
    """Create a restored, unauthenticated session manager."""
    manager = SessionManager(data_store=data_store, marker_store=marker_store)
    manager.restore()
    return manager


@pytest.fixture
def test_settings() -> Settings:
    """Settings for an isolated test app (no marker file on disk)."""
    return Settings(
        environment="test",
        session_marker_backend="memory",
        _env_file=None,
    )


@pytest.fixture
def app(test_settings: Settings):
    """Create a fresh app with its own store and session."""
    return create_app(settings=test_settings)


@pytest.fixture
def client(app) -> TestClient:
    """Create a test client for the app."""
    return TestClient(app)


@pytest.fixture
def logged_in_client(client: TestClient) -> TestClient:
    """Test client with 'alice' logged in."""
    response = client.post("/session/login", json={"username": "alice"})
    assert response.status_code == 200
    return client
