"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with an application context
backed by mongomock-motor, the auth service, and a TestClient wired to
the same in-memory database.
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))

TEST_SECRET = "test-secret-key"
TEST_DB_NAME = "fitlab_test"


# =============================================================================
# Context / Service Fixtures
# =============================================================================

@pytest.fixture
def test_settings():
    """Settings independent of the developer's environment."""
    from fitlab_auth.config import Settings

    return Settings(
        jwt_secret=TEST_SECRET,
        mongodb_db_name=TEST_DB_NAME,
        environment="test",
        _env_file=None,
    )


@pytest.fixture
def app_context(mock_async_mongo_client):
    """Application context using the in-memory MongoDB."""
    from fitlab_auth.core.context import AppContext

    return AppContext(
        client=mock_async_mongo_client,
        db=mock_async_mongo_client[TEST_DB_NAME],
        jwt_secret=TEST_SECRET,
    )


@pytest.fixture
def auth_service(app_context, mock_auth_db):
    """AuthService over the indexed mock database."""
    from fitlab_auth.services.auth_service import AuthService

    return AuthService(app_context)


# =============================================================================
# App / Client Fixtures
# =============================================================================

@pytest.fixture
def app(test_settings, app_context):
    """
    Create FastAPI app for testing.

    The app uses the mock context, so its lifespan creates indexes on the
    in-memory database and never opens a real connection.
    """
    from fitlab_auth.main import create_app

    return create_app(settings=test_settings, context=app_context)


@pytest.fixture
def client(app):
    """TestClient running the app lifespan."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def registered_user(client, test_user_data) -> dict:
    """Register test_user_data through the API and return the response body."""
    response = client.post("/api/auth/register", json=test_user_data)
    assert response.status_code == 201
    return response.json()


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, kind: str, message: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert data["success"] is False
        assert data["kind"] == kind
        if message:
            assert data["message"] == message
    return _assert
