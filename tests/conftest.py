"""
Global test fixtures for FitLab Auth.

This module provides shared fixtures for all tests including:
- Environment defaults (signing secret) applied before any app import
- Mock MongoDB (mongomock-motor)
- Test user factories
"""

import os
import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

os.environ.setdefault("JWT_SECRET", "test-secret-key")
os.environ.setdefault("ENVIRONMENT", "test")

TEST_SECRET = "test-secret-key"
TEST_DB_NAME = "fitlab_test"


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    This provides an in-memory MongoDB that behaves like the real thing
    for testing purposes.
    """
    from mongomock_motor import AsyncMongoMockClient
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_auth_db(mock_async_mongo_client):
    """Provide mock auth database with indexes created like the real app."""
    from fitlab_auth.database.databases import auth_db

    db = mock_async_mongo_client[TEST_DB_NAME]
    await auth_db.create_indexes(db)
    yield db


# =============================================================================
# User Fixtures
# =============================================================================

@pytest.fixture
def test_user_data() -> dict:
    """Registration body as a client would send it."""
    return {
        "name": "Ann",
        "age": 30,
        "email": "A@X.com",
        "password": "p1",
        "fitnessGoal": "loss",
        "experience": "beginner",
    }


@pytest.fixture
def test_user_credentials() -> dict:
    """Login body matching test_user_data."""
    return {
        "email": "a@x.com",
        "password": "p1",
    }
