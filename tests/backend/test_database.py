"""
Tests for database connections, indexes and the credential store.

These tests cover:
- MongoDB client creation and database selection
- Unique email index creation
- UserStore lookups, inserts and error translation
"""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from pymongo.errors import ServerSelectionTimeoutError


def make_user(email: str = "ann@example.com", **overrides):
    from fitlab_auth.models.user import User

    fields = {
        "name": "Ann",
        "email": email,
        "hashed_password": "$2b$10$notarealhashbutlongenoughforthetests000000000000000000",
        "age": 30,
        "fitness_goal": "loss",
        "experience": "beginner",
    }
    fields.update(overrides)
    return User(**fields)


class TestMongoDBConnection:
    """Tests for MongoDB connection handling."""

    def test_create_mongo_client_uses_uri(self):
        """create_mongo_client should pass the URI to Motor."""
        with patch("fitlab_auth.database.connections.AsyncIOMotorClient") as mock_client:
            mock_instance = MagicMock()
            mock_client.return_value = mock_instance

            from fitlab_auth.database.connections import create_mongo_client
            client = create_mongo_client("mongodb://test:27017")

            mock_client.assert_called_once_with("mongodb://test:27017")
            assert client is mock_instance

    def test_get_database_prefers_uri_database(self):
        """A database named in the URI wins over the default name."""
        from fitlab_auth.database.connections import get_database

        client = MagicMock()
        get_database(client, "fitlab")

        client.get_default_database.assert_called_once_with(default="fitlab")

    def test_build_context_wires_settings(self):
        """build_context should carry the secret and mode from settings."""
        from fitlab_auth.config import Settings
        from fitlab_auth.core.context import build_context

        settings = Settings(
            jwt_secret="ctx-secret",
            mongodb_uri="mongodb://db:27017",
            environment="development",
            _env_file=None,
        )

        with patch("fitlab_auth.core.context.create_mongo_client") as mock_create:
            context = build_context(settings)

        mock_create.assert_called_once_with("mongodb://db:27017")
        assert context.client is mock_create.return_value
        assert context.jwt_secret == "ctx-secret"
        assert context.jwt_algorithm == "HS256"
        assert context.expose_errors is True

    def test_context_close_closes_client(self):
        """Closing the context closes the Motor client."""
        from fitlab_auth.core.context import AppContext

        client = MagicMock()
        context = AppContext(client=client, db=MagicMock(), jwt_secret="s")
        context.close()

        client.close.assert_called_once()


class TestIndexCreation:
    """Tests for index creation on collections."""

    @pytest.mark.asyncio
    async def test_indexes_created_on_users_collection(self, mock_auth_db):
        """Users collection should have a unique email index."""
        indexes = await mock_auth_db.users.index_information()

        email_indexes = [idx for idx in indexes.values() if idx["key"] == [("email", 1)]]
        assert len(email_indexes) == 1
        assert email_indexes[0].get("unique") is True


class TestUserStore:
    """Tests for the MongoDB-backed credential store."""

    @pytest.mark.asyncio
    async def test_create_user_assigns_id(self, mock_auth_db):
        """Inserted users get the server-assigned ObjectId as string."""
        from fitlab_auth.services.user_store import UserStore

        store = UserStore(mock_auth_db)
        user = await store.create_user(make_user())

        assert user.id is not None
        stored = await mock_auth_db.users.find_one({"email": "ann@example.com"})
        assert str(stored["_id"]) == user.id
        assert "_id" in stored and "id" not in stored

    @pytest.mark.asyncio
    async def test_create_user_stores_hash_not_plaintext(self, mock_auth_db):
        """Stored document holds hashed_password and no password field."""
        from fitlab_auth.services.user_store import UserStore

        await UserStore(mock_auth_db).create_user(make_user())

        stored = await mock_auth_db.users.find_one({"email": "ann@example.com"})
        assert "password" not in stored
        assert stored["hashed_password"].startswith("$2b$")

    @pytest.mark.asyncio
    async def test_get_user_by_email_is_case_insensitive(self, mock_auth_db):
        """Lookups normalize the email before querying."""
        from fitlab_auth.services.user_store import UserStore

        store = UserStore(mock_auth_db)
        created = await store.create_user(make_user())

        found = await store.get_user_by_email("  ANN@Example.COM ")

        assert found is not None
        assert found.id == created.id

    @pytest.mark.asyncio
    async def test_get_user_by_email_missing_returns_none(self, mock_auth_db):
        from fitlab_auth.services.user_store import UserStore

        assert await UserStore(mock_auth_db).get_user_by_email("nobody@example.com") is None

    @pytest.mark.asyncio
    async def test_get_user_by_id_round_trip(self, mock_auth_db):
        from fitlab_auth.services.user_store import UserStore

        store = UserStore(mock_auth_db)
        created = await store.create_user(make_user())

        found = await store.get_user_by_id(created.id)

        assert found is not None
        assert found.email == "ann@example.com"
        assert found.fitness_goal == "loss"

    @pytest.mark.asyncio
    async def test_get_user_by_id_malformed_returns_none(self, mock_auth_db):
        """A non-ObjectId identifier is treated as not found."""
        from fitlab_auth.services.user_store import UserStore

        assert await UserStore(mock_auth_db).get_user_by_id("not-an-object-id") is None

    @pytest.mark.asyncio
    async def test_duplicate_insert_raises_conflict(self, mock_auth_db):
        """The unique index turns a racing duplicate insert into ConflictError."""
        from fitlab_auth.core.errors import ConflictError
        from fitlab_auth.services.user_store import UserStore

        store = UserStore(mock_auth_db)
        await store.create_user(make_user())

        with pytest.raises(ConflictError):
            await store.create_user(make_user(name="Someone Else"))

    @pytest.mark.asyncio
    async def test_driver_failure_on_read_raises_storage_error(self):
        """Driver errors during lookups surface as StorageError."""
        from fitlab_auth.core.errors import StorageError
        from fitlab_auth.services.user_store import UserStore

        db = MagicMock()
        db.__getitem__.return_value.find_one = AsyncMock(
            side_effect=ServerSelectionTimeoutError("no servers")
        )

        with pytest.raises(StorageError) as exc_info:
            await UserStore(db).get_user_by_email("ann@example.com")

        assert isinstance(exc_info.value.__cause__, ServerSelectionTimeoutError)

    @pytest.mark.asyncio
    async def test_driver_failure_on_insert_raises_storage_error(self):
        """Driver errors during inserts surface as StorageError."""
        from fitlab_auth.core.errors import StorageError
        from fitlab_auth.services.user_store import UserStore

        db = MagicMock()
        db.__getitem__.return_value.insert_one = AsyncMock(
            side_effect=ServerSelectionTimeoutError("no servers")
        )

        with pytest.raises(StorageError):
            await UserStore(db).create_user(make_user())
