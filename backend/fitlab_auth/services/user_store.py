"""
Credential store backed by the MongoDB ``users`` collection.
"""
import logging
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError, PyMongoError

from fitlab_auth.core.errors import ConflictError, StorageError
from fitlab_auth.database.databases import auth_db
from fitlab_auth.models.user import User

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    """Canonical form of an account identifier."""
    return email.strip().casefold()


class UserStore:
    """Persistence operations on user records."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with auth database."""
        self.db = db
        self.users_collection = db[auth_db.Collections.USERS]

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email.

        Args:
            email: User email address, normalized before lookup

        Returns:
            User model or None if not found

        Raises:
            StorageError: If the database cannot be queried
        """
        try:
            user_doc = await self.users_collection.find_one(
                {"email": normalize_email(email)}
            )
        except PyMongoError as e:
            logger.exception("User lookup by email failed")
            raise StorageError() from e

        if not user_doc:
            return None
        return User.from_document(user_doc)

    async def get_user_by_id(self, user_id: str) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User ObjectId as string

        Returns:
            User model or None if not found or the ID is malformed

        Raises:
            StorageError: If the database cannot be queried
        """
        try:
            object_id = ObjectId(user_id)
        except (InvalidId, TypeError):
            return None

        try:
            user_doc = await self.users_collection.find_one({"_id": object_id})
        except PyMongoError as e:
            logger.exception("User lookup by id failed")
            raise StorageError() from e

        if not user_doc:
            return None
        return User.from_document(user_doc)

    async def create_user(self, user: User) -> User:
        """
        Insert a new user record.

        Args:
            user: User to persist; its email must already be normalized

        Returns:
            The stored user with its assigned ID

        Raises:
            ConflictError: If the unique email index rejects the insert
            StorageError: On any other database failure
        """
        try:
            result = await self.users_collection.insert_one(user.to_document())
        except DuplicateKeyError as e:
            raise ConflictError() from e
        except PyMongoError as e:
            logger.exception("User insert failed")
            raise StorageError() from e

        return user.model_copy(update={"id": str(result.inserted_id)})
