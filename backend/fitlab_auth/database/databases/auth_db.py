"""
Auth database configuration.
Stores user identity and authentication data.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

logger = logging.getLogger(__name__)


class Collections:
    """Collection names in the auth database."""
    USERS = "users"


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """
    Create the indexes the auth workflow relies on.

    The unique email index is what makes registration safe against
    concurrent sign-ups with the same address.
    """
    await db[Collections.USERS].create_index("email", unique=True)
    logger.info("Ensured unique index on %s.email", Collections.USERS)
