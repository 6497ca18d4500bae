"""
Per-process application context.

Holds the MongoDB client, the auth database handle and the signing secret.
Built once at startup by the FastAPI lifespan, stored on ``app.state`` and
read-only afterwards.
"""
from dataclasses import dataclass

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from fitlab_auth.config import Settings
from fitlab_auth.core.security import DEFAULT_ALGORITHM
from fitlab_auth.database.connections import create_mongo_client, get_database


@dataclass(frozen=True)
class AppContext:
    """Shared, read-only resources for request handlers."""
    client: AsyncIOMotorClient
    db: AsyncIOMotorDatabase
    jwt_secret: str
    jwt_algorithm: str = DEFAULT_ALGORITHM
    expose_errors: bool = False

    def close(self) -> None:
        self.client.close()


def build_context(settings: Settings) -> AppContext:
    """Create the application context from settings."""
    client = create_mongo_client(settings.mongodb_uri)
    return AppContext(
        client=client,
        db=get_database(client, settings.mongodb_db_name),
        jwt_secret=settings.jwt_secret,
        jwt_algorithm=settings.jwt_algorithm,
        expose_errors=settings.is_development,
    )
