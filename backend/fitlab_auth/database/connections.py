"""
Database connection management for MongoDB.
"""
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase


def create_mongo_client(mongodb_uri: str) -> AsyncIOMotorClient:
    """Create a MongoDB client with its own connection pool."""
    return AsyncIOMotorClient(mongodb_uri)


def get_database(client: AsyncIOMotorClient, default_name: str) -> AsyncIOMotorDatabase:
    """
    Get the database named in the connection string, or ``default_name``
    when the URI does not name one.
    """
    return client.get_default_database(default=default_name)


async def ping(client: AsyncIOMotorClient) -> None:
    """Raise if the MongoDB server does not answer a ping."""
    await client.admin.command("ping")
