"""
Database module - MongoDB connection and database definitions.
"""
from fitlab_auth.database.connections import (
    create_mongo_client,
    get_database,
    ping,
)
from fitlab_auth.database.databases import auth_db

__all__ = [
    "create_mongo_client",
    "get_database",
    "ping",
    "auth_db",
]
