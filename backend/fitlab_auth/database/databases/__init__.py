"""
Database definitions and collection constants.
"""
from fitlab_auth.database.databases import auth_db

__all__ = ["auth_db"]
