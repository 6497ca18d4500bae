"""
Service layer for business logic.
"""
from fitlab_auth.services.auth_service import AuthService
from fitlab_auth.services.user_store import UserStore

__all__ = [
    "AuthService",
    "UserStore",
]
