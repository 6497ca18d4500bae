"""
Core module - Security, errors and application context.
"""
from fitlab_auth.core.errors import (
    AuthError,
    AuthServiceError,
    ConflictError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from fitlab_auth.core.security import (
    hash_password,
    verify_password,
    create_access_token,
    decode_token,
)

__all__ = [
    "AuthError",
    "AuthServiceError",
    "ConflictError",
    "NotFoundError",
    "StorageError",
    "ValidationError",
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_token",
]
