"""
Error kinds raised by the authentication workflow.

Each error carries the HTTP status it maps to and a message that is safe to
show to the caller. The app-level exception handler in ``fitlab_auth.main``
turns them into ``{"success": false, "kind": ..., "message": ...}`` payloads.
"""
from fastapi import status


class AuthServiceError(Exception):
    """Base class for workflow errors reported to the caller."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def kind(self) -> str:
        return type(self).__name__


class ValidationError(AuthServiceError):
    """Missing or malformed input."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation error"


class ConflictError(AuthServiceError):
    """An account with the same email already exists."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "User with this email already exists."


class AuthError(AuthServiceError):
    """Bad credentials, or a missing, invalid or expired token."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid email or password."


class NotFoundError(AuthServiceError):
    """The user referenced by a valid token no longer exists."""
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "User not found."


class StorageError(AuthServiceError):
    """The credential store is unavailable or a write failed."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "A database error occurred."
