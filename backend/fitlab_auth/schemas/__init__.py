"""
Request and response schemas for API endpoints.
"""
from fitlab_auth.schemas.auth import (
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    TokenPayload,
    VerifyResponse,
)
from fitlab_auth.schemas.user import UserPublic

__all__ = [
    # Auth
    "ErrorResponse",
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "RegisterResponse",
    "TokenPayload",
    "VerifyResponse",
    # User
    "UserPublic",
]
