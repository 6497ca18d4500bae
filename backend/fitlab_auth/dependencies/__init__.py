"""
Dependencies for dependency injection in routes.
"""
from fitlab_auth.dependencies.auth import (
    AuthServiceDep,
    BearerToken,
    get_app_context,
    get_auth_service,
    get_bearer_token,
)

__all__ = [
    "AuthServiceDep",
    "BearerToken",
    "get_app_context",
    "get_auth_service",
    "get_bearer_token",
]
