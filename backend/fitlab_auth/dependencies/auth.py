"""
Authentication dependencies for the auth routes.
"""
from typing import Annotated, Optional

from fastapi import Depends, Header, Request

from fitlab_auth.core.context import AppContext
from fitlab_auth.core.errors import AuthError
from fitlab_auth.services.auth_service import AuthService


def get_app_context(request: Request) -> AppContext:
    """Dependency returning the context built at startup."""
    return request.app.state.context


def get_auth_service(
    context: Annotated[AppContext, Depends(get_app_context)],
) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(context)


def get_bearer_token(
    authorization: Annotated[Optional[str], Header()] = None,
) -> str:
    """
    Extract the raw token from an ``Authorization: Bearer <token>`` header.

    Raises:
        AuthError: If the header is missing or not a Bearer credential
    """
    if not authorization:
        raise AuthError("No token provided.")

    scheme, _, token = authorization.partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise AuthError("No token provided.")
    return token


# Type aliases for cleaner route signatures
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
BearerToken = Annotated[str, Depends(get_bearer_token)]
