"""
Authentication router for registration, login, and token verification.
"""
from fastapi import APIRouter, status

from fitlab_auth.dependencies.auth import AuthServiceDep, BearerToken
from fitlab_auth.schemas.auth import (
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    VerifyResponse,
)

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def register(body: RegisterRequest, auth_service: AuthServiceDep):
    """
    Register a new user account and return a session token.

    - **name**, **email**, **password**: required
    - **confirmPassword**: optional, must match password when given
    - **age**, **fitnessGoal**, **experience**, **workoutTime**, **dietaryPreference**: optional profile
    """
    return await auth_service.register(body)


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login and get access token",
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def login(body: LoginRequest, auth_service: AuthServiceDep):
    """
    Authenticate with email and password to receive a JWT token.

    The token should be sent as `Authorization: Bearer <token>`.
    """
    return await auth_service.login(body)


@router.get(
    "/verify",
    response_model=VerifyResponse,
    summary="Verify a bearer token",
    responses={
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def verify(token: BearerToken, auth_service: AuthServiceDep):
    """Return the user a valid, unexpired token belongs to."""
    return await auth_service.verify_token(token)
