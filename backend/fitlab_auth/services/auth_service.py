"""
Authentication service: registration, login and token verification.
"""
import logging

from pydantic import ValidationError as PydanticValidationError

from fitlab_auth.core.context import AppContext
from fitlab_auth.core.errors import (
    AuthError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from fitlab_auth.core.security import (
    JWTError,
    create_access_token,
    decode_token,
    dummy_password_hash,
    hash_password_in_thread,
    verify_password_in_thread,
)
from fitlab_auth.models.user import User
from fitlab_auth.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    TokenPayload,
    VerifyResponse,
)
from fitlab_auth.services.user_store import UserStore, normalize_email

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password."
INVALID_TOKEN = "Invalid or expired token."


class AuthService:
    """Service for authentication operations."""

    def __init__(self, context: AppContext, store: UserStore | None = None):
        """Initialize with the application context."""
        self.context = context
        self.store = store or UserStore(context.db)

    def _issue_token(self, user: User) -> str:
        return create_access_token(
            user_id=user.id,
            email=user.email,
            secret_key=self.context.jwt_secret,
            algorithm=self.context.jwt_algorithm,
        )

    async def register(self, request: RegisterRequest) -> RegisterResponse:
        """
        Register a new user.

        Args:
            request: Registration request with identity and profile fields

        Returns:
            RegisterResponse with a session token and the new user

        Raises:
            ValidationError: If required fields are missing or passwords differ
            ConflictError: If the email is already registered
            StorageError: If the database is unavailable
        """
        if request.missing_required():
            raise ValidationError("Name, email, and password are required.")

        if not request.passwords_match():
            raise ValidationError("Passwords do not match.")

        email = normalize_email(request.email)
        if await self.store.get_user_by_email(email):
            raise ConflictError()

        user = User(
            name=request.name.strip(),
            email=email,
            hashed_password=await hash_password_in_thread(request.password),
            age=request.age,
            fitness_goal=request.fitness_goal,
            experience=request.experience,
            workout_time=request.workout_time,
            dietary_preference=request.dietary_preference,
        )
        # A concurrent registration can still win the race; the unique
        # index turns that into ConflictError inside create_user.
        user = await self.store.create_user(user)
        logger.info("Registered user %s (%s)", user.id, user.email)

        return RegisterResponse(token=self._issue_token(user), user=user.to_public())

    async def login(self, request: LoginRequest) -> LoginResponse:
        """
        Authenticate user and return JWT token.

        Unknown accounts and wrong passwords produce the same error.

        Args:
            request: Login request with email and password

        Returns:
            LoginResponse with JWT token and the user

        Raises:
            ValidationError: If email or password is missing
            AuthError: If credentials are invalid
            StorageError: If the database is unavailable
        """
        if request.missing_required():
            raise ValidationError("Email and password are required.")

        user = await self.store.get_user_by_email(request.email)
        if user is None:
            await verify_password_in_thread(request.password, dummy_password_hash())
            logger.info("Login failed: no account for %s", normalize_email(request.email))
            raise AuthError(INVALID_CREDENTIALS)

        if not await verify_password_in_thread(request.password, user.hashed_password):
            logger.info("Login failed: wrong password for user %s", user.id)
            raise AuthError(INVALID_CREDENTIALS)

        logger.info("Login successful for user %s", user.id)
        return LoginResponse(token=self._issue_token(user), user=user.to_public())

    async def verify_token(self, token: str) -> VerifyResponse:
        """
        Verify a bearer token and return the user it belongs to.

        Args:
            token: Raw JWT string

        Returns:
            VerifyResponse with the user

        Raises:
            AuthError: If the token is malformed, forged or expired
            NotFoundError: If the user no longer exists
            StorageError: If the database is unavailable
        """
        try:
            payload = TokenPayload(
                **decode_token(
                    token,
                    self.context.jwt_secret,
                    algorithm=self.context.jwt_algorithm,
                )
            )
        except (JWTError, PydanticValidationError) as e:
            logger.info("Token rejected: %s", e)
            raise AuthError(INVALID_TOKEN) from e

        user = await self.store.get_user_by_id(payload.sub)
        if user is None:
            raise NotFoundError()

        return VerifyResponse(user=user.to_public())
