"""
Security utilities for password hashing and JWT token management.
"""
import asyncio
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

# Fixed bcrypt work factor; never taken from a request.
BCRYPT_ROUNDS = 10

# Lifetime of every session token issued by register and login.
ACCESS_TOKEN_EXPIRE = timedelta(days=7)

DEFAULT_ALGORITHM = "HS256"

# Password hashing context using bcrypt
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=BCRYPT_ROUNDS,
)


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt.

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    return pwd_context.hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    The comparison runs in constant time. A malformed stored hash counts
    as a mismatch.

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if password matches, False otherwise
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


@lru_cache(maxsize=1)
def dummy_password_hash() -> str:
    """
    Hash compared against when no account matches, so a failed login
    costs one bcrypt round trip whether or not the email exists.
    """
    return hash_password("fitlab-no-such-account")


async def hash_password_in_thread(plain_password: str) -> str:
    """Run ``hash_password`` in a worker thread so the event loop stays free."""
    return await asyncio.to_thread(hash_password, plain_password)


async def verify_password_in_thread(plain_password: str, hashed_password: str) -> bool:
    """Run ``verify_password`` in a worker thread so the event loop stays free."""
    return await asyncio.to_thread(verify_password, plain_password, hashed_password)


def create_access_token(
    user_id: str,
    email: str,
    secret_key: str,
    algorithm: str = DEFAULT_ALGORITHM,
    expires_delta: timedelta | None = None,
    issued_at: datetime | None = None,
) -> str:
    """
    Create a JWT access token.

    Args:
        user_id: Unique user identifier (``sub`` claim)
        email: Account email (``email`` claim)
        secret_key: Server-held signing secret
        algorithm: JWS algorithm
        expires_delta: Optional custom lifetime, defaults to ACCESS_TOKEN_EXPIRE
        issued_at: Optional issuance time, defaults to now

    Returns:
        Encoded JWT token string
    """
    if expires_delta is None:
        expires_delta = ACCESS_TOKEN_EXPIRE
    if issued_at is None:
        issued_at = datetime.now(timezone.utc)

    payload = {
        "sub": user_id,
        "email": email,
        "iat": int(issued_at.timestamp()),
        "exp": int((issued_at + expires_delta).timestamp()),
    }

    return jwt.encode(payload, secret_key, algorithm=algorithm)


def decode_token(
    token: str,
    secret_key: str,
    algorithm: str = DEFAULT_ALGORITHM,
) -> dict[str, Any]:
    """
    Decode and validate a JWT token.

    Signature and expiry are both checked.

    Args:
        token: The JWT token string to decode
        secret_key: Server-held signing secret
        algorithm: Accepted JWS algorithm

    Returns:
        Decoded payload dictionary with keys: sub, email, iat, exp

    Raises:
        JWTError: If token is malformed, forged or expired
    """
    return jwt.decode(token, secret_key, algorithms=[algorithm])


__all__ = [
    "ACCESS_TOKEN_EXPIRE",
    "BCRYPT_ROUNDS",
    "JWTError",
    "create_access_token",
    "decode_token",
    "dummy_password_hash",
    "hash_password",
    "hash_password_in_thread",
    "verify_password",
    "verify_password_in_thread",
]
