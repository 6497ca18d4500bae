"""
Authentication request/response schemas.

Request fields are declared up front but left optional at the parsing
layer, so that a missing field is reported by the auth workflow as a
``ValidationError`` with a readable message instead of a framework error.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from fitlab_auth.schemas.user import UserPublic


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class RegisterRequest(BaseModel):
    """Registration request body."""
    model_config = ConfigDict(populate_by_name=True)

    # Required
    name: Optional[str] = Field(None, description="Display name")
    email: Optional[EmailStr] = Field(None, description="User email address (must be unique)")
    password: Optional[str] = Field(None, description="User password")

    # Optional
    confirm_password: Optional[str] = Field(
        None,
        alias="confirmPassword",
        description="Password confirmation, must match password when given",
    )
    age: Optional[int] = Field(None, ge=0, description="Age in years")
    fitness_goal: Optional[str] = Field(None, alias="fitnessGoal")
    experience: Optional[str] = Field(None)
    workout_time: Optional[str] = Field(None, alias="workoutTime")
    dietary_preference: Optional[str] = Field(None, alias="dietaryPreference")

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, value):
        """Trim surrounding whitespace; a blank email counts as missing."""
        if isinstance(value, str):
            return value.strip() or None
        return value

    def missing_required(self) -> bool:
        """Check if any required field is absent or empty."""
        return _blank(self.name) or _blank(self.email) or not self.password

    def passwords_match(self) -> bool:
        """Check if password and confirmation match (no confirmation always matches)."""
        return self.confirm_password is None or self.password == self.confirm_password


class LoginRequest(BaseModel):
    """Login request body."""
    email: Optional[str] = Field(None, description="User email address")
    password: Optional[str] = Field(None, description="User password")

    def missing_required(self) -> bool:
        """Check if email or password is absent or empty."""
        return _blank(self.email) or not self.password


class RegisterResponse(BaseModel):
    """Registration response."""
    success: bool = Field(default=True)
    message: str = Field(default="User registered successfully!")
    token: str = Field(..., description="JWT access token")
    user: UserPublic


class LoginResponse(BaseModel):
    """Login response with JWT token."""
    success: bool = Field(default=True)
    message: str = Field(default="Login successful!")
    user: UserPublic
    token: str = Field(..., description="JWT access token")


class VerifyResponse(BaseModel):
    """Token verification response."""
    success: bool = Field(default=True)
    user: UserPublic


class ErrorResponse(BaseModel):
    """Error payload shared by every failing auth route."""
    success: bool = Field(default=False)
    kind: str = Field(..., description="Error kind, e.g. AuthError")
    message: str = Field(..., description="Human-readable message")


class TokenPayload(BaseModel):
    """Decoded JWT token payload."""
    sub: str = Field(..., min_length=1, description="Subject (user ID)")
    email: str = Field(..., description="Account email")
    iat: datetime = Field(..., description="Issued at time")
    exp: datetime = Field(..., description="Expiration time")
