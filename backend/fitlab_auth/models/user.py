"""
User model for the auth database.
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from fitlab_auth.schemas.user import UserPublic


class User(BaseModel):
    """
    User document model for the MongoDB ``users`` collection.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Unique, lower-cased email address")
    hashed_password: str = Field(..., description="Bcrypt hashed password")
    age: Optional[int] = Field(None, description="Age in years")
    fitness_goal: Optional[str] = Field(None, description="Free-form fitness goal")
    experience: Optional[str] = Field(None, description="Training experience level")
    workout_time: Optional[str] = Field(None, description="Preferred workout time")
    dietary_preference: Optional[str] = Field(None, description="Dietary preference")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Account creation timestamp",
    )

    @classmethod
    def from_document(cls, doc: dict) -> "User":
        """Build a User from a raw MongoDB document."""
        doc = dict(doc)
        doc["_id"] = str(doc["_id"])
        return cls(**doc)

    def to_document(self) -> dict:
        """Fields to insert into MongoDB (``_id`` is assigned by the server)."""
        return self.model_dump(exclude={"id"})

    def to_public(self) -> UserPublic:
        """Sanitized projection without the password hash."""
        return UserPublic(
            id=self.id,
            name=self.name,
            email=self.email,
            age=self.age,
            fitness_goal=self.fitness_goal,
            experience=self.experience,
            workout_time=self.workout_time,
            dietary_preference=self.dietary_preference,
            created_at=self.created_at,
        )
