"""
User response schemas.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserPublic(BaseModel):
    """User information returned to clients (excludes the password hash)."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="User ID")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="User email")
    age: Optional[int] = Field(None, description="Age in years")
    fitness_goal: Optional[str] = Field(None, alias="fitnessGoal")
    experience: Optional[str] = Field(None)
    workout_time: Optional[str] = Field(None, alias="workoutTime")
    dietary_preference: Optional[str] = Field(None, alias="dietaryPreference")
    created_at: datetime = Field(..., alias="createdAt", description="Account creation date")
