"""
Pydantic models for database documents.
"""
from fitlab_auth.models.user import User

__all__ = ["User"]
