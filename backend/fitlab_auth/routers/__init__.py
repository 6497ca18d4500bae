"""
API routers.
"""
from fitlab_auth.routers import auth, health

__all__ = ["auth", "health"]
