"""
Health check router.
"""
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request, status

from fitlab_auth.database.connections import ping

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get(
    "/api/health",
    status_code=status.HTTP_200_OK,
    summary="Health check with database status",
)
async def health_check(request: Request):
    """
    Returns 200 while the API is running and reports whether MongoDB
    answers a ping.
    """
    try:
        await ping(request.app.state.context.client)
        mongodb = "connected"
    except Exception as e:
        logger.warning("MongoDB ping failed: %s", e)
        mongodb = "disconnected"

    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "mongodb": mongodb,
        "server": "FitLab API",
    }
