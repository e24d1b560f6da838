"""
Health check endpoint for monitoring and orchestration.

Reports uptime and a summary of the in-memory gym state.
"""

from datetime import datetime
from typing import Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from gympilot.api.deps import get_gym
from gympilot.models.gym import Gym

router = APIRouter(tags=["health"])

# Global app start time (set in lifespan)
_app_start_time: datetime | None = None


def set_app_start_time(start_time: datetime) -> None:
    """Called by lifespan to track when app started."""
    global _app_start_time
    _app_start_time = start_time


def get_uptime_seconds() -> int:
    """Calculate seconds since app start."""
    if _app_start_time is None:
        return 0
    return int((datetime.now() - _app_start_time).total_seconds())


def check_gym(gym: Gym) -> dict[str, Any]:
    """
    Summarize facility state.

    Status is "degraded" while no active secretary is appointed, since every
    mutating endpoint needs one.
    """
    has_secretary = gym.secretary is not None and gym.secretary.active
    return {
        "status": "ok" if has_secretary else "degraded",
        "secretary": has_secretary,
        "clients": len(gym.clients),
        "instructors": len(gym.instructors),
        "sessions": len(gym.sessions),
        "actions": len(gym.action_log),
    }


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Returns 200 with uptime and gym checks, even when degraded.",
)
async def health_check(gym: Gym = Depends(get_gym)) -> JSONResponse:
    """
    Example response (healthy):
        {
            "status": "ok",
            "uptime_seconds": 3600,
            "checks": {"gym": {"status": "ok", "secretary": true, "clients": 12, ...}}
        }
    """
    gym_check = check_gym(gym)
    return JSONResponse(
        content={
            "status": gym_check["status"],
            "uptime_seconds": get_uptime_seconds(),
            "checks": {"gym": gym_check},
        },
        status_code=status.HTTP_200_OK,
    )
