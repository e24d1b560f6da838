"""Notification endpoints: by session, by date, to everyone."""

from fastapi import APIRouter, Depends

from gympilot.api.deps import get_gym, get_secretary
from gympilot.core.secretary import Secretary
from gympilot.models import DateNotificationCreate, NotificationCreate, NotificationResult
from gympilot.models.gym import Gym

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.post("/session/{session_id}", response_model=NotificationResult)
async def notify_session(
    session_id: int,
    payload: NotificationCreate,
    gym: Gym = Depends(get_gym),
    secretary: Secretary = Depends(get_secretary),
):
    session = gym.get_session(session_id)
    return NotificationResult(delivered=secretary.notify_session(session, payload.message))


@router.post("/date", response_model=NotificationResult)
async def notify_date(
    payload: DateNotificationCreate,
    secretary: Secretary = Depends(get_secretary),
):
    """Notify participants of all sessions on a date, skipping repeats."""
    return NotificationResult(delivered=secretary.notify_date(payload.date, payload.message))


@router.post("/all", response_model=NotificationResult)
async def notify_all(
    payload: NotificationCreate,
    secretary: Secretary = Depends(get_secretary),
):
    return NotificationResult(delivered=secretary.notify_all(payload.message))
