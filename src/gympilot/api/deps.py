"""Shared FastAPI dependencies: the gym context and its acting secretary."""

from fastapi import Depends, Request

from gympilot.core.errors import InvalidStateError
from gympilot.core.secretary import Secretary
from gympilot.models.gym import Gym
from gympilot.models.schemas import SessionRead
from gympilot.models.session import Session


def get_gym(request: Request) -> Gym:
    """Gym instance created at app startup. Tests override this dependency."""
    return request.app.state.gym


def get_secretary(gym: Gym = Depends(get_gym)) -> Secretary:
    """Current secretary; every mutating route acts through it."""
    if gym.secretary is None:
        raise InvalidStateError("No secretary has been appointed yet")
    return gym.secretary


def session_to_read(gym: Gym, session: Session) -> SessionRead:
    return SessionRead(
        # By identity: distinct sessions may compare equal
        id=next(i for i, s in enumerate(gym.sessions) if s is session),
        session_type=session.session_type,
        date_time=session.date_time,
        forum=session.forum,
        instructor_id=session.instructor.id,
        capacity=session.capacity,
        price=session.price,
        participant_ids=[c.id for c in session.participants],
    )
