"""Session endpoints (schedule, list, enroll)."""

from fastapi import APIRouter, Depends, Response, status

from gympilot.api.deps import get_gym, get_secretary, session_to_read
from gympilot.core.errors import EnrollmentRejectedError
from gympilot.core.secretary import Secretary
from gympilot.models import EnrollmentCreate, EnrollmentRead, SessionCreate, SessionRead
from gympilot.models.gym import Gym

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.post("", response_model=SessionRead, status_code=status.HTTP_201_CREATED)
async def create_session(
    payload: SessionCreate,
    response: Response,
    gym: Gym = Depends(get_gym),
    secretary: Secretary = Depends(get_secretary),
):
    """Schedule a session.

    An identical session already on the books is returned with 200 instead
    of creating a duplicate.
    """
    instructor = gym.find_instructor(payload.instructor_id)
    known = len(gym.sessions)
    session = secretary.add_session(payload.session_type, payload.schedule, payload.forum, instructor)
    if len(gym.sessions) == known:
        response.status_code = status.HTTP_200_OK
    return session_to_read(gym, session)


@router.get("", response_model=list[SessionRead])
async def list_sessions(gym: Gym = Depends(get_gym)):
    return [session_to_read(gym, s) for s in gym.sessions]


@router.get("/{session_id}", response_model=SessionRead)
async def get_session(session_id: int, gym: Gym = Depends(get_gym)):
    return session_to_read(gym, gym.get_session(session_id))


@router.post("/{session_id}/enrollments", response_model=EnrollmentRead)
async def enroll_client(
    session_id: int,
    payload: EnrollmentCreate,
    gym: Gym = Depends(get_gym),
    secretary: Secretary = Depends(get_secretary),
):
    """Enroll a client. A failed eligibility check answers 409 with the reason."""
    session = gym.get_session(session_id)
    client = gym.lookup_client(payload.client_id)
    outcome = secretary.register_client_to_lesson(client, session)
    if not outcome.enrolled:
        raise EnrollmentRejectedError(outcome.reason.value, client.id)
    return EnrollmentRead(
        enrolled=True,
        client_balance=client.balance_amount,
        gym_balance=gym.balance,
    )
