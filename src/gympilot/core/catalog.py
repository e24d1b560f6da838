"""Session catalog: turns a session type into a scheduled Session."""

from gympilot.core.validators import parse_schedule
from gympilot.models.enums import SESSION_POLICIES, ForumType, SessionPolicy, SessionType
from gympilot.models.person import Instructor
from gympilot.models.session import Session


def policy_for(session_type: SessionType) -> SessionPolicy:
    """Fixed capacity and price of a session type."""
    return SESSION_POLICIES[SessionType(session_type)]


def create_session(
    session_type: SessionType,
    instructor: Instructor,
    schedule_text: str,
    forum: ForumType,
) -> Session:
    """Build a new, unregistered session.

    Raises:
        MalformedScheduleError: If schedule_text isn't "dd-MM-yyyy HH:mm"
    """
    session_type = SessionType(session_type)
    policy = policy_for(session_type)
    return Session(
        session_type=session_type,
        instructor=instructor,
        date_time=parse_schedule(schedule_text),
        forum=ForumType(forum),
        capacity=policy.capacity,
        price=policy.price,
    )
