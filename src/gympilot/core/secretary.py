# File: src/gympilot/core/secretary.py
"""The secretary: the single administrative role allowed to change gym state."""

from datetime import date
from functools import wraps
from typing import TYPE_CHECKING

from gympilot.core.catalog import create_session
from gympilot.core.enrollment import EnrollmentEngine, EnrollmentOutcome
from gympilot.core.errors import (
    DuplicateClientError,
    InactiveSecretaryError,
    InstructorNotQualifiedError,
    InvalidAgeError,
)
from gympilot.core.logging import get_logger
from gympilot.core.notifications import NotificationDispatcher
from gympilot.models.enums import ForumType, SessionType
from gympilot.models.person import Client, Instructor, Person
from gympilot.models.session import Session

if TYPE_CHECKING:
    from gympilot.models.gym import Gym

logger = get_logger(__name__)

MIN_CLIENT_AGE = 18


def requires_active(method):
    """Refuse the call outright when this secretary has been replaced."""

    @wraps(method)
    def wrapper(self: "Secretary", *args, **kwargs):
        if not self.active:
            logger.warning(
                "secretary.inactive_access",
                secretary_id=self.id,
                operation=method.__name__,
            )
            raise InactiveSecretaryError(self.id)
        return method(self, *args, **kwargs)

    return wrapper


class Secretary(Person):
    """Administrator of one gym. Replaced secretaries keep existing but can't act."""

    def __init__(self, person: Person, salary: int, gym: "Gym"):
        super().__init__(**person._role_kwargs())
        self.salary = salary
        self.active = True
        self.gym = gym
        self.enrollment = EnrollmentEngine(gym)
        self.dispatcher = NotificationDispatcher(gym)

    def deactivate(self) -> None:
        self.active = False

    @requires_active
    def register_client(self, person: Person) -> Client:
        """Register a person (18+) as a gym client."""
        if person.birth_date is None:
            raise InvalidAgeError("Error: Birth date is missing", details={"person_id": person.id})
        age = person.age_on(self.gym.now().date())
        if age < MIN_CLIENT_AGE:
            raise InvalidAgeError(
                "Error: Client must be at least 18 years old to register",
                details={"person_id": person.id, "age": age},
            )

        client = Client(person)
        if self.gym.is_registered(client):
            raise DuplicateClientError(client.id)

        self.gym.add_client(client)
        self.gym.action_log.append(f"Registered new client: {client.name}")
        logger.info("client.registered", client_id=client.id)
        return client

    @requires_active
    def unregister_client(self, client: Client) -> None:
        self.enrollment.unenroll(client)

    @requires_active
    def hire_instructor(self, person: Person, salary: int, session_types: list[SessionType]) -> Instructor:
        instructor = Instructor(person, salary, session_types)
        self.gym.instructors.append(instructor)
        self.gym.action_log.append(
            f"Hired new instructor: {instructor.name} with salary per hour: {instructor.salary}"
        )
        logger.info(
            "instructor.hired",
            instructor_id=instructor.id,
            expertise=[t.value for t in instructor.expertise],
        )
        return instructor

    @requires_active
    def add_session(
        self,
        session_type: SessionType,
        schedule_text: str,
        forum: ForumType,
        instructor: Instructor,
    ) -> Session:
        """Schedule a session, or return the identical one already on the books."""
        session_type = SessionType(session_type)
        if not instructor.is_qualified_for(session_type):
            raise InstructorNotQualifiedError(instructor.id, session_type.value)

        candidate = create_session(session_type, instructor, schedule_text, forum)
        for existing in self.gym.sessions:
            if existing == candidate:
                logger.info(
                    "session.reused",
                    session_type=session_type.value,
                    date_time=existing.date_time.isoformat(timespec="minutes"),
                )
                return existing

        self.gym.sessions.append(candidate)
        instructor.add_session(candidate)
        self.gym.action_log.append(
            f"Created new session: {session_type.value} on {candidate.date_time.isoformat(timespec='minutes')}"
            f" with instructor: {instructor.name}"
        )
        logger.info("session.created", session_type=session_type.value, instructor_id=instructor.id)
        return candidate

    @requires_active
    def register_client_to_lesson(self, client: Client, session: Session) -> EnrollmentOutcome:
        return self.enrollment.enroll(client, session)

    @requires_active
    def pay_salaries(self) -> int:
        """Pay the secretary's salary and each instructor per session taught.

        Returns:
            Total amount paid out of the gym balance
        """
        total = self.salary
        self.balance.credit(self.salary)
        self.gym.debit(self.salary)
        for instructor in self.gym.instructors:
            pay = len(instructor.sessions) * instructor.salary
            instructor.balance.credit(pay)
            self.gym.debit(pay)
            total += pay
        self.gym.action_log.append("Salaries have been paid to all employees")
        logger.info("payroll.paid", total=total, gym_balance=self.gym.balance)
        return total

    @requires_active
    def notify_session(self, session: Session, message: str) -> int:
        return self.dispatcher.notify_session(session, message)

    @requires_active
    def notify_date(self, date_text: str, message: str) -> int:
        return self.dispatcher.notify_date(date_text, message)

    @requires_active
    def notify_all(self, message: str) -> int:
        return self.dispatcher.notify_all(message)

    @requires_active
    def actions(self) -> tuple[str, ...]:
        return self.gym.action_log.snapshot()

    def describe(self, today: date | None = None) -> str:
        return f"{super().describe(today)} | Role: Secretary | Salary per Month: {self.salary}"
