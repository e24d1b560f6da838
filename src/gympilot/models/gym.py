"""The gym: facility context owning people, sessions, money and the action log."""

from collections.abc import Callable
from datetime import datetime

from gympilot.core.audit import ActionLog
from gympilot.core.errors import NotFoundError
from gympilot.core.logging import get_logger
from gympilot.core.secretary import Secretary
from gympilot.models.person import Client, Instructor, Person
from gympilot.models.session import Session
from gympilot.utils.datetime import now_local_naive

logger = get_logger(__name__)


class Gym:
    """One facility. Created explicitly and passed to whoever needs it.

    Attributes:
        clients: Registered clients, in registration order
        client_records: Every client ever registered, by id, including former ones
        instructors: Hired instructors
        sessions: Scheduled sessions; a session's index is its id
        balance: Session payments collected minus salaries paid
        action_log: Audit trail of administrative events
        secretary: Current (active) secretary, None until appointed
    """

    def __init__(self, name: str = "GymPilot", clock: Callable[[], datetime] | None = None):
        self.name = name
        self.clients: list[Client] = []
        self.client_records: dict[int, Client] = {}
        self.instructors: list[Instructor] = []
        self.sessions: list[Session] = []
        self.balance = 0
        self.action_log = ActionLog()
        self.secretary: Secretary | None = None
        self._clock = clock or now_local_naive

    def now(self) -> datetime:
        return self._clock()

    def set_secretary(self, person: Person, salary: int) -> Secretary:
        """Appoint a new secretary. The previous one is deactivated, not removed."""
        if self.secretary is not None:
            self.secretary.deactivate()
            logger.info("secretary.deactivated", secretary_id=self.secretary.id)
        self.secretary = Secretary(person, salary, self)
        self.action_log.append(
            f"A new secretary has started working at the gym: {self.secretary.name}"
        )
        return self.secretary

    def credit(self, amount: int) -> None:
        self.balance += amount

    def debit(self, amount: int) -> None:
        self.balance -= amount

    def add_client(self, client: Client) -> None:
        self.clients.append(client)
        self.client_records[client.id] = client

    def is_registered(self, client: Client) -> bool:
        return client in self.clients

    def find_client(self, client_id: int) -> Client:
        for client in self.clients:
            if client.id == client_id:
                return client
        raise NotFoundError("Client", str(client_id))

    def lookup_client(self, client_id: int) -> Client:
        """Find a current or former client. Unknown ids raise NotFoundError."""
        try:
            return self.client_records[client_id]
        except KeyError:
            raise NotFoundError("Client", str(client_id)) from None

    def find_instructor(self, instructor_id: int) -> Instructor:
        for instructor in self.instructors:
            if instructor.id == instructor_id:
                return instructor
        raise NotFoundError("Instructor", str(instructor_id))

    def get_session(self, session_id: int) -> Session:
        if 0 <= session_id < len(self.sessions):
            return self.sessions[session_id]
        raise NotFoundError("Session", str(session_id))

    def report(self) -> str:
        """Human-readable snapshot of the whole facility."""
        today = self.now().date()
        lines = [f"Gym Name: {self.name}"]
        if self.secretary is not None:
            lines.append(f"Gym Secretary: {self.secretary.describe(today)}")
        lines.append(f"Gym Balance: {self.balance}")
        lines.append("")
        lines.append("Clients Data:")
        lines.extend(client.describe(today) for client in self.clients)
        lines.append("")
        lines.append("Employees Data:")
        lines.extend(instructor.describe(today) for instructor in self.instructors)
        if self.secretary is not None:
            lines.append(self.secretary.describe(today))
        lines.append("")
        lines.append("Sessions Data:")
        lines.extend(str(session) for session in self.sessions)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.report()
