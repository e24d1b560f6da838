"""Scheduled gym session with its roster."""

from dataclasses import dataclass, field
from datetime import datetime

from gympilot.core.validators import SCHEDULE_FORMAT
from gympilot.models.enums import ForumType, SessionType
from gympilot.models.person import Client, Instructor


@dataclass(eq=True)
class Session:
    """A session of one type, taught by one instructor at a fixed time.

    Equality is structural over every field, roster included, so two sessions
    created from the same request compare equal until someone enrolls.
    Capacity and price are copied from the session type at creation.
    """

    session_type: SessionType
    instructor: Instructor
    date_time: datetime
    forum: ForumType
    capacity: int
    price: int
    participants: list[Client] = field(default_factory=list)

    @property
    def is_full(self) -> bool:
        return len(self.participants) >= self.capacity

    def has_participant(self, client: Client) -> bool:
        return client in self.participants

    def add_participant(self, client: Client) -> None:
        if client in self.participants:
            raise ValueError(f"Client {client.id} is already in this session")
        if self.is_full:
            raise ValueError("Session is at capacity")
        self.participants.append(client)

    def remove_participant(self, client: Client) -> bool:
        """Drop a client from the roster. Returns True if they were on it."""
        if client in self.participants:
            self.participants.remove(client)
            return True
        return False

    def is_upcoming(self, now: datetime) -> bool:
        return self.date_time > now

    def __str__(self) -> str:
        return (
            f"Session Type: {self.session_type.value}"
            f" | Date: {self.date_time.strftime(SCHEDULE_FORMAT)}"
            f" | Forum: {self.forum.value}"
            f" | Instructor: {self.instructor.name}"
            f" | Participants: {len(self.participants)}/{self.capacity}"
        )
