"""People at the gym: base person record, balance, clients and instructors."""

import itertools
from datetime import date
from typing import TYPE_CHECKING

from gympilot.core.validators import DATE_FORMAT, parse_birth_date
from gympilot.models.enums import Gender, SessionType
from gympilot.utils.datetime import today_local, years_between

if TYPE_CHECKING:
    from gympilot.models.session import Session

FIRST_PERSON_ID = 1111

# Process-wide id sequence shared by every role
_person_ids = itertools.count(FIRST_PERSON_ID)


class Balance:
    """Mutable money holder shared by all roles of one person."""

    def __init__(self, amount: int = 0):
        self.amount = amount

    def credit(self, amount: int) -> None:
        self.amount += amount

    def debit(self, amount: int) -> None:
        self.amount -= amount

    def __repr__(self) -> str:
        return f"Balance({self.amount})"


class Person:
    """A person known to the gym. Equality is by type and id."""

    def __init__(
        self,
        name: str,
        balance: int | Balance,
        gender: Gender,
        birth_date: date | str | None,
        person_id: int | None = None,
    ):
        self.name = name
        self.balance = balance if isinstance(balance, Balance) else Balance(balance)
        self.gender = Gender(gender)
        self.birth_date = parse_birth_date(birth_date)
        self.id = next(_person_ids) if person_id is None else person_id
        self.notifications: list[str] = []

    @property
    def balance_amount(self) -> int:
        return self.balance.amount

    def age_on(self, day: date) -> int:
        if self.birth_date is None:
            raise ValueError(f"Person {self.id} has no birth date")
        return years_between(self.birth_date, day)

    def receive(self, message: str) -> None:
        """Push a message into this person's mailbox."""
        self.notifications.append(message)

    def _role_kwargs(self) -> dict:
        return {
            "name": self.name,
            "balance": self.balance,
            "gender": self.gender,
            "birth_date": self.birth_date,
            "person_id": self.id,
        }

    def describe(self, today: date | None = None) -> str:
        today = today or today_local()
        birthday = self.birth_date.strftime(DATE_FORMAT) if self.birth_date else "-"
        age = self.age_on(today) if self.birth_date else "-"
        return (
            f"ID: {self.id} | Name: {self.name} | Gender: {self.gender.value}"
            f" | Birthday: {birthday} | Age: {age} | Balance: {self.balance_amount}"
        )

    def __eq__(self, other: object) -> bool:
        if other is None or type(other) is not type(self):
            return NotImplemented
        return other.id == self.id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id}, name={self.name!r})"

    def __str__(self) -> str:
        return self.describe()


class Client(Person):
    """A registered gym member with a mailbox and joined sessions."""

    def __init__(self, person: Person):
        super().__init__(**person._role_kwargs())
        self.sessions: list["Session"] = []

    def add_session(self, session: "Session") -> None:
        self.sessions.append(session)


class Instructor(Person):
    """An employee certified for a set of session types, paid per session."""

    def __init__(self, person: Person, salary: int, session_types: list[SessionType]):
        super().__init__(**person._role_kwargs())
        self.salary = salary
        self.expertise: list[SessionType] = [SessionType(t) for t in session_types]
        self.sessions: list["Session"] = []

    def is_qualified_for(self, session_type: SessionType) -> bool:
        return session_type in self.expertise

    def add_session(self, session: "Session") -> None:
        self.sessions.append(session)

    def describe(self, today: date | None = None) -> str:
        certified = ", ".join(t.value for t in self.expertise)
        return (
            f"{super().describe(today)} | Role: Instructor"
            f" | Salary per Hour: {self.salary} | Certified Classes: {certified}"
        )
