"""
Enums for domain models.
Closed sets of session kinds, forum policies and enrollment outcomes.
"""

import enum
from typing import NamedTuple


class Gender(str, enum.Enum):
    """Gender as recorded at registration."""

    MALE = "Male"
    FEMALE = "Female"


class SessionPolicy(NamedTuple):
    capacity: int
    price: int


class SessionType(str, enum.Enum):
    """Session kinds offered by the gym. Each maps to a fixed policy."""

    PILATES = "Pilates"
    MACHINE_PILATES = "MachinePilates"
    THAI_BOXING = "ThaiBoxing"
    NINJA = "Ninja"

    @property
    def policy(self) -> SessionPolicy:
        return SESSION_POLICIES[self]

    @property
    def capacity(self) -> int:
        return self.policy.capacity

    @property
    def price(self) -> int:
        return self.policy.price


SESSION_POLICIES: dict[SessionType, SessionPolicy] = {
    SessionType.PILATES: SessionPolicy(capacity=30, price=60),
    SessionType.MACHINE_PILATES: SessionPolicy(capacity=10, price=80),
    SessionType.THAI_BOXING: SessionPolicy(capacity=20, price=100),
    SessionType.NINJA: SessionPolicy(capacity=5, price=150),
}


SENIOR_AGE = 65


class ForumType(str, enum.Enum):
    """Who may join a session."""

    OPEN = "Open"
    SENIORS = "Seniors"
    FEMALE = "Female"
    MALE = "Male"

    def admits(self, age: int, gender: Gender) -> bool:
        """Evaluate the forum's eligibility predicate."""
        if self is ForumType.SENIORS:
            return age >= SENIOR_AGE
        if self is ForumType.FEMALE:
            return gender == Gender.FEMALE
        if self is ForumType.MALE:
            return gender == Gender.MALE
        return True


class RejectionReason(str, enum.Enum):
    """Why an enrollment attempt was refused, in check order."""

    ALREADY_ENROLLED = "AlreadyEnrolled"
    NOT_REGISTERED = "NotRegisteredWithFacility"
    SESSION_FULL = "SessionFull"
    SESSION_NOT_UPCOMING = "SessionNotUpcoming"
    FORUM_INELIGIBLE = "ForumIneligible"
    INSUFFICIENT_FUNDS = "InsufficientFunds"
