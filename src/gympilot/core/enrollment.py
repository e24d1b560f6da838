# File: src/gympilot/core/enrollment.py
"""Session enrollment: eligibility checks, payment and roster updates."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from gympilot.core.errors import ClientNotRegisteredError
from gympilot.core.logging import get_logger
from gympilot.models.enums import ForumType, RejectionReason
from gympilot.models.person import Client
from gympilot.models.session import Session

if TYPE_CHECKING:
    from gympilot.models.gym import Gym

logger = get_logger(__name__)


@dataclass(frozen=True)
class EnrollmentOutcome:
    """Result of one enrollment attempt. reason is None when enrolled."""

    reason: RejectionReason | None = None

    @property
    def enrolled(self) -> bool:
        return self.reason is None

    @classmethod
    def success(cls) -> "EnrollmentOutcome":
        return cls()

    @classmethod
    def rejected(cls, reason: RejectionReason) -> "EnrollmentOutcome":
        return cls(reason=reason)


FAILURE_MESSAGES: dict[RejectionReason, str] = {
    RejectionReason.ALREADY_ENROLLED: "Failed registration: Client is already registered for this session",
    RejectionReason.NOT_REGISTERED: "Failed registration: Client is not registered with the gym",
    RejectionReason.SESSION_FULL: "Failed registration: No available spots for session",
    RejectionReason.SESSION_NOT_UPCOMING: "Failed registration: Session is not in the future",
    RejectionReason.FORUM_INELIGIBLE: "Failed registration: Client's gender doesn't match the session's gender requirements",
    RejectionReason.INSUFFICIENT_FUNDS: "Failed registration: Client doesn't have enough balance",
}

SENIORS_FAILURE_MESSAGE = (
    "Failed registration: Client doesn't meet the age requirements for this session (Seniors)"
)


class EnrollmentEngine:
    """Decides whether a client may join a session and performs the transfer.

    Check order:
        1. already on the roster          (hard, stops here)
        2. not registered with the gym    (hard, stops here)
        3. session full                   (soft)
        4. session not in the future      (soft)
        5. forum policy not met           (soft)
        6. balance below price            (soft)

    Every failing soft check writes its own action-log line. The outcome
    carries the first failure. Nothing is mutated unless all checks pass.
    """

    def __init__(self, gym: "Gym"):
        self.gym = gym

    def _reject(self, reason: RejectionReason, client: Client, session: Session) -> None:
        if reason is RejectionReason.FORUM_INELIGIBLE and session.forum is ForumType.SENIORS:
            self.gym.action_log.append(SENIORS_FAILURE_MESSAGE)
        else:
            self.gym.action_log.append(FAILURE_MESSAGES[reason])
        logger.info(
            "enrollment.rejected",
            client_id=client.id,
            session_type=session.session_type.value,
            reason=reason.value,
        )

    def _soft_failures(self, client: Client, session: Session) -> list[RejectionReason]:
        now = self.gym.now()
        failures = []
        if len(session.participants) >= session.capacity:
            failures.append(RejectionReason.SESSION_FULL)
        if not session.is_upcoming(now):
            failures.append(RejectionReason.SESSION_NOT_UPCOMING)
        if not session.forum.admits(client.age_on(now.date()), client.gender):
            failures.append(RejectionReason.FORUM_INELIGIBLE)
        if client.balance_amount - session.price < 0:
            failures.append(RejectionReason.INSUFFICIENT_FUNDS)
        return failures

    def enroll(self, client: Client, session: Session) -> EnrollmentOutcome:
        """Try to put client on session's roster, charging the session price."""
        if session.has_participant(client):
            self._reject(RejectionReason.ALREADY_ENROLLED, client, session)
            return EnrollmentOutcome.rejected(RejectionReason.ALREADY_ENROLLED)

        if not self.gym.is_registered(client):
            self._reject(RejectionReason.NOT_REGISTERED, client, session)
            return EnrollmentOutcome.rejected(RejectionReason.NOT_REGISTERED)

        failures = self._soft_failures(client, session)
        if failures:
            for reason in failures:
                self._reject(reason, client, session)
            return EnrollmentOutcome.rejected(failures[0])

        session.add_participant(client)
        client.add_session(session)
        client.balance.debit(session.price)
        self.gym.credit(session.price)
        self.gym.action_log.append(
            f"Registered client: {client.name} to session: {session.session_type.value}"
            f" on {session.date_time.isoformat(timespec='minutes')} for price: {session.price}"
        )
        logger.info(
            "enrollment.completed",
            client_id=client.id,
            session_type=session.session_type.value,
            price=session.price,
            client_balance=client.balance_amount,
            gym_balance=self.gym.balance,
        )
        return EnrollmentOutcome.success()

    def unenroll(self, client: Client) -> None:
        """Remove a client from the gym and every roster they are on. No refund.

        Raises:
            ClientNotRegisteredError: If the client isn't registered
        """
        if not self.gym.is_registered(client):
            raise ClientNotRegisteredError(
                client.id, "Error: Registration is required before attempting to unregister"
            )

        self.gym.clients.remove(client)
        removed_from = sum(1 for s in self.gym.sessions if s.remove_participant(client))
        client.sessions.clear()
        self.gym.action_log.append(f"Unregistered client: {client.name}")
        logger.info("client.unregistered", client_id=client.id, sessions_left=removed_from)
