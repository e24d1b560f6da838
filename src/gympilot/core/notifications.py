"""Notification fan-out to session rosters, daily participants or all clients."""

from typing import TYPE_CHECKING

from gympilot.core.logging import get_logger
from gympilot.core.validators import parse_date
from gympilot.models.person import Client
from gympilot.models.session import Session

if TYPE_CHECKING:
    from gympilot.models.gym import Gym

logger = get_logger(__name__)


class NotificationDispatcher:
    """Delivers messages to recipients picked from the gym's current state."""

    def __init__(self, gym: "Gym"):
        self.gym = gym

    def _deliver(self, recipients: list[Client], message: str) -> int:
        for client in recipients:
            client.receive(message)
        return len(recipients)

    def notify_session(self, session: Session, message: str) -> int:
        """Send message to everyone on session's roster. Returns deliveries made."""
        delivered = self._deliver(list(session.participants), message)
        self.gym.action_log.append(
            f"A message was sent to everyone registered for session {session.session_type.value}"
            f" on {session.date_time.isoformat(timespec='minutes')} : {message}"
        )
        logger.info("notification.sent", target="session", delivered=delivered)
        return delivered

    def notify_date(self, date_text: str, message: str) -> int:
        """Send message to participants of every session on a date ("dd-MM-yyyy").

        A client already holding this exact message is skipped, so someone in
        two sessions that day gets it once.

        Raises:
            MalformedScheduleError: If date_text isn't "dd-MM-yyyy"
        """
        target = parse_date(date_text)
        delivered = 0
        for session in self.gym.sessions:
            if session.date_time.date() != target:
                continue
            for client in session.participants:
                if message not in client.notifications:
                    client.receive(message)
                    delivered += 1
        self.gym.action_log.append(
            f"A message was sent to everyone registered for a session on {target.isoformat()} : {message}"
        )
        logger.info("notification.sent", target="date", date=target.isoformat(), delivered=delivered)
        return delivered

    def notify_all(self, message: str) -> int:
        """Send message to every registered client."""
        delivered = self._deliver(list(self.gym.clients), message)
        self.gym.action_log.append(f"A message was sent to all gym clients: {message}")
        logger.info("notification.sent", target="all", delivered=delivered)
        return delivered
