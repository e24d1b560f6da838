"""Tests for session enrollment eligibility and its side effects."""

import pytest

from gympilot.core.enrollment import EnrollmentEngine, EnrollmentOutcome
from gympilot.core.errors import ClientNotRegisteredError
from gympilot.models import Client, ForumType, Gender, RejectionReason, SessionType
from tests.factories import (
    PAST_SCHEDULE,
    ClientFactory,
    PersonFactory,
    SessionFactory,
)


@pytest.fixture
def engine(gym) -> EnrollmentEngine:
    return EnrollmentEngine(gym)


@pytest.fixture
def pilates(gym, instructor):
    return SessionFactory.create(gym, instructor, SessionType.PILATES)


class TestEnrollmentScenarios:
    """End-to-end enrollment scenarios."""

    def test_successful_enrollment_moves_money(self, gym, engine, pilates):
        member = ClientFactory.create(gym, name="Dana", age=20, balance=100)
        gym_balance = gym.balance

        outcome = engine.enroll(member, pilates)

        assert outcome == EnrollmentOutcome.success()
        assert outcome.enrolled
        assert member.balance_amount == 40
        assert gym.balance == gym_balance + 60
        assert pilates.participants == [member]
        assert member.sessions == [pilates]
        assert gym.action_log[-1] == (
            "Registered client: Dana to session: Pilates on 2025-02-20T18:00 for price: 60"
        )

    def test_insufficient_funds_changes_nothing(self, gym, engine, pilates):
        member = ClientFactory.create(gym, age=20, balance=50)
        gym_balance = gym.balance

        outcome = engine.enroll(member, pilates)

        assert outcome.reason is RejectionReason.INSUFFICIENT_FUNDS
        assert not outcome.enrolled
        assert member.balance_amount == 50
        assert gym.balance == gym_balance
        assert pilates.participants == []
        assert gym.action_log[-1] == "Failed registration: Client doesn't have enough balance"

    def test_balance_equal_to_price_is_accepted(self, gym, engine, pilates):
        member = ClientFactory.create(gym, balance=60)

        assert engine.enroll(member, pilates).enrolled
        assert member.balance_amount == 0

    def test_seniors_session_rejects_younger_client(self, gym, engine, instructor):
        session = SessionFactory.create(gym, instructor, forum=ForumType.SENIORS)
        member = ClientFactory.create(gym, age=40, balance=500)

        outcome = engine.enroll(member, session)

        assert outcome.reason is RejectionReason.FORUM_INELIGIBLE
        assert gym.action_log[-1] == (
            "Failed registration: Client doesn't meet the age requirements for this session (Seniors)"
        )

    def test_seniors_session_accepts_65(self, gym, engine, instructor):
        session = SessionFactory.create(gym, instructor, forum=ForumType.SENIORS)
        member = ClientFactory.create(gym, age=65, balance=500)

        assert engine.enroll(member, session).enrolled

    @pytest.mark.parametrize(
        "forum,gender,allowed",
        [
            (ForumType.FEMALE, Gender.FEMALE, True),
            (ForumType.FEMALE, Gender.MALE, False),
            (ForumType.MALE, Gender.MALE, True),
            (ForumType.MALE, Gender.FEMALE, False),
            (ForumType.OPEN, Gender.MALE, True),
        ],
    )
    def test_gender_forums(self, gym, engine, instructor, forum, gender, allowed):
        session = SessionFactory.create(gym, instructor, forum=forum)
        member = ClientFactory.create(gym, gender=gender, balance=500)

        outcome = engine.enroll(member, session)

        assert outcome.enrolled is allowed
        if not allowed:
            assert outcome.reason is RejectionReason.FORUM_INELIGIBLE
            assert "gender" in gym.action_log[-1]

    def test_full_session_rejects_eligible_client(self, gym, engine, pilates):
        for _ in range(pilates.capacity):
            assert engine.enroll(ClientFactory.create(gym, balance=100), pilates).enrolled
        latecomer = ClientFactory.create(gym, balance=1000)

        outcome = engine.enroll(latecomer, pilates)

        assert outcome.reason is RejectionReason.SESSION_FULL
        assert len(pilates.participants) == 30
        assert latecomer.balance_amount == 1000

    def test_past_session_rejected(self, gym, engine, instructor):
        session = SessionFactory.create(gym, instructor, schedule=PAST_SCHEDULE)
        member = ClientFactory.create(gym, balance=100)

        outcome = engine.enroll(member, session)

        assert outcome.reason is RejectionReason.SESSION_NOT_UPCOMING
        assert gym.action_log[-1] == "Failed registration: Session is not in the future"

    def test_session_at_exactly_now_is_not_upcoming(self, gym, engine, instructor):
        session = SessionFactory.create(gym, instructor, schedule="15-01-2025 10:00")
        member = ClientFactory.create(gym, balance=100)

        assert engine.enroll(member, session).reason is RejectionReason.SESSION_NOT_UPCOMING


class TestCheckOrdering:
    """The first failing check decides the outcome."""

    def test_already_enrolled_wins_over_everything(self, gym, engine, pilates):
        member = ClientFactory.create(gym, balance=60)
        assert engine.enroll(member, pilates).enrolled
        # Now broke as well as already enrolled
        outcome = engine.enroll(member, pilates)

        assert outcome.reason is RejectionReason.ALREADY_ENROLLED
        assert pilates.participants == [member]
        assert gym.action_log[-1] == "Failed registration: Client is already registered for this session"

    def test_already_enrolled_checked_before_registration(self, gym, engine, pilates):
        member = ClientFactory.create(gym, balance=100)
        engine.enroll(member, pilates)
        gym.clients.remove(member)

        assert engine.enroll(member, pilates).reason is RejectionReason.ALREADY_ENROLLED

    def test_unregistered_client_rejected(self, gym, engine, pilates):
        outsider = Client(PersonFactory.create(balance=1000))
        log_size = len(gym.action_log)

        outcome = engine.enroll(outsider, pilates)

        assert outcome.reason is RejectionReason.NOT_REGISTERED
        assert len(gym.action_log) == log_size + 1
        assert outsider.balance_amount == 1000

    def test_soft_failures_all_logged_first_reported(self, gym, engine, instructor):
        session = SessionFactory.create(
            gym, instructor, SessionType.NINJA, schedule=PAST_SCHEDULE, forum=ForumType.SENIORS
        )
        member = ClientFactory.create(gym, age=30, balance=10)
        log_size = len(gym.action_log)

        outcome = engine.enroll(member, session)

        assert outcome.reason is RejectionReason.SESSION_NOT_UPCOMING
        new_lines = gym.action_log.snapshot()[log_size:]
        assert new_lines == (
            "Failed registration: Session is not in the future",
            "Failed registration: Client doesn't meet the age requirements for this session (Seniors)",
            "Failed registration: Client doesn't have enough balance",
        )

    def test_full_reported_before_funds(self, gym, engine, instructor):
        session = SessionFactory.create(gym, instructor, SessionType.NINJA)
        for _ in range(5):
            engine.enroll(ClientFactory.create(gym, balance=150), session)

        outcome = engine.enroll(ClientFactory.create(gym, balance=0), session)

        assert outcome.reason is RejectionReason.SESSION_FULL

    def test_roster_never_exceeds_capacity(self, gym, engine, instructor):
        session = SessionFactory.create(gym, instructor, SessionType.MACHINE_PILATES)
        for _ in range(15):
            engine.enroll(ClientFactory.create(gym, balance=80), session)
            assert len(session.participants) <= session.capacity


class TestUnenroll:
    """Removing a client from the gym."""

    def test_removes_client_everywhere(self, gym, engine, instructor):
        morning = SessionFactory.create(gym, instructor, schedule="20-02-2025 08:00")
        evening = SessionFactory.create(gym, instructor, schedule="20-02-2025 18:00")
        member = ClientFactory.create(gym, name="Noa", balance=200)
        other = ClientFactory.create(gym, balance=200)
        engine.enroll(member, morning)
        engine.enroll(member, evening)
        engine.enroll(other, evening)

        engine.unenroll(member)

        assert member not in gym.clients
        assert morning.participants == []
        assert evening.participants == [other]
        assert member.balance_amount == 80
        assert gym.action_log[-1] == "Unregistered client: Noa"

    def test_second_unenroll_fails(self, gym, secretary, engine):
        member = ClientFactory.create(gym)
        engine.unenroll(member)

        with pytest.raises(ClientNotRegisteredError) as exc_info:
            engine.unenroll(member)

        assert exc_info.value.code == "CLIENT_NOT_REGISTERED"
        assert exc_info.value.status_code == 404

    def test_unenrolled_client_cannot_enroll(self, gym, engine, pilates):
        member = ClientFactory.create(gym)
        engine.unenroll(member)

        assert engine.enroll(member, pilates).reason is RejectionReason.NOT_REGISTERED
