"""Tests for notification dispatch."""

import pytest

from gympilot.core.errors import MalformedScheduleError
from gympilot.core.notifications import NotificationDispatcher
from tests.factories import FUTURE_DATE, ClientFactory, SessionFactory


@pytest.fixture
def dispatcher(gym) -> NotificationDispatcher:
    return NotificationDispatcher(gym)


@pytest.fixture
def same_day_sessions(gym, secretary, instructor):
    """Two sessions on FUTURE_DATE and one the next day."""
    morning = SessionFactory.create(gym, instructor, schedule=f"{FUTURE_DATE} 08:00")
    evening = SessionFactory.create(gym, instructor, schedule=f"{FUTURE_DATE} 19:00")
    next_day = SessionFactory.create(gym, instructor, schedule="21-02-2025 08:00")
    return morning, evening, next_day


class TestNotifySession:
    def test_delivers_to_roster_only(self, gym, secretary, dispatcher, instructor):
        session = SessionFactory.create(gym, instructor)
        on_roster = ClientFactory.create(gym)
        bystander = ClientFactory.create(gym)
        secretary.register_client_to_lesson(on_roster, session)

        delivered = dispatcher.notify_session(session, "Bring a mat")

        assert delivered == 1
        assert on_roster.notifications == ["Bring a mat"]
        assert bystander.notifications == []
        assert gym.action_log[-1] == (
            "A message was sent to everyone registered for session Pilates"
            " on 2025-02-20T18:00 : Bring a mat"
        )

    def test_repeats_are_delivered(self, gym, secretary, dispatcher, instructor):
        session = SessionFactory.create(gym, instructor)
        member = ClientFactory.create(gym)
        secretary.register_client_to_lesson(member, session)

        dispatcher.notify_session(session, "Reminder")
        dispatcher.notify_session(session, "Reminder")

        assert member.notifications == ["Reminder", "Reminder"]

    def test_empty_roster_still_logged(self, gym, dispatcher, instructor):
        session = SessionFactory.create(gym, instructor)
        log_size = len(gym.action_log)

        assert dispatcher.notify_session(session, "Nobody home") == 0
        assert len(gym.action_log) == log_size + 1


class TestNotifyDate:
    def test_participant_in_two_sessions_gets_one_copy(self, gym, secretary, dispatcher, same_day_sessions):
        morning, evening, _ = same_day_sessions
        member = ClientFactory.create(gym, balance=500)
        secretary.register_client_to_lesson(member, morning)
        secretary.register_client_to_lesson(member, evening)

        delivered = dispatcher.notify_date(FUTURE_DATE, "Pool closed")

        assert delivered == 1
        assert member.notifications == ["Pool closed"]
        assert gym.action_log[-1] == (
            "A message was sent to everyone registered for a session on 2025-02-20 : Pool closed"
        )

    def test_skips_clients_who_already_have_message(self, gym, secretary, dispatcher, same_day_sessions):
        morning, _, _ = same_day_sessions
        member = ClientFactory.create(gym, balance=500)
        secretary.register_client_to_lesson(member, morning)
        member.receive("Pool closed")

        assert dispatcher.notify_date(FUTURE_DATE, "Pool closed") == 0
        assert member.notifications == ["Pool closed"]

    def test_other_dates_untouched(self, gym, secretary, dispatcher, same_day_sessions):
        morning, _, next_day = same_day_sessions
        today_member = ClientFactory.create(gym, balance=500)
        tomorrow_member = ClientFactory.create(gym, balance=500)
        secretary.register_client_to_lesson(today_member, morning)
        secretary.register_client_to_lesson(tomorrow_member, next_day)

        dispatcher.notify_date(FUTURE_DATE, "Pool closed")

        assert today_member.notifications == ["Pool closed"]
        assert tomorrow_member.notifications == []

    def test_malformed_date_rejected(self, dispatcher):
        with pytest.raises(MalformedScheduleError):
            dispatcher.notify_date("2025-02-20", "Pool closed")


class TestNotifyAll:
    def test_every_registered_client_notified(self, gym, secretary, dispatcher):
        members = [ClientFactory.create(gym) for _ in range(3)]
        members[0].receive("Holiday hours")

        assert dispatcher.notify_all("Holiday hours") == 3
        assert members[0].notifications == ["Holiday hours", "Holiday hours"]
        assert all(m.notifications[-1] == "Holiday hours" for m in members)
        assert gym.action_log[-1] == "A message was sent to all gym clients: Holiday hours"

    def test_unregistered_clients_skipped(self, gym, secretary, dispatcher):
        leaving = ClientFactory.create(gym)
        staying = ClientFactory.create(gym)
        secretary.unregister_client(leaving)

        dispatcher.notify_all("Welcome")

        assert leaving.notifications == []
        assert staying.notifications == ["Welcome"]
