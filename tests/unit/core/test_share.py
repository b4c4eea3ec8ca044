"""Тесты действия "Поделиться" и центра уведомлений."""

from unittest.mock import MagicMock

import pytest

from brain_garden.core.notifications import NotificationCenter
from brain_garden.core.share import ShareLinkAction
from brain_garden.domain.events import UIEvent
from brain_garden.domain.notification import COPY_FAILED, LINK_COPIED, NotificationKind
from brain_garden.infrastructure import MemoryClipboard


@pytest.fixture
def notifications(scheduler) -> NotificationCenter:
    return NotificationCenter(scheduler, duration=3.0)


@pytest.fixture
def sharing(clipboard, notifications, location) -> ShareLinkAction:
    return ShareLinkAction(clipboard, notifications, location)


class TestNotificationCenter:
    """Тесты NotificationCenter."""

    def test_notify_is_active_until_timeout(self, notifications, scheduler):
        notification = notifications.notify("Hello")

        scheduler.advance(2.9)
        assert notifications.active == [notification]

        scheduler.advance(0.1)
        assert notifications.active == []
        assert notifications.history == [notification]

    def test_manual_dismiss_cancels_timer(self, notifications, scheduler):
        notification = notifications.notify("Hello")

        assert notifications.dismiss(notification.id) is notification
        assert scheduler.pending == []
        assert notifications.dismiss(notification.id) is None

    def test_ids_are_sequential(self, notifications):
        first = notifications.notify("one")
        second = notifications.notify("two")
        assert second.id == first.id + 1

    def test_listeners_receive_events(self, notifications, scheduler):
        listener = MagicMock()
        notifications.add_listener(listener)

        notification = notifications.notify("Hello", NotificationKind.ERROR)
        scheduler.advance(3.0)

        assert [c.args for c in listener.call_args_list] == [
            ("shown", notification),
            ("dismissed", notification),
        ]

    def test_failing_listener_is_isolated(self, notifications):
        notifications.add_listener(MagicMock(side_effect=RuntimeError("boom")))
        notification = notifications.notify("Hello")
        assert notifications.active == [notification]

    def test_clear(self, notifications, scheduler):
        notifications.notify("one")
        notifications.notify("two")

        notifications.clear()

        assert notifications.active == []
        assert scheduler.pending == []

    def test_duration_must_be_positive(self, scheduler):
        with pytest.raises(ValueError):
            NotificationCenter(scheduler, duration=0)


class TestShareLinkAction:
    """Тесты ShareLinkAction."""

    def test_build_url(self, sharing, alpha):
        assert sharing.build_url(alpha) == "https://garden.example/notes/x"

    def test_build_url_quotes_slug(self, sharing, note_factory):
        record = note_factory("hello world/1", "Odd")
        assert sharing.build_url(record) == "https://garden.example/notes/hello%20world%2F1"

    def test_success_copies_and_notifies_once(self, sharing, clipboard, notifications, scheduler, alpha):
        assert sharing.share(alpha) is True

        assert clipboard.writes == ["https://garden.example/notes/x"]
        assert [n.message for n in notifications.history] == [LINK_COPIED]
        assert notifications.active[0].kind is NotificationKind.SUCCESS

        scheduler.advance(3.0)
        assert notifications.active == []
        assert len(notifications.history) == 1

    def test_failure_reports_copy_failed(self, notifications, location, alpha):
        sharing = ShareLinkAction(MemoryClipboard(denied=True), notifications, location)

        assert sharing.share(alpha) is False

        [notification] = notifications.history
        assert notification.message == COPY_FAILED
        assert notification.kind is NotificationKind.ERROR

    def test_stops_event_propagation(self, sharing, alpha):
        event = UIEvent("click", "share")
        sharing.share(alpha, event)
        assert event.propagation_stopped

    def test_stops_propagation_even_on_failure(self, notifications, location, alpha):
        sharing = ShareLinkAction(MemoryClipboard(denied=True), notifications, location)
        event = UIEvent()

        sharing.share(alpha, event)

        assert event.propagation_stopped

    def test_custom_base_path(self, clipboard, notifications, location, alpha):
        sharing = ShareLinkAction(clipboard, notifications, location, base_path="/garden/")
        assert sharing.build_url(alpha) == "https://garden.example/garden/x"
