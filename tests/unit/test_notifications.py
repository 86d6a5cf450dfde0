"""
Unit tests for application/notifications.py
"""

import logging

import pytest

from application.notifications import NotificationCenter
from domain.models import Severity
from tests.fakes import FakeClock


@pytest.mark.unit
class TestNotificationCenter:
    def test_push_order_and_severity(self, notifications):
        notifications.success("Saved")
        notifications.error("Failed")

        active = notifications.active()
        assert [n.message for n in active] == ["Saved", "Failed"]
        assert [n.severity for n in active] == [Severity.SUCCESS, Severity.ERROR]
        assert active[0].id != active[1].id

    def test_auto_dismiss_after_ttl(self, notifications, clock):
        notifications.info("Hello")
        clock.advance(1.9)
        assert len(notifications.active()) == 1
        clock.advance(0.5)
        assert notifications.active() == []

    def test_only_expired_notifications_removed(self, notifications, clock):
        notifications.info("old")
        clock.advance(1.5)
        notifications.info("new")
        clock.advance(0.5)
        assert [n.message for n in notifications.active()] == ["new"]

    def test_latest(self, notifications, clock):
        assert notifications.latest() is None
        notifications.warning("first")
        notifications.warning("second")
        assert notifications.latest().message == "second"
        clock.advance(5)
        assert notifications.latest() is None

    def test_dismiss(self, notifications):
        note = notifications.success("Saved")
        assert notifications.dismiss(note.id) is True
        assert notifications.dismiss(note.id) is False
        assert notifications.active() == []

    def test_clear(self, notifications):
        notifications.success("a")
        notifications.error("b")
        notifications.clear()
        assert notifications.active() == []

    def test_queue_is_bounded(self):
        center = NotificationCenter(ttl_seconds=60, clock=FakeClock(), max_queued=3)
        for i in range(5):
            center.info(str(i))
        assert [n.message for n in center.active()] == ["2", "3", "4"]

    def test_notifications_are_logged(self, notifications, caplog):
        with caplog.at_level(logging.INFO, logger="application.notifications"):
            notifications.error("Cannot fetch workouts.")
        assert any(
            r.levelno == logging.ERROR and "Cannot fetch workouts." in r.getMessage()
            for r in caplog.records
        )
