"""Tests for transient notifications."""

import threading

from monthcal.notification import Notifier


def test_show_and_expire(notifier, clock):
    """Test a message is visible until the delay elapses."""
    notifier.show("Event added")
    assert notifier.message == "Event added"
    clock.advance(2.9)
    assert notifier.message == "Event added"
    clock.advance(0.1)
    assert notifier.message is None


def test_new_message_overwrites_and_restarts_delay(notifier, clock):
    """Test the slot holds only the latest message with a fresh delay."""
    notifier.show("Event added")
    clock.advance(2.0)
    notifier.show("Event deleted")
    assert notifier.message == "Event deleted"
    clock.advance(2.0)
    assert notifier.message == "Event deleted"
    clock.advance(1.0)
    assert notifier.message is None


def test_dismiss(notifier):
    """Test dismiss clears immediately."""
    notifier.show("Event added")
    notifier.dismiss()
    assert notifier.current is None


def test_notification_expiry_time(notifier, clock):
    """Test the stored expiry is show time plus delay."""
    notification = notifier.show("Event added")
    assert notification.expires_at == clock.now + 3.0


def test_timer_clears_slot():
    """Test the background timer clears the message after the delay."""
    notifier = Notifier(delay=0.2)
    notifier.show("Event added")
    timer = notifier._timer
    assert isinstance(timer, threading.Timer)
    timer.join(timeout=5)
    assert notifier._current is None
    assert notifier.message is None


def test_timer_does_not_clear_newer_message():
    """Test a stale timer leaves a newer message alone."""
    notifier = Notifier(delay=60)
    first = notifier.show("Event added")
    notifier.show("Event updated")
    notifier._expire(first)
    assert notifier.message == "Event updated"
    notifier.close()
    assert notifier.message is None
