# tests/test_announcer.py

from __future__ import annotations

import time

import pytest

from todo_engine.connectors.announcer import Announcer

from .fakes import FakeTimer


@pytest.fixture(autouse=True)
def _reset_fake_timers():
    FakeTimer.created.clear()
    yield
    FakeTimer.created.clear()


def test_announce_arms_a_timer_that_clears_the_message() -> None:
    ann = Announcer(1.2, timer_factory=FakeTimer)
    ann.announce("Added task: Buy milk")

    assert ann.message == "Added task: Buy milk"
    (timer,) = FakeTimer.created
    assert timer.started and timer.daemon
    assert timer.interval == 1.2

    timer.fire()
    assert ann.message == ""


def test_new_announcement_cancels_the_previous_timer() -> None:
    ann = Announcer(1.2, timer_factory=FakeTimer)
    ann.announce("first")
    ann.announce("second")

    old, new = FakeTimer.created
    assert old.cancelled is True
    assert new.cancelled is False

    # A stale expiry that raced the cancel must not wipe the newer message.
    old.fire()
    assert ann.message == "second"
    new.fire()
    assert ann.message == ""


def test_cancel_stops_timer_and_clears() -> None:
    ann = Announcer(1.2, timer_factory=FakeTimer)
    ann.announce("Edit cancelled")
    ann.cancel()

    (timer,) = FakeTimer.created
    assert timer.cancelled is True
    assert ann.message == ""
    timer.fire()
    assert ann.message == ""


def test_empty_announcement_arms_nothing() -> None:
    ann = Announcer(1.2, timer_factory=FakeTimer)
    ann.announce("")
    assert FakeTimer.created == []
    assert ann.message == ""


def test_real_timer_expires() -> None:
    ann = Announcer(0.01)
    ann.announce("short lived")
    deadline = time.monotonic() + 2.0
    while ann.message and time.monotonic() < deadline:
        time.sleep(0.01)
    assert ann.message == ""
