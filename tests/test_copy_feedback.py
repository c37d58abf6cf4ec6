"""Tests for the copy-feedback controller."""

import logging

import pytest

from teamdeck.content import INSTALL_COMMAND
from teamdeck.ui.copy_feedback import CopyFeedbackController, CopyFeedbackState


def _controller(clock, clipboard, **kwargs):
    return CopyFeedbackController(clipboard, clock.schedule, delay=2.0, **kwargs)


class TestActivation:
    """State right after a trigger."""

    def test_starts_idle(self, clock, clipboard):
        controller = _controller(clock, clipboard)
        assert controller.state is CopyFeedbackState.IDLE
        assert not controller.has_pending_timer

    def test_trigger_copies_and_shows_confirmation(self, clock, clipboard):
        controller = _controller(clock, clipboard)
        controller.trigger_copy(INSTALL_COMMAND)
        assert clipboard.last == INSTALL_COMMAND
        assert controller.is_copied
        assert controller.has_pending_timer

    def test_dispatch_receives_clipboard_write(self, clock, clipboard):
        deferred = []
        controller = _controller(clock, clipboard, dispatch=deferred.append)
        controller.trigger_copy("hello")

        # State flips without waiting for the write
        assert controller.is_copied
        assert clipboard.writes == []

        deferred[0]()
        assert clipboard.writes == ["hello"]


class TestAutoRevert:
    """Timed revert to idle."""

    def test_reverts_after_delay(self, clock, clipboard):
        controller = _controller(clock, clipboard)
        controller.trigger_copy(INSTALL_COMMAND)

        clock.advance_to(1.999)
        assert controller.state is CopyFeedbackState.JUST_COPIED

        clock.advance_to(2.0)
        assert controller.state is CopyFeedbackState.IDLE
        assert not controller.has_pending_timer

    def test_stays_idle_long_after(self, clock, clipboard):
        controller = _controller(clock, clipboard)
        controller.trigger_copy(INSTALL_COMMAND)
        clock.advance_to(60.0)
        assert controller.state is CopyFeedbackState.IDLE

    def test_retrigger_supersedes_pending_revert(self, clock, clipboard):
        events = []
        controller = _controller(
            clock, clipboard, on_change=lambda state: events.append((clock.now, state))
        )

        controller.trigger_copy("s")
        clock.advance_to(0.5)
        controller.trigger_copy("s")

        clock.advance_to(2.0)
        assert controller.is_copied

        clock.advance_to(10.0)
        reverts = [t for t, state in events if state is CopyFeedbackState.IDLE]
        assert reverts == [pytest.approx(2.5)]
        assert len(clock.live_timers) == 0

    def test_at_most_one_live_timer(self, clock, clipboard):
        controller = _controller(clock, clipboard)
        for step in range(5):
            clock.advance_to(step * 0.3)
            controller.trigger_copy("s")
            assert len(clock.live_timers) == 1

    def test_stale_callback_is_ignored(self, clock, clipboard):
        """A superseded timer that fires anyway must not revert early."""
        controller = _controller(clock, clipboard)
        controller.trigger_copy("s")
        first = clock.timers[0]
        controller.trigger_copy("s")

        first.callback()
        assert controller.is_copied


class TestShutdown:
    """Teardown cancels the pending revert."""

    def test_shutdown_cancels_timer(self, clock, clipboard):
        changes = []
        controller = _controller(clock, clipboard, on_change=changes.append)
        controller.trigger_copy("s")
        controller.shutdown()

        assert clock.timers[0].stopped
        assert controller.state is CopyFeedbackState.IDLE
        assert not controller.has_pending_timer

        clock.advance_to(5.0)
        assert changes == [CopyFeedbackState.JUST_COPIED]


class TestClipboardFailure:
    """A failing clipboard never blocks the feedback."""

    def test_failure_still_shows_confirmation(self, clock, failing_clipboard, caplog):
        controller = _controller(clock, failing_clipboard)
        with caplog.at_level(logging.WARNING, logger="teamdeck.ui.copy_feedback"):
            controller.trigger_copy(INSTALL_COMMAND)

        assert controller.is_copied
        assert controller.failures == 1
        assert "Clipboard write failed" in caplog.text

        clock.advance_to(2.0)
        assert controller.state is CopyFeedbackState.IDLE
