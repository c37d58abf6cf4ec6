"""
Copy-to-clipboard feedback.

``trigger_copy`` writes to the clipboard, flips the state to JUST_COPIED
and arms a one-shot timer that flips it back to IDLE. Re-triggering
while the timer is pending stops the old timer and arms a fresh one, so
only the latest trigger decides when the revert happens.

The timer is created through a ``schedule(delay, callback)`` callable that
returns something with ``stop()``. In the app that is ``Widget.set_timer``;
tests pass a manual clock.
"""

import logging
from enum import Enum
from typing import Callable, Optional, Protocol

from ..config.constants import COPY_FEEDBACK_SECONDS
from ..exceptions import ClipboardWriteError
from ..services.clipboard import ClipboardService

logger = logging.getLogger(__name__)


class CopyFeedbackState(str, Enum):
    IDLE = "idle"
    JUST_COPIED = "just_copied"


class TimerHandle(Protocol):
    def stop(self) -> None: ...


Scheduler = Callable[[float, Callable[[], None]], TimerHandle]
Dispatcher = Callable[[Callable[[], None]], None]
StateListener = Callable[[CopyFeedbackState], None]


def _call_now(fn: Callable[[], None]) -> None:
    fn()


class CopyFeedbackController:
    """Owns the copied flag and its revert timer."""

    def __init__(
        self,
        clipboard: ClipboardService,
        schedule: Scheduler,
        *,
        delay: float = COPY_FEEDBACK_SECONDS,
        dispatch: Optional[Dispatcher] = None,
        on_change: Optional[StateListener] = None,
    ) -> None:
        self._clipboard = clipboard
        self._schedule = schedule
        self._delay = delay
        self._dispatch = dispatch or _call_now
        self._on_change = on_change
        self._state = CopyFeedbackState.IDLE
        self._timer: Optional[TimerHandle] = None
        # Bumped on every arm/cancel; a callback from an older arm is ignored
        self._generation = 0
        # Diagnostics only, never drives state. Blocking backends bump it
        # from a worker thread, so the count may lag the button label.
        self.failures = 0

    @property
    def state(self) -> CopyFeedbackState:
        return self._state

    @property
    def is_copied(self) -> bool:
        return self._state is CopyFeedbackState.JUST_COPIED

    @property
    def has_pending_timer(self) -> bool:
        return self._timer is not None

    def trigger_copy(self, text: str) -> None:
        """Copy ``text`` and show the confirmation for ``delay`` seconds."""
        self._dispatch(lambda: self._write_clipboard(text))

        self._cancel_timer()
        generation = self._generation
        self._set_state(CopyFeedbackState.JUST_COPIED)
        self._timer = self._schedule(self._delay, lambda: self._expire(generation))

    def shutdown(self) -> None:
        """Cancel any pending revert. Called when the owning view goes away."""
        self._cancel_timer()
        self._state = CopyFeedbackState.IDLE

    def _write_clipboard(self, text: str) -> None:
        try:
            self._clipboard.write(text)
        except ClipboardWriteError as e:
            self.failures += 1
            logger.warning("Clipboard write failed via %s: %s", self._clipboard.name, e)

    def _cancel_timer(self) -> None:
        self._generation += 1
        if self._timer is not None:
            self._timer.stop()
            self._timer = None

    def _expire(self, generation: int) -> None:
        if generation != self._generation:
            logger.debug("Ignoring superseded copy-feedback timer")
            return
        self._timer = None
        self._set_state(CopyFeedbackState.IDLE)

    def _set_state(self, state: CopyFeedbackState) -> None:
        if state is self._state:
            return
        self._state = state
        if self._on_change is not None:
            self._on_change(state)
