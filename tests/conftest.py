"""Shared pytest fixtures for teamdeck tests."""

import logging
import threading
from typing import Callable, List, Optional

import pytest

from teamdeck.exceptions import ClipboardWriteError


class FakeTimer:
    """Timer handle returned by FakeClock.schedule."""

    def __init__(self, due: float, callback: Callable[[], None]):
        self.due = due
        self.callback = callback
        self.stopped = False
        self.fired = False

    def stop(self) -> None:
        self.stopped = True


class FakeClock:
    """Manual clock with a set_timer-like ``schedule`` method."""

    def __init__(self) -> None:
        self.now = 0.0
        self.timers: List[FakeTimer] = []

    def schedule(self, delay: float, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(self.now + delay, callback)
        self.timers.append(timer)
        return timer

    def advance_to(self, when: float) -> None:
        """Move time forward to ``when``, firing live timers that come due."""
        for timer in sorted(self.timers, key=lambda t: t.due):
            if timer.due > when:
                break
            if timer.stopped or timer.fired:
                continue
            self.now = timer.due
            timer.fired = True
            timer.callback()
        self.now = when

    def advance(self, seconds: float) -> None:
        self.advance_to(self.now + seconds)

    @property
    def live_timers(self) -> List[FakeTimer]:
        return [t for t in self.timers if not t.stopped and not t.fired]


class FakeClipboard:
    """In-memory clipboard that can be told to fail."""

    name = "fake"
    blocking = False

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.writes: List[str] = []

    def write(self, text: str) -> None:
        if self.fail:
            raise ClipboardWriteError("Permission denied", backend=self.name)
        self.writes.append(text)

    @property
    def last(self) -> Optional[str]:
        return self.writes[-1] if self.writes else None


class BlockingFakeClipboard(FakeClipboard):
    """Clipboard that claims to block, like the system backend.

    ``write`` waits on ``release`` and records the thread it ran on.
    """

    name = "fake-blocking"
    blocking = True

    def __init__(self, fail: bool = False) -> None:
        super().__init__(fail=fail)
        self.release = threading.Event()
        self.release.set()
        self.thread_ids: List[int] = []

    def write(self, text: str) -> None:
        self.thread_ids.append(threading.get_ident())
        self.release.wait(timeout=5)
        super().write(text)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def clipboard():
    return FakeClipboard()


@pytest.fixture
def failing_clipboard():
    return FakeClipboard(fail=True)


@pytest.fixture
def blocking_clipboard():
    return BlockingFakeClipboard()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep config and log files out of the real ~/.config/teamdeck."""
    config_dir = tmp_path / "teamdeck"
    monkeypatch.setattr("teamdeck.config.ui_config.TEAMDECK_CONFIG_DIR", config_dir)
    monkeypatch.setattr("teamdeck.utils.logging.TEAMDECK_CONFIG_DIR", config_dir)
    for var in ("TEAMDECK_THEME", "TEAMDECK_CLIPBOARD", "TEAMDECK_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    return config_dir


@pytest.fixture(autouse=True)
def reset_teamdeck_logger():
    """Undo setup_logging() calls made by CLI tests."""
    yield
    logger = logging.getLogger("teamdeck")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
