"""Clipboard backends.

- TerminalClipboard: asks the terminal to set the clipboard via Textual's
  ``App.copy_to_clipboard`` (OSC 52). Works over SSH, never blocks.
- SystemClipboard: pipes text into the first available system tool
  (pbcopy, wl-copy, xclip, xsel). Blocking, so the UI runs it in a worker.

Backends raise ClipboardWriteError on failure; callers decide what to do
with it.
"""

import logging
import shutil
import subprocess
from typing import Any, Optional, Protocol, Sequence

from ..config.constants import CLIPBOARD_TIMEOUT_SECONDS
from ..exceptions import ClipboardUnavailableError, ClipboardWriteError

logger = logging.getLogger(__name__)

# (executable, argv) in preference order
SYSTEM_CLIPBOARD_COMMANDS: tuple[tuple[str, list[str]], ...] = (
    ("pbcopy", ["pbcopy"]),
    ("wl-copy", ["wl-copy"]),
    ("xclip", ["xclip", "-selection", "clipboard"]),
    ("xsel", ["xsel", "--clipboard", "--input"]),
)


class ClipboardService(Protocol):
    """Protocol for clipboard backends."""

    name: str
    blocking: bool

    def write(self, text: str) -> None:
        """Put ``text`` on the clipboard.

        Raises:
            ClipboardWriteError: if the backend could not store the text
        """
        ...


class TerminalClipboard:
    """Copy through the terminal using the running Textual app."""

    name = "terminal"
    blocking = False

    def __init__(self, app: Any) -> None:
        self._app = app

    def write(self, text: str) -> None:
        try:
            self._app.copy_to_clipboard(text)
        except Exception as e:
            raise ClipboardWriteError(str(e) or "Terminal clipboard write failed", backend=self.name) from e


class SystemClipboard:
    """Copy through an OS clipboard tool."""

    name = "system"
    blocking = True

    def __init__(
        self,
        commands: Sequence[tuple[str, list[str]]] = SYSTEM_CLIPBOARD_COMMANDS,
        timeout: float = CLIPBOARD_TIMEOUT_SECONDS,
    ) -> None:
        self._commands = tuple(commands)
        self._timeout = timeout

    def available_command(self) -> Optional[list[str]]:
        """Return argv of the first installed clipboard tool, if any."""
        for executable, argv in self._commands:
            if shutil.which(executable):
                return argv
        return None

    @property
    def is_available(self) -> bool:
        return self.available_command() is not None

    def write(self, text: str) -> None:
        argv = self.available_command()
        if argv is None:
            tried = ", ".join(executable for executable, _ in self._commands)
            raise ClipboardWriteError(f"No clipboard tool available (tried {tried})", backend=self.name)

        try:
            subprocess.run(
                argv,
                input=text.encode("utf-8"),
                check=True,
                capture_output=True,
                timeout=self._timeout,
            )
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.decode("utf-8", "replace") if e.stderr else None
            raise ClipboardWriteError(f"{argv[0]} exited with {e.returncode}", backend=argv[0], stderr=stderr) from e
        except subprocess.TimeoutExpired as e:
            raise ClipboardWriteError(f"{argv[0]} timed out after {self._timeout}s", backend=argv[0]) from e
        except OSError as e:
            raise ClipboardWriteError(str(e), backend=argv[0]) from e

        logger.debug("Copied %d chars with %s", len(text), argv[0])


def create_clipboard(mode: str, app: Any = None) -> ClipboardService:
    """Build the clipboard backend for ``mode`` ("auto", "terminal", "system").

    ``auto`` prefers a system tool and falls back to the terminal when an app
    is available.

    Raises:
        ClipboardUnavailableError: when the mode cannot be satisfied
    """
    if mode == "system":
        return SystemClipboard()
    if mode == "terminal":
        if app is None:
            raise ClipboardUnavailableError("Terminal clipboard needs a running app", mode=mode)
        return TerminalClipboard(app)
    if mode == "auto":
        system = SystemClipboard()
        if system.is_available:
            return system
        if app is not None:
            return TerminalClipboard(app)
        raise ClipboardUnavailableError(mode=mode)
    raise ClipboardUnavailableError(f"Unknown clipboard mode '{mode}'", mode=mode)
