"""Services used by the teamdeck UI and CLI.

- clipboard: terminal (OSC 52) and system clipboard backends
"""

from .clipboard import (
    ClipboardService,
    SystemClipboard,
    TerminalClipboard,
    create_clipboard,
)

__all__ = [
    "ClipboardService",
    "SystemClipboard",
    "TerminalClipboard",
    "create_clipboard",
]
