"""Textual application shell for teamdeck."""

import logging
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer

from ..config.constants import COPY_FEEDBACK_SECONDS, DEFAULT_THEME
from ..config.ui_config import set_theme
from ..services.clipboard import ClipboardService
from .agents_page import AgentsPage
from .themes import TEAMDECK_THEMES, next_theme, register_all_themes

logger = logging.getLogger(__name__)


class TeamdeckApp(App[None]):
    """Hosts the agents page. Theme cycling and quit are app-wide."""

    TITLE = "HIPAA Dev Team"

    BINDINGS = [
        Binding("t", "cycle_theme", "Theme"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        theme_name: str = DEFAULT_THEME,
        clipboard_mode: str = "auto",
        clipboard: Optional[ClipboardService] = None,
        feedback_delay: float = COPY_FEEDBACK_SECONDS,
    ) -> None:
        super().__init__()
        self._theme_name = theme_name
        self._clipboard_mode = clipboard_mode
        self._clipboard = clipboard
        self._feedback_delay = feedback_delay

    def compose(self) -> ComposeResult:
        yield AgentsPage(
            clipboard=self._clipboard,
            clipboard_mode=self._clipboard_mode,
            feedback_delay=self._feedback_delay,
        )
        yield Footer()

    def on_mount(self) -> None:
        register_all_themes(self)
        if self._theme_name in TEAMDECK_THEMES or self._theme_name in self.available_themes:
            self.theme = self._theme_name
        else:
            logger.warning("Unknown theme %r, using %s", self._theme_name, DEFAULT_THEME)
            self.theme = DEFAULT_THEME
        self.query_one(AgentsPage).focus()

    def action_cycle_theme(self) -> None:
        self.theme = next_theme(self.theme)
        set_theme(self.theme)
