"""
The agents page: hero, agent grid, slash commands and tech stack.

The page owns the two pieces of interactive state:

- SelectionController: which agent card is expanded
- CopyFeedbackController: whether the copy button says "Copied!"

Cards and buttons only post messages. The page applies the transition
and then re-renders from controller state.
"""

import logging
import webbrowser
from typing import Callable, Optional, Sequence

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, Static

from .. import content
from ..config.constants import COPY_FEEDBACK_SECONDS, COPY_LABEL_COPIED, COPY_LABEL_IDLE
from ..models.catalog import CatalogEntry, CommandEntry
from ..services.clipboard import ClipboardService, create_clipboard
from .copy_feedback import CopyFeedbackController, CopyFeedbackState
from .selection import SelectionController
from .widgets import AgentCard

logger = logging.getLogger(__name__)


def copy_button_label(state: CopyFeedbackState) -> str:
    """Label for the copy button in the given feedback state."""
    return COPY_LABEL_COPIED if state is CopyFeedbackState.JUST_COPIED else COPY_LABEL_IDLE


class AgentsPage(VerticalScroll):
    """Single page view for the plugin catalog."""

    DEFAULT_CSS = """
    AgentsPage {
        background: $background;
        padding: 1 2;
    }

    AgentsPage .badge {
        width: 100%;
        content-align: center middle;
        color: $accent;
        text-style: bold;
    }

    AgentsPage .headline {
        width: 100%;
        content-align: center middle;
        text-style: bold;
        margin-top: 1;
    }

    AgentsPage .subheadline {
        width: 100%;
        content-align: center middle;
        color: $accent;
        text-style: bold;
    }

    AgentsPage .tagline {
        width: 100%;
        content-align: center middle;
        color: $text-muted;
        margin: 1 4;
    }

    AgentsPage #hero-actions {
        height: auto;
        align: center middle;
    }

    AgentsPage #hero-actions Button {
        margin: 0 1;
    }

    AgentsPage #install-command {
        background: $panel;
        color: $accent;
        padding: 0 2;
        margin: 1 0;
    }

    AgentsPage .section-title {
        width: 100%;
        content-align: center middle;
        text-style: bold;
        margin: 2 0 1 0;
    }

    AgentsPage #agent-grid {
        height: auto;
    }

    AgentsPage .command-row {
        background: $surface;
        padding: 0 2;
        margin-bottom: 1;
    }

    AgentsPage #tech-stack {
        background: $panel;
        padding: 1 2;
    }
    """

    BINDINGS = [
        Binding("c", "copy_install", "Copy install"),
        Binding("d", "download", "Download"),
        Binding("escape", "collapse", "Collapse", show=False),
    ]

    def __init__(
        self,
        *,
        clipboard: Optional[ClipboardService] = None,
        clipboard_mode: str = "auto",
        feedback_delay: float = COPY_FEEDBACK_SECONDS,
        agents: Sequence[CatalogEntry] = content.AGENTS,
        commands: Sequence[CommandEntry] = content.COMMANDS,
        tech_stack: Sequence[str] = content.TECH_STACK,
        install_command: str = content.INSTALL_COMMAND,
        download_url: str = content.DOWNLOAD_URL,
        id: Optional[str] = "agents-page",
    ) -> None:
        super().__init__(id=id)
        self.agents = tuple(agents)
        self.commands = tuple(commands)
        self.tech_stack = tuple(tech_stack)
        self.install_command = install_command
        self.download_url = download_url
        self.feedback_delay = feedback_delay
        self._clipboard = clipboard
        self._clipboard_mode = clipboard_mode
        self.agent_selection = SelectionController()
        self.copy_feedback: Optional[CopyFeedbackController] = None

    def compose(self) -> ComposeResult:
        yield Static(content.BADGE, classes="badge")
        yield Static(content.HEADLINE, classes="headline")
        yield Static(content.SUBHEADLINE, classes="subheadline")
        yield Static(content.TAGLINE, classes="tagline")
        with Horizontal(id="hero-actions"):
            yield Button("Download Plugin", id="download-button", variant="primary")
            yield Button(COPY_LABEL_IDLE, id="copy-button")
        yield Static(Text(self.install_command), id="install-command")

        yield Static("Meet the Team", classes="section-title")
        with Vertical(id="agent-grid"):
            for agent in self.agents:
                yield AgentCard(agent)

        yield Static("Slash Commands", classes="section-title")
        for command in self.commands:
            yield Static(self._command_text(command), classes="command-row")

        yield Static("Pre-configured Stack", classes="section-title")
        yield Static("  •  ".join(self.tech_stack), id="tech-stack")

    def on_mount(self) -> None:
        if self._clipboard is None:
            self._clipboard = create_clipboard(self._clipboard_mode, self.app)
        logger.info("Using %s clipboard", self._clipboard.name)
        self.copy_feedback = CopyFeedbackController(
            self._clipboard,
            self._schedule,
            delay=self.feedback_delay,
            dispatch=self._dispatch_clipboard,
            on_change=self._on_copy_state_changed,
        )

    def on_unmount(self) -> None:
        """Drop pending timers so nothing fires after teardown."""
        if self.copy_feedback is not None:
            self.copy_feedback.shutdown()
        self.agent_selection.clear()

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def on_agent_card_toggled(self, message: AgentCard.Toggled) -> None:
        message.stop()
        self.toggle_agent(message.key)

    def toggle_agent(self, key: str) -> None:
        self.agent_selection.toggle(key)
        self.refresh_cards()

    def action_collapse(self) -> None:
        self.collapse_all()

    def collapse_all(self) -> None:
        self.agent_selection.clear()
        self.refresh_cards()

    def refresh_cards(self) -> None:
        for card in self.query(AgentCard):
            card.set_expanded(self.agent_selection.is_expanded(card.agent.key))

    # ------------------------------------------------------------------
    # Copy / download
    # ------------------------------------------------------------------

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "copy-button":
            event.stop()
            self.copy_install_command()
        elif event.button.id == "download-button":
            event.stop()
            self.open_download()

    def action_copy_install(self) -> None:
        self.copy_install_command()

    def action_download(self) -> None:
        self.open_download()

    def copy_install_command(self) -> None:
        if self.copy_feedback is None:
            return
        self.copy_feedback.trigger_copy(self.install_command)

    def open_download(self) -> None:
        try:
            opened = webbrowser.open(self.download_url)
        except webbrowser.Error as e:
            logger.warning("Could not open browser: %s", e)
            opened = False
        if not opened:
            self.notify(self.download_url, title="Download the plugin from")

    def _on_copy_state_changed(self, state: CopyFeedbackState) -> None:
        self.query_one("#copy-button", Button).label = copy_button_label(state)

    def _schedule(self, delay: float, callback: Callable[[], None]):
        return self.set_timer(delay, callback, name="copy-feedback")

    def _dispatch_clipboard(self, write: Callable[[], None]) -> None:
        if self._clipboard is not None and self._clipboard.blocking:
            self.run_worker(write, thread=True, group="clipboard", exit_on_error=False)
        else:
            write()

    @staticmethod
    def _command_text(command: CommandEntry) -> Text:
        text = Text()
        text.append(command.name, style="bold #06ABEB")
        text.append("  ")
        text.append(command.description, style="dim")
        return text
