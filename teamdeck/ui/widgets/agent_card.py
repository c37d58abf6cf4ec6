"""Agent card widget for the catalog grid.

┌──────────────────────────────────────┐
│ 🎯 Team Lead            [All Phases] │
│ Model: Opus 4.6                      │
│ Orchestrates all agents...           │  <- only when expanded
└──────────────────────────────────────┘

The card does not decide whether it is expanded. It reports clicks with
``AgentCard.Toggled`` and the page calls ``set_expanded`` back.
"""

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Static

from ...models.catalog import CatalogEntry

NEUTRAL_BORDER = "#2A2A55"


class AgentCard(Widget, can_focus=True):
    """One selectable catalog entry."""

    DEFAULT_CSS = """
    AgentCard {
        height: auto;
        padding: 0 1;
        margin: 0 0 1 0;
        background: $surface;
    }

    AgentCard.expanded {
        background: $boost;
    }

    AgentCard:focus {
        background: $boost;
    }

    AgentCard .card-header {
        height: 1;
        width: 100%;
    }

    AgentCard .card-model {
        height: 1;
        color: $text-muted;
    }

    AgentCard .card-description {
        height: auto;
        margin-top: 1;
        display: none;
    }

    AgentCard.expanded .card-description {
        display: block;
    }
    """

    BINDINGS = [
        Binding("enter", "toggle", "Toggle", show=False),
        Binding("space", "toggle", "Toggle", show=False),
    ]

    class Toggled(Message):
        """Posted when the card is clicked or activated from the keyboard."""

        def __init__(self, key: str) -> None:
            self.key = key
            super().__init__()

    def __init__(self, agent: CatalogEntry) -> None:
        super().__init__(id=f"agent-{agent.key}")
        self.agent = agent
        self.expanded = False

    def compose(self) -> ComposeResult:
        yield Static(self._header_text(), classes="card-header")
        yield Static(f"Model: {self.agent.model}", classes="card-model")
        yield Static(self.agent.description, classes="card-description")

    def on_mount(self) -> None:
        self._apply_border()

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self.post_message(self.Toggled(self.agent.key))

    def action_toggle(self) -> None:
        self.post_message(self.Toggled(self.agent.key))

    def set_expanded(self, expanded: bool) -> None:
        """Show or hide the description and switch the border colour."""
        self.expanded = expanded
        self.set_class(expanded, "expanded")
        self._apply_border()

    @property
    def accent_border(self) -> str:
        return self.agent.color if self.expanded else NEUTRAL_BORDER

    def _apply_border(self) -> None:
        self.styles.border = ("round", self.accent_border)

    def _header_text(self) -> Text:
        header = Text()
        header.append(f"{self.agent.icon} ")
        header.append(self.agent.name, style="bold")
        header.append("  ")
        header.append(f" {self.agent.phase} ", style=f"bold {self.agent.color}")
        return header
