"""teamdeck UI widgets package."""

from .agent_card import AgentCard

__all__ = [
    "AgentCard",
]
