"""
Selection state for the agent grid.

At most one card is expanded at a time. Clicking the expanded card
collapses it; clicking any other card moves the expansion there.
"""

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class SelectionController:
    """Track which catalog entry (if any) is expanded."""

    selected: Optional[str] = None

    def toggle(self, entry_id: str) -> Optional[str]:
        """Toggle ``entry_id`` and return the new selection."""
        if self.selected == entry_id:
            self.selected = None
        else:
            self.selected = entry_id
        logger.debug("Selection -> %s", self.selected)
        return self.selected

    def is_expanded(self, entry_id: str) -> bool:
        return self.selected == entry_id

    def clear(self) -> None:
        """Collapse everything."""
        self.selected = None
