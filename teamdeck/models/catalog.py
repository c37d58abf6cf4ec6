"""Immutable records for the agent catalog and slash commands."""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from typing import Any

_SLUG_STRIP = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """Turn a display name into a stable key ("Security / HIPAA" -> "security-hipaa")."""
    return _SLUG_STRIP.sub("-", name.lower()).strip("-")


@dataclass(frozen=True)
class CatalogEntry:
    """One agent card on the page."""

    key: str
    name: str
    icon: str
    model: str
    phase: str
    color: str
    description: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CatalogEntry:
        """Build an entry from a plain mapping; the key defaults to the slugged name."""
        return cls(
            key=data.get("key") or slugify(data["name"]),
            name=data["name"],
            icon=data["icon"],
            model=data["model"],
            phase=data["phase"],
            color=data["color"],
            description=data["description"],
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CommandEntry:
    """A slash command offered by the plugin."""

    name: str
    description: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
