"""Data models for teamdeck.

- catalog: immutable agent and slash-command records shown on the page
"""

from .catalog import CatalogEntry, CommandEntry, slugify

__all__ = ["CatalogEntry", "CommandEntry", "slugify"]
