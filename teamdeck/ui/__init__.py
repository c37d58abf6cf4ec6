"""Textual UI for teamdeck."""
