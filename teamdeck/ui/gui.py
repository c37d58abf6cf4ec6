"""
TUI entry point for teamdeck
"""

import logging
from typing import Optional

import typer

from teamdeck.config.ui_config import get_clipboard_mode, get_theme, validate_clipboard_mode
from teamdeck.exceptions import TeamdeckError
from teamdeck.utils.logging import get_tui_log_path, setup_logging
from teamdeck.utils.output import console


def show(
    theme: Optional[str] = typer.Option(
        None,
        "--theme",
        "-t",
        help="Theme to use (teamdeck-dark, teamdeck-light)",
    ),
    clipboard: Optional[str] = typer.Option(
        None,
        "--clipboard",
        help="Clipboard backend: auto, terminal or system",
    ),
):
    """Browse the agent team in the terminal."""
    from teamdeck.ui.app import TeamdeckApp

    try:
        clipboard_mode = validate_clipboard_mode(clipboard) if clipboard else get_clipboard_mode()
        # Keep the level chosen by -v/-q, only move output to the log file
        level = logging.getLogger("teamdeck").level or None
        setup_logging(level, log_file=get_tui_log_path())
        TeamdeckApp(theme_name=theme or get_theme(), clipboard_mode=clipboard_mode).run()
    except KeyboardInterrupt:
        pass
    except TeamdeckError as e:
        console.print(f"❌ Error: {e}", style="red")
        raise typer.Exit(1) from e
