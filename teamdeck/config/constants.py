"""
Centralized constants for teamdeck.

Timings, labels and environment variable names live here so the UI, the
CLI and the tests agree on them.
"""

from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

TEAMDECK_CONFIG_DIR = Path.home() / ".config" / "teamdeck"
TUI_LOG_FILENAME = "tui.log"

# =============================================================================
# COPY FEEDBACK
# =============================================================================

COPY_FEEDBACK_SECONDS = 2.0  # How long "Copied!" stays on the button
COPY_LABEL_IDLE = "Copy Install Command"
COPY_LABEL_COPIED = "Copied!"

# =============================================================================
# CLIPBOARD
# =============================================================================

CLIPBOARD_TIMEOUT_SECONDS = 5  # Per-backend subprocess timeout
CLIPBOARD_MODES = ("auto", "terminal", "system")
DEFAULT_CLIPBOARD_MODE = "auto"

# =============================================================================
# THEMES
# =============================================================================

DEFAULT_THEME = "teamdeck-dark"

# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================

ENV_THEME = "TEAMDECK_THEME"
ENV_CLIPBOARD = "TEAMDECK_CLIPBOARD"
ENV_LOG_LEVEL = "TEAMDECK_LOG_LEVEL"

ENV_VAR_DEFINITIONS = {
    ENV_THEME: {
        "description": "Theme used by the TUI",
        "valid_values": None,
        "default": DEFAULT_THEME,
    },
    ENV_CLIPBOARD: {
        "description": "Clipboard backend (auto, terminal, system)",
        "valid_values": list(CLIPBOARD_MODES),
        "default": DEFAULT_CLIPBOARD_MODE,
    },
    ENV_LOG_LEVEL: {
        "description": "Log level for teamdeck loggers",
        "valid_values": ["DEBUG", "INFO", "WARNING", "ERROR"],
        "default": "WARNING",
    },
}
