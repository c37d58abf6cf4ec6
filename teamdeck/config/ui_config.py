"""
teamdeck UI Configuration.

Handles persistence of UI preferences (theme and clipboard backend).
Config is stored in ~/.config/teamdeck/ui_config.json. Environment
variables win over the file.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from ..exceptions import ConfigurationError
from .constants import (
    CLIPBOARD_MODES,
    DEFAULT_CLIPBOARD_MODE,
    DEFAULT_THEME,
    ENV_CLIPBOARD,
    ENV_THEME,
    TEAMDECK_CONFIG_DIR,
)
from .settings import validate_env_var

DEFAULT_CONFIG: dict[str, Any] = {
    "theme": DEFAULT_THEME,
    "clipboard": DEFAULT_CLIPBOARD_MODE,
}


def get_ui_config_path() -> Path:
    """
    Get path to UI config file.

    Returns:
        Path to ~/.config/teamdeck/ui_config.json
    """
    TEAMDECK_CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    return TEAMDECK_CONFIG_DIR / "ui_config.json"


def load_ui_config() -> dict[str, Any]:
    """
    Load UI configuration from file.

    Returns:
        Config dict, or defaults if file doesn't exist or is invalid
    """
    path = get_ui_config_path()
    if path.exists():
        try:
            config = json.loads(path.read_text())
        except (json.JSONDecodeError, OSError):
            return DEFAULT_CONFIG.copy()
        if not isinstance(config, dict):
            return DEFAULT_CONFIG.copy()
        return {**DEFAULT_CONFIG, **config}
    return DEFAULT_CONFIG.copy()


def save_ui_config(config: dict[str, Any]) -> None:
    """
    Save UI configuration to file.

    Args:
        config: Configuration dict to save
    """
    path = get_ui_config_path()
    try:
        path.write_text(json.dumps(config, indent=2) + "\n")
    except OSError:
        # Config is non-critical
        pass


def get_theme() -> str:
    """Get current theme name, honouring TEAMDECK_THEME."""
    env_theme = os.environ.get(ENV_THEME)
    if env_theme:
        return env_theme
    return str(load_ui_config().get("theme", DEFAULT_THEME))


def set_theme(theme_name: str) -> None:
    """
    Set and persist theme preference.

    Args:
        theme_name: Name of theme to set
    """
    config = load_ui_config()
    config["theme"] = theme_name
    save_ui_config(config)


def validate_clipboard_mode(mode: str) -> str:
    """Normalise a clipboard mode, raising ConfigurationError if unknown."""
    normalised = mode.strip().lower()
    if normalised not in CLIPBOARD_MODES:
        raise ConfigurationError(
            f"Invalid clipboard mode '{mode}'. Valid values: {list(CLIPBOARD_MODES)}",
            setting="clipboard",
        )
    return normalised


def get_clipboard_mode() -> str:
    """Get the configured clipboard backend, honouring TEAMDECK_CLIPBOARD."""
    env_mode = os.environ.get(ENV_CLIPBOARD)
    if env_mode:
        is_valid, error = validate_env_var(ENV_CLIPBOARD, env_mode)
        if not is_valid:
            raise ConfigurationError(error or "Invalid clipboard mode", setting=ENV_CLIPBOARD)
        return env_mode.strip().lower()
    return validate_clipboard_mode(str(load_ui_config().get("clipboard", DEFAULT_CLIPBOARD_MODE)))
