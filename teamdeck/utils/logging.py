"""Simple logging utilities for teamdeck."""

import logging
import os
import sys
from pathlib import Path
from typing import Optional, Union

from ..config.constants import ENV_LOG_LEVEL, TEAMDECK_CONFIG_DIR, TUI_LOG_FILENAME
from ..config.settings import validate_env_var

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: Union[int, str, None]) -> int:
    """Turn a level name (or None, meaning TEAMDECK_LOG_LEVEL / WARNING) into an int."""
    if level is None:
        env_level = os.environ.get(ENV_LOG_LEVEL)
        is_valid, _ = validate_env_var(ENV_LOG_LEVEL, env_level)
        level = env_level if env_level and is_valid else "WARNING"
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.WARNING


def get_tui_log_path() -> Path:
    """Path of the TUI log file (~/.config/teamdeck/tui.log)."""
    TEAMDECK_CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    return TEAMDECK_CONFIG_DIR / TUI_LOG_FILENAME


def setup_logging(
    level: Union[int, str, None] = None,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """Configure the ``teamdeck`` logger.

    The CLI logs to stderr. The TUI owns the terminal, so it passes a
    ``log_file`` and everything goes there instead.
    """
    logger = logging.getLogger("teamdeck")
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()

    handler: logging.Handler
    if log_file is not None:
        handler = logging.FileHandler(log_file)
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(resolve_level(level))
    logger.propagate = False
    return logger
