"""
teamdeck TUI Theme Definitions.

Custom themes for the teamdeck TUI using Textual's theming system.
"""

from typing import Any

from textual.theme import Theme

# =============================================================================
# teamdeck Dark Theme (Default)
# Mount Sinai navy with cyan accents
# =============================================================================

TEAMDECK_DARK = Theme(
    name="teamdeck-dark",
    primary="#212070",      # Brand navy - buttons, badges
    secondary="#DC298D",    # Brand magenta
    accent="#06ABEB",       # Brand cyan - highlights, install command
    foreground="#FFFFFF",   # Primary text
    background="#00002D",   # Page background
    surface="#0B0B3A",      # Cards
    panel="#14144A",        # Tech stack tiles
    boost="#1E1E55",        # Status bars, headers
    success="#34C759",
    warning="#FF9500",
    error="#FF3B30",
    dark=True,
)

# =============================================================================
# teamdeck Light Theme
# =============================================================================

TEAMDECK_LIGHT = Theme(
    name="teamdeck-light",
    primary="#212070",
    secondary="#DC298D",
    accent="#0589BE",       # Darker cyan - visible on white
    foreground="#1F2328",
    background="#FFFFFF",
    surface="#F4F6FA",
    panel="#E9ECF5",
    boost="#DFE3EE",
    success="#1A7F37",
    warning="#9A6700",
    error="#CF222E",
    dark=False,
)

# =============================================================================
# Theme Registry
# =============================================================================

TEAMDECK_THEMES: dict[str, Theme] = {
    "teamdeck-dark": TEAMDECK_DARK,
    "teamdeck-light": TEAMDECK_LIGHT,
}


def register_all_themes(app: Any) -> None:
    """
    Register all custom teamdeck themes with the app.

    Args:
        app: The Textual App instance
    """
    for theme in TEAMDECK_THEMES.values():
        app.register_theme(theme)


def get_theme_names() -> list[str]:
    """Get list of all available teamdeck theme names."""
    return list(TEAMDECK_THEMES.keys())


def next_theme(current: str) -> str:
    """Theme that follows ``current`` in the cycle (first one if unknown)."""
    names = get_theme_names()
    if current not in names:
        return names[0]
    return names[(names.index(current) + 1) % len(names)]
