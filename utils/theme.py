"""Colour themes for terminal output."""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class ThemeColors:
    """Color palette for terminal output."""

    primary: str
    secondary: str
    success: str
    warning: str
    error: str
    text_muted: str


DARK_THEME = ThemeColors(
    primary="#00D9FF",
    secondary="#A78BFA",
    success="#10B981",
    warning="#F59E0B",
    error="#EF4444",
    text_muted="#6B7280",
)

LIGHT_THEME = ThemeColors(
    primary="#0369A1",
    secondary="#7C3AED",
    success="#047857",
    warning="#B45309",
    error="#B91C1C",
    text_muted="#6B7280",
)

THEMES: Dict[str, ThemeColors] = {"dark": DARK_THEME, "light": LIGHT_THEME}


def get_theme(name: str) -> ThemeColors:
    """Return the palette for a theme name, falling back to dark."""
    return THEMES.get(name.lower(), DARK_THEME)
