"""Color palette for PulseQuiz supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(light="#1F1235", dark="#FFFFFF")
    TEXT_SECONDARY = ThemeColors(light="#5B5270", dark="#CFC6E6")

    BACKGROUND_PRIMARY = ThemeColors(light="#F4F0FA", dark="#46178F")
    BACKGROUND_CARD = ThemeColors(light="#FFFFFF", dark="#5A2AA8")

    BORDER_PRIMARY = ThemeColors(light="#D9CFEA", dark="#7B4CC9")

    BUTTON_PRIMARY_BG = ThemeColors(light="#46178F", dark="#FFFFFF")
    BUTTON_PRIMARY_TEXT = ThemeColors(light="#FFFFFF", dark="#46178F")
    BUTTON_SECONDARY_BG = ThemeColors(light="#EDE7F6", dark="#6A3BB8")
    BUTTON_HOVER_BG = ThemeColors(light="#DCD0EF", dark="#7B4CC9")

    SUCCESS = ThemeColors(light="#26890C", dark="#66BF39")
    ERROR = ThemeColors(light="#E21B3C", dark="#FF6B81")
    WARNING = ThemeColors(light="#D89E00", dark="#FFA602")

    # Answer button colors, keyed by option letter.
    OPTION_COLORS: dict[str, str] = {
        "A": "#E21B3C",
        "B": "#1368CE",
        "C": "#D89E00",
        "D": "#26890C",
    }
