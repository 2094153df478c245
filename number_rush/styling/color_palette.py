"""Color palette for Number Rush supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()

    def toggled(self) -> Theme:
        return Theme.DARK if self == Theme.LIGHT else Theme.LIGHT


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

    TEXT_PRIMARY = ThemeColors(light="#0F172A", dark="#F8FAFC")
    TEXT_MUTED = ThemeColors(light="#64748B", dark="#94A3B8")

    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#0B1120")
    BACKGROUND_CARD = ThemeColors(light="#F1F5F9", dark="#1E293B")

    ACCENT_PRIMARY = ThemeColors(light="#6D28D9", dark="#A78BFA")
    ACCENT_PRIMARY_TEXT = ThemeColors(light="#FFFFFF", dark="#0B1120")

    BORDER_PRIMARY = ThemeColors(light="#CBD5E1", dark="#334155")
    BORDER_FOCUS = ThemeColors(light="#6D28D9", dark="#A78BFA")

    BUTTON_SECONDARY_BG = ThemeColors(light="#E2E8F0", dark="#334155")
    BUTTON_HOVER_BG = ThemeColors(light="#CBD5E1", dark="#475569")
    BUTTON_DISABLED_TEXT = ThemeColors(light="#94A3B8", dark="#64748B")

    # Difficulty buttons (emerald / amber / rose)
    DIFFICULTY_EASY = ThemeColors(light="#10B981", dark="#34D399")
    DIFFICULTY_MEDIUM = ThemeColors(light="#F59E0B", dark="#FBBF24")
    DIFFICULTY_HARD = ThemeColors(light="#F43F5E", dark="#FB7185")

    HINT_ACTIVE = ThemeColors(light="#EAB308", dark="#FACC15")
    TROPHY = ThemeColors(light="#EAB308", dark="#FACC15")

    @classmethod
    def difficulty_color(cls, difficulty: str) -> ThemeColors:
        return {
            "easy": cls.DIFFICULTY_EASY,
            "medium": cls.DIFFICULTY_MEDIUM,
            "hard": cls.DIFFICULTY_HARD,
        }[difficulty]
