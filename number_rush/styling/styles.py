"""Centralized styles and font definitions for the application."""

from .color_palette import ColorPalette, Theme

class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QFrame#card {{
                background-color: {ColorPalette.BACKGROUND_CARD.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 12px;
            }}
            QFrame#card QLabel {{
                background-color: transparent;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:disabled {{
                color: {ColorPalette.BUTTON_DISABLED_TEXT.get(theme)};
            }}
            QLineEdit {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 2px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                padding: 6px;
            }}
            QLineEdit:focus {{
                border: 2px solid {ColorPalette.BORDER_FOCUS.get(theme)};
            }}
        """

    @staticmethod
    def get_primary_button_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"QPushButton {{ background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)}; "
            f"color: {ColorPalette.ACCENT_PRIMARY_TEXT.get(theme)}; border: none; "
            "border-radius: 6px; padding: 10px; font-weight: bold; }"
            f"QPushButton:disabled {{ background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)}; "
            f"color: {ColorPalette.BUTTON_DISABLED_TEXT.get(theme)}; }}"
        )

    @staticmethod
    def get_difficulty_button_style(difficulty: str, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.difficulty_color(difficulty).get(theme)
        return (
            f"QPushButton {{ background-color: {color}; color: #FFFFFF; border: none; "
            "border-radius: 8px; min-height: 48px; font-size: 16pt; font-weight: bold; }"
        )

    @staticmethod
    def get_title_style(theme: Theme = Theme.LIGHT) -> str:
        return f"font-size: 26pt; font-weight: bold; color: {ColorPalette.ACCENT_PRIMARY.get(theme)};"

    @staticmethod
    def get_trophy_title_style(theme: Theme = Theme.LIGHT) -> str:
        return f"font-size: 22pt; font-weight: bold; color: {ColorPalette.TROPHY.get(theme)};"

    @staticmethod
    def get_muted_label_style(theme: Theme = Theme.LIGHT) -> str:
        return f"color: {ColorPalette.TEXT_MUTED.get(theme)};"

    @staticmethod
    def get_hint_button_style(active: bool, theme: Theme = Theme.LIGHT) -> str:
        if not active:
            return ""
        return f"QPushButton {{ color: {ColorPalette.HINT_ACTIVE.get(theme)}; font-weight: bold; }}"

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"
