"""Qt UI components for Number Rush."""

from .dialog_helpers import confirm_quit_game, show_info, show_warning
from .main_window import NumberRushMainWindow
from .qt_ticker import QtTicker

__all__ = [
    "NumberRushMainWindow",
    "QtTicker",
    "confirm_quit_game",
    "show_info",
    "show_warning",
]
