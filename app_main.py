"""Application entry point for Number Rush."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from number_rush.core.game_manager import GameManager
from number_rush.ui.main_window import NumberRushMainWindow
from number_rush.ui.qt_ticker import QtTicker
from number_rush.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting Number Rush…")

    app = QApplication(sys.argv)
    game_manager = GameManager(ticker=QtTicker(app))
    window = NumberRushMainWindow(game_manager=game_manager)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
