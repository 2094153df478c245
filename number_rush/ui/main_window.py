"""Qt main window switching between difficulty, game and completion screens."""

from __future__ import annotations

import logging

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from number_rush.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from number_rush.constants.ui_constants import (
    ABOUT_BUTTON,
    CONFIRM_QUIT_MESSAGE,
    HELP_BUTTON,
    SETTINGS_BUTTON,
    THEME_BUTTON_DARK,
    THEME_BUTTON_LIGHT,
    WINDOW_MIN_HEIGHT,
    WINDOW_MIN_WIDTH,
    WINDOW_TITLE,
)
from number_rush.core.game_manager import GameManager
from number_rush.core.models import Difficulty, GamePhase, GameSnapshot
from number_rush.core.services.game_session import GameStateError
from number_rush.styling.color_palette import Theme
from number_rush.styling.styles import Styles
from number_rush.ui.components.completion_panel import CompletionPanel
from number_rush.ui.components.difficulty_panel import DifficultyPanel
from number_rush.ui.components.game_panel import GamePanel
from number_rush.ui.dialog_helpers import confirm_quit_game, show_info, show_warning
from number_rush.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


class NumberRushMainWindow(QMainWindow):
    """Main window; one stacked page per game phase."""

    def __init__(self, game_manager: GameManager) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)

        self.game_manager = game_manager

        self._theme = Theme.LIGHT
        self._ui_font_size: int = 10
        self._game_font_size: int = 28
        self._random_seed: int | None = None

        self._build_ui()
        self._apply_styles()
        self.game_manager.add_tick_listener(self._handle_tick)
        self._set_phase(self.game_manager.get_phase())

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_top_buttons(root_layout)

        self.phase_stack = QStackedWidget(self)
        self.difficulty_panel = DifficultyPanel(
            on_select_difficulty=self._handle_select_difficulty,
            parent=self,
        )
        self.game_panel = GamePanel(
            self.game_manager,
            on_game_completed=self._handle_game_completed,
            parent=self,
        )
        self.completion_panel = CompletionPanel(
            on_play_again=self._handle_play_again,
            parent=self,
        )
        self.phase_stack.addWidget(self.difficulty_panel)
        self.phase_stack.addWidget(self.game_panel)
        self.phase_stack.addWidget(self.completion_panel)
        root_layout.addWidget(self.phase_stack, stretch=1)

    def _build_top_buttons(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.theme_button = QPushButton(THEME_BUTTON_DARK, self)
        self.theme_button.clicked.connect(self._handle_toggle_theme)
        button_row.addWidget(self.theme_button)

        self.about_button = QPushButton(ABOUT_BUTTON, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton(HELP_BUTTON, self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.settings_button = QPushButton(SETTINGS_BUTTON, self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        layout.addLayout(button_row)

    def _set_phase(self, phase: GamePhase) -> None:
        index_map = {
            GamePhase.SELECTING_DIFFICULTY: 0,
            GamePhase.PLAYING: 1,
            GamePhase.COMPLETED: 2,
        }
        self.phase_stack.setCurrentIndex(index_map[phase])

    # --- Game events ---

    def _handle_select_difficulty(self, difficulty: Difficulty) -> None:
        try:
            snapshot = self.game_manager.select_difficulty(difficulty)
        except GameStateError as exc:
            show_warning(self, "Cannot start game", str(exc))
            return
        self.game_panel.show_snapshot(snapshot)
        self._set_phase(GamePhase.PLAYING)

    def _handle_game_completed(self) -> None:
        self.completion_panel.show_results(self.game_manager.snapshot())
        self._set_phase(GamePhase.COMPLETED)

    def _handle_play_again(self) -> None:
        try:
            self.game_manager.play_again()
        except GameStateError as exc:
            show_warning(self, "Cannot reset game", str(exc))
            return
        self._set_phase(GamePhase.SELECTING_DIFFICULTY)

    def _handle_tick(self, snapshot: GameSnapshot) -> None:
        if snapshot.phase is GamePhase.PLAYING:
            self.game_panel.update_elapsed(snapshot)

    # --- Chrome ---

    def _handle_toggle_theme(self) -> None:
        self._theme = self._theme.toggled()
        self._apply_styles()

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            self._ui_font_size,
            self._game_font_size,
            self._theme == Theme.DARK,
            self._random_seed,
        )
        if dialog.exec():
            self._ui_font_size = dialog.get_ui_font_size()
            self._game_font_size = dialog.get_game_font_size()
            self._theme = Theme.DARK if dialog.get_dark_theme() else Theme.LIGHT
            self._random_seed = dialog.get_random_seed()

            self.game_manager.set_random_seed(self._random_seed)
            logger.info("Settings applied (theme=%s, seed=%s)", self._theme.name, self._random_seed)

            self._apply_styles()
            if self.game_manager.get_phase() is GamePhase.PLAYING:
                self.game_panel.show_snapshot(self.game_manager.snapshot())

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style(self._theme))
        self.theme_button.setText(THEME_BUTTON_LIGHT if self._theme == Theme.DARK else THEME_BUTTON_DARK)

        ui_style = f"font-size: {self._ui_font_size}pt;"
        for button in (self.theme_button, self.about_button, self.help_button, self.settings_button):
            button.setStyleSheet(ui_style)

        self.difficulty_panel.apply_theme(self._theme)
        self.game_panel.apply_theme(self._theme)
        self.game_panel.set_game_font_size(self._game_font_size)
        self.completion_panel.apply_theme(self._theme)

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802 - Qt override
        if self.game_manager.get_phase() is GamePhase.PLAYING:
            if not confirm_quit_game(self, CONFIRM_QUIT_MESSAGE):
                event.ignore()
                return
        self.game_manager.remove_tick_listener(self._handle_tick)
        self.game_manager.shutdown()
        event.accept()
