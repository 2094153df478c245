"""Component for the difficulty selection screen."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QLabel, QPushButton, QVBoxLayout, QWidget

from number_rush.constants.about import APP_NAME
from number_rush.constants.ui_constants import DIFFICULTY_LABELS, DIFFICULTY_PROMPT
from number_rush.core.models import Difficulty
from number_rush.styling.color_palette import Theme
from number_rush.styling.styles import Styles


class DifficultyPanel(QWidget):
    """Title card with one button per difficulty."""

    def __init__(
        self,
        on_select_difficulty: Callable[[Difficulty], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_select_difficulty = on_select_difficulty
        self.difficulty_buttons: dict[Difficulty, QPushButton] = {}
        self._build_ui()

    def _build_ui(self) -> None:
        outer = QVBoxLayout()
        self.setLayout(outer)

        card = QFrame(self)
        card.setObjectName("card")
        layout = QVBoxLayout()
        layout.setSpacing(16)
        card.setLayout(layout)

        self.title_label = QLabel(APP_NAME, card)
        self.title_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.title_label)

        self.prompt_label = QLabel(DIFFICULTY_PROMPT, card)
        self.prompt_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.prompt_label)

        for difficulty in Difficulty:
            button = QPushButton(DIFFICULTY_LABELS[difficulty.value], card)
            button.clicked.connect(
                lambda _checked=False, value=difficulty: self.on_select_difficulty(value)
            )
            layout.addWidget(button)
            self.difficulty_buttons[difficulty] = button

        outer.addStretch()
        outer.addWidget(card)
        outer.addStretch()

    def apply_theme(self, theme: Theme) -> None:
        self.title_label.setStyleSheet(Styles.get_title_style(theme))
        self.prompt_label.setStyleSheet(Styles.get_muted_label_style(theme))
        for difficulty, button in self.difficulty_buttons.items():
            button.setStyleSheet(Styles.get_difficulty_button_style(difficulty.value, theme))
