"""Component for the end-of-game results screen."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QLabel, QPushButton, QVBoxLayout, QWidget

from number_rush.constants.ui_constants import (
    COMPLETE_TITLE,
    FINAL_SCORE_TEMPLATE,
    PLAY_AGAIN_BUTTON,
    TIME_TAKEN_TEMPLATE,
)
from number_rush.core.models import GameSnapshot
from number_rush.styling.color_palette import Theme
from number_rush.styling.styles import Styles


class CompletionPanel(QWidget):
    """Shows the final score and time taken, and offers a new game."""

    def __init__(self, on_play_again: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_play_again = on_play_again
        self._build_ui()

    def _build_ui(self) -> None:
        outer = QVBoxLayout()
        self.setLayout(outer)

        card = QFrame(self)
        card.setObjectName("card")
        layout = QVBoxLayout()
        layout.setSpacing(12)
        card.setLayout(layout)

        self.title_label = QLabel(COMPLETE_TITLE, card)
        self.title_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.title_label)

        self.score_label = QLabel("", card)
        self.score_label.setAlignment(Qt.AlignCenter)
        self.score_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.score_label)

        self.time_label = QLabel("", card)
        self.time_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.time_label)

        self.play_again_button = QPushButton(PLAY_AGAIN_BUTTON, card)
        self.play_again_button.clicked.connect(self.on_play_again)
        layout.addWidget(self.play_again_button)

        outer.addStretch()
        outer.addWidget(card)
        outer.addStretch()

    def show_results(self, snapshot: GameSnapshot) -> None:
        self.score_label.setText(
            FINAL_SCORE_TEMPLATE.format(score=snapshot.score, total=snapshot.total_questions)
        )
        self.time_label.setText(TIME_TAKEN_TEMPLATE.format(elapsed=snapshot.elapsed_text))
        self.play_again_button.setFocus()

    def apply_theme(self, theme: Theme) -> None:
        self.title_label.setStyleSheet(Styles.get_trophy_title_style(theme))
        self.time_label.setStyleSheet(Styles.get_muted_label_style(theme))
        self.play_again_button.setStyleSheet(Styles.get_primary_button_style(theme))
