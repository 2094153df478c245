"""Component for the in-game question screen."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from number_rush.constants.ui_constants import (
    ANSWER_PLACEHOLDER,
    HINT_BUTTON,
    HINT_BUTTON_USED,
    HINT_TOOLTIP,
    NEXT_QUESTION_BUTTON,
    QUESTION_HEADER,
    SCORE_HEADER,
)
from number_rush.core.game_manager import GameManager
from number_rush.core.models import GameSnapshot
from number_rush.core.question_renderer import format_option_label, render_question_html
from number_rush.core.services.game_session import GameStateError
from number_rush.styling.color_palette import Theme
from number_rush.styling.styles import Styles
from number_rush.ui.dialog_helpers import show_warning


class GamePanel(QWidget):
    """UI component for answering the questions of a running game."""

    def __init__(
        self,
        game_manager: GameManager,
        on_game_completed: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.game_manager = game_manager
        self.on_game_completed = on_game_completed

        self._theme = Theme.LIGHT
        self._game_font_size: int = 28
        self.option_buttons: list[QPushButton] = []

        self._build_ui()

    def _build_ui(self) -> None:
        outer = QVBoxLayout()
        self.setLayout(outer)

        card = QFrame(self)
        card.setObjectName("card")
        layout = QVBoxLayout()
        layout.setSpacing(14)
        card.setLayout(layout)

        # Header: progress, hint toggle, score
        header_row = QHBoxLayout()
        self.progress_caption = QLabel(QUESTION_HEADER, card)
        self.progress_label = QLabel("", card)
        self.progress_label.setStyleSheet(Styles.get_large_label_style())
        progress_box = QVBoxLayout()
        progress_box.addWidget(self.progress_caption)
        progress_box.addWidget(self.progress_label)
        header_row.addLayout(progress_box)

        header_row.addStretch()
        self.hint_button = QPushButton(HINT_BUTTON, card)
        self.hint_button.setToolTip(HINT_TOOLTIP)
        self.hint_button.clicked.connect(self._handle_hint)
        header_row.addWidget(self.hint_button)
        header_row.addStretch()

        self.score_caption = QLabel(SCORE_HEADER, card)
        self.score_caption.setAlignment(Qt.AlignRight)
        self.score_label = QLabel("0", card)
        self.score_label.setAlignment(Qt.AlignRight)
        self.score_label.setStyleSheet(Styles.get_large_label_style())
        score_box = QVBoxLayout()
        score_box.addWidget(self.score_caption)
        score_box.addWidget(self.score_label)
        header_row.addLayout(score_box)
        layout.addLayout(header_row)

        self.question_label = QLabel("", card)
        self.question_label.setTextFormat(Qt.RichText)
        self.question_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.question_label)

        # Free-text answer
        self.answer_input = QLineEdit(card)
        self.answer_input.setPlaceholderText(ANSWER_PLACEHOLDER)
        self.answer_input.setAlignment(Qt.AlignCenter)
        self.answer_input.setMaximumWidth(180)
        self.answer_input.textEdited.connect(self._handle_input_edited)
        self.answer_input.returnPressed.connect(self._handle_return_pressed)
        input_row = QHBoxLayout()
        input_row.addStretch()
        input_row.addWidget(self.answer_input)
        input_row.addStretch()
        layout.addLayout(input_row)

        # Multiple-choice options (hint mode)
        self.options_widget = QWidget(card)
        self.options_layout = QGridLayout()
        self.options_widget.setLayout(self.options_layout)
        self.options_widget.setVisible(False)
        layout.addWidget(self.options_widget)

        self.next_button = QPushButton(NEXT_QUESTION_BUTTON, card)
        self.next_button.setEnabled(False)
        self.next_button.clicked.connect(lambda _checked=False: self._submit())
        layout.addWidget(self.next_button)

        self.elapsed_label = QLabel("0:00", card)
        self.elapsed_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.elapsed_label)

        outer.addStretch()
        outer.addWidget(card)
        outer.addStretch()

    def show_snapshot(self, snapshot: GameSnapshot) -> None:
        """Re-render the whole panel from ``snapshot``."""
        self.progress_label.setText(f"{snapshot.question_index}/{snapshot.total_questions}")
        self.score_label.setText(str(snapshot.score))
        self.question_label.setText(
            render_question_html(snapshot.question, font_size=self._game_font_size)
        )

        self.hint_button.setEnabled(not snapshot.hint_revealed)
        self.hint_button.setText(HINT_BUTTON_USED if snapshot.hint_revealed else HINT_BUTTON)
        self.hint_button.setStyleSheet(Styles.get_hint_button_style(snapshot.hint_revealed, self._theme))

        self.answer_input.setVisible(not snapshot.hint_revealed)
        self.next_button.setVisible(not snapshot.hint_revealed)
        if self.answer_input.text() != snapshot.user_input:
            self.answer_input.setText(snapshot.user_input)
        self.next_button.setEnabled(snapshot.can_submit)

        self._rebuild_option_buttons(snapshot.options)
        self.options_widget.setVisible(snapshot.hint_revealed)
        self.update_elapsed(snapshot)

        if not snapshot.hint_revealed:
            self.answer_input.setFocus()

    def update_elapsed(self, snapshot: GameSnapshot) -> None:
        self.elapsed_label.setText(f"Time: {snapshot.elapsed_text}")

    def _rebuild_option_buttons(self, options: tuple[int, ...]) -> None:
        while self.options_layout.count():
            item = self.options_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

        self.option_buttons = []
        for idx, option in enumerate(options):
            button = QPushButton(format_option_label(idx, option), self.options_widget)
            button.setMinimumHeight(44)
            button.setStyleSheet(f"font-size: {max(12, self._game_font_size // 2)}pt;")
            button.clicked.connect(lambda _checked=False, value=option: self._submit(str(value)))
            self.options_layout.addWidget(button, idx // 2, idx % 2)
            self.option_buttons.append(button)

    def _handle_input_edited(self, text: str) -> None:
        try:
            can_submit = self.game_manager.update_input(text)
        except GameStateError:
            return
        self.next_button.setEnabled(can_submit)

    def _handle_return_pressed(self) -> None:
        if self.next_button.isEnabled():
            self._submit()

    def _handle_hint(self) -> None:
        try:
            self.game_manager.request_hint()
        except GameStateError as exc:
            show_warning(self, "Hint unavailable", str(exc))
            return
        self.show_snapshot(self.game_manager.snapshot())

    def _submit(self, text: str | None = None) -> None:
        try:
            result = self.game_manager.submit_answer(text)
        except GameStateError as exc:
            show_warning(self, "Answer not accepted", str(exc))
            return

        if not result.accepted:
            self.next_button.setEnabled(False)
            return
        if result.game_completed:
            self.on_game_completed()
            return
        self.show_snapshot(self.game_manager.snapshot())

    def apply_theme(self, theme: Theme) -> None:
        self._theme = theme
        muted = Styles.get_muted_label_style(theme)
        self.progress_caption.setStyleSheet(muted)
        self.score_caption.setStyleSheet(muted)
        self.elapsed_label.setStyleSheet(muted)
        self.next_button.setStyleSheet(Styles.get_primary_button_style(theme))

    def set_game_font_size(self, size: int) -> None:
        self._game_font_size = size
        self.answer_input.setStyleSheet(f"font-size: {max(12, size // 2)}pt;")
