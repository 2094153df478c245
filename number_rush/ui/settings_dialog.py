"""Settings dialog for configuring Number Rush preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)


class SettingsDialog(QDialog):
    """Dialog for configuring application settings."""

    def __init__(
        self,
        parent=None,
        ui_font_size: int = 10,
        game_font_size: int = 28,
        dark_theme: bool = False,
        random_seed: int | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._ui_font_size = ui_font_size
        self._game_font_size = game_font_size
        self._dark_theme = dark_theme
        self._random_seed = random_seed

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        font_group = QGroupBox("Font Sizes")
        font_layout = QVBoxLayout()
        font_group.setLayout(font_layout)

        ui_font_row = QHBoxLayout()
        ui_font_label = QLabel("UI Font Size (buttons, labels):")
        self.ui_font_spinbox = QSpinBox()
        self.ui_font_spinbox.setRange(8, 24)
        self.ui_font_spinbox.setValue(self._ui_font_size)
        self.ui_font_spinbox.setSuffix(" pt")
        ui_font_row.addWidget(ui_font_label)
        ui_font_row.addStretch()
        ui_font_row.addWidget(self.ui_font_spinbox)
        font_layout.addLayout(ui_font_row)

        game_font_row = QHBoxLayout()
        game_font_label = QLabel("Question Font Size:")
        game_font_label.setToolTip("Font size for the arithmetic expression and hint options")
        self.game_font_spinbox = QSpinBox()
        self.game_font_spinbox.setRange(14, 64)
        self.game_font_spinbox.setValue(self._game_font_size)
        self.game_font_spinbox.setSuffix(" pt")
        game_font_row.addWidget(game_font_label)
        game_font_row.addStretch()
        game_font_row.addWidget(self.game_font_spinbox)
        font_layout.addLayout(game_font_row)

        layout.addWidget(font_group)

        display_group = QGroupBox("Game Settings")
        display_layout = QVBoxLayout()
        display_group.setLayout(display_layout)

        self.dark_theme_checkbox = QCheckBox("Use dark theme")
        self.dark_theme_checkbox.setChecked(self._dark_theme)
        display_layout.addWidget(self.dark_theme_checkbox)

        self.seed_checkbox = QCheckBox("Use a fixed random seed (same questions every game)")
        self.seed_checkbox.setToolTip("Useful for practising the same set of questions or for demos.")
        self.seed_checkbox.setChecked(self._random_seed is not None)
        display_layout.addWidget(self.seed_checkbox)

        seed_row = QHBoxLayout()
        seed_label = QLabel("Seed:")
        self.seed_spinbox = QSpinBox()
        self.seed_spinbox.setRange(0, 999_999)
        self.seed_spinbox.setValue(self._random_seed or 0)
        self.seed_spinbox.setEnabled(self._random_seed is not None)
        self.seed_checkbox.toggled.connect(self.seed_spinbox.setEnabled)
        seed_row.addWidget(seed_label)
        seed_row.addStretch()
        seed_row.addWidget(self.seed_spinbox)
        display_layout.addLayout(seed_row)

        layout.addWidget(display_group)

        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def get_ui_font_size(self) -> int:
        """Get the selected UI font size."""
        return self.ui_font_spinbox.value()

    def get_game_font_size(self) -> int:
        """Get the selected question font size."""
        return self.game_font_spinbox.value()

    def get_dark_theme(self) -> bool:
        return self.dark_theme_checkbox.isChecked()

    def get_random_seed(self) -> int | None:
        """Get the fixed seed, or None for fresh randomness each game."""
        if not self.seed_checkbox.isChecked():
            return None
        return self.seed_spinbox.value()
