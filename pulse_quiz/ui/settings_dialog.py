"""Settings dialog for PulseQuiz preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from pulse_quiz.constants.translations import Language, translate

_UI_FONT_RANGE = (8, 24)
_GAME_FONT_RANGE = (10, 40)


class SettingsDialog(QDialog):
    """Lets the player pick the interface and in-game font sizes."""

    def __init__(
        self,
        parent: QWidget | None = None,
        ui_font_size: int = 10,
        game_font_size: int = 16,
        language: Language = Language.EN,
    ) -> None:
        super().__init__(parent)
        self._language = language
        self.setWindowTitle(translate(language, "settings"))
        self.setModal(True)
        self.setMinimumWidth(380)

        self.ui_font_spinbox = self._make_spinbox(_UI_FONT_RANGE, ui_font_size)
        self.game_font_spinbox = self._make_spinbox(_GAME_FONT_RANGE, game_font_size)
        self._build_ui()

    @staticmethod
    def _make_spinbox(bounds: tuple[int, int], value: int) -> QSpinBox:
        spinbox = QSpinBox()
        spinbox.setRange(*bounds)
        spinbox.setValue(max(bounds[0], min(bounds[1], value)))
        spinbox.setSuffix(" pt")
        return spinbox

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        font_group = QGroupBox(translate(self._language, "font_sizes"))
        font_layout = QVBoxLayout()
        font_group.setLayout(font_layout)
        for key, spinbox in (
            ("ui_font_size", self.ui_font_spinbox),
            ("game_font_size", self.game_font_spinbox),
        ):
            row = QHBoxLayout()
            row.addWidget(QLabel(translate(self._language, key)))
            row.addStretch()
            row.addWidget(spinbox)
            font_layout.addLayout(row)
        layout.addWidget(font_group)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.cancel_button = QPushButton(translate(self._language, "cancel"))
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)
        self.apply_button = QPushButton(translate(self._language, "apply"))
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)
        layout.addLayout(button_row)

    def get_ui_font_size(self) -> int:
        return self.ui_font_spinbox.value()

    def get_game_font_size(self) -> int:
        return self.game_font_spinbox.value()
