"""Component listing the available quizzes."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFileDialog,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from pulse_quiz.constants.translations import Language, topic_label, translate
from pulse_quiz.constants.ui_constants import (
    CREATED_DATE_FORMAT,
    EXPORT_DIALOG_TITLE,
    EXPORT_FILE_FILTER,
)
from pulse_quiz.core.api_client import QuizApiClient
from pulse_quiz.core.errors import PulseQuizError
from pulse_quiz.core.models import QuizSummary
from pulse_quiz.core.quiz_exporter import save_quiz_to_file
from pulse_quiz.styling.styles import Styles
from pulse_quiz.ui.dialog_helpers import confirm, show_error, show_info

logger = logging.getLogger(__name__)

_CARD_COLUMNS = 3


class BrowserPanel(QWidget):
    """Grid of quiz cards with Play, Export and Delete actions."""

    def __init__(
        self,
        api_client: QuizApiClient,
        on_play: Callable[[int], None],
        on_create: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.api_client = api_client
        self.on_play = on_play
        self.on_create = on_create
        self._language = Language.EN
        self._quizzes: list[QuizSummary] = []

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.hero_label = QLabel(self)
        self.hero_label.setAlignment(Qt.AlignCenter)
        self.hero_label.setStyleSheet(Styles.get_large_label_style(28))
        layout.addWidget(self.hero_label)

        self.subtitle_label = QLabel(self)
        self.subtitle_label.setAlignment(Qt.AlignCenter)
        self.subtitle_label.setStyleSheet(Styles.get_secondary_label_style())
        layout.addWidget(self.subtitle_label)

        action_row = QHBoxLayout()
        action_row.addStretch()
        self.refresh_button = QPushButton(self)
        self.refresh_button.clicked.connect(self.refresh)
        action_row.addWidget(self.refresh_button)
        layout.addLayout(action_row)

        self.scroll_area = QScrollArea(self)
        self.scroll_area.setWidgetResizable(True)
        self.cards_container = QWidget(self.scroll_area)
        self.cards_layout = QGridLayout()
        self.cards_container.setLayout(self.cards_layout)
        self.scroll_area.setWidget(self.cards_container)
        layout.addWidget(self.scroll_area, stretch=1)

        self.empty_label = QLabel(self)
        self.empty_label.setAlignment(Qt.AlignCenter)
        self.empty_label.setVisible(False)
        layout.addWidget(self.empty_label)

        self.empty_create_button = QPushButton(self)
        self.empty_create_button.setStyleSheet(Styles.get_primary_button_style())
        self.empty_create_button.clicked.connect(self.on_create)
        self.empty_create_button.setVisible(False)
        layout.addWidget(self.empty_create_button, alignment=Qt.AlignCenter)

        self.retranslate(self._language)

    def refresh(self) -> None:
        """Reload the quiz list from the API."""
        try:
            self._quizzes = self.api_client.list_quizzes()
        except PulseQuizError as exc:
            logger.error("Could not load quizzes: %s", exc)
            self._quizzes = []
            self._rebuild_cards()
            show_error(self, translate(self._language, "server_error"), str(exc))
            return
        self._rebuild_cards()

    def _rebuild_cards(self) -> None:
        while self.cards_layout.count():
            item = self.cards_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

        for position, quiz in enumerate(self._quizzes):
            row, column = divmod(position, _CARD_COLUMNS)
            self.cards_layout.addWidget(self._build_card(quiz), row, column)

        is_empty = not self._quizzes
        self.scroll_area.setVisible(not is_empty)
        self.empty_label.setVisible(is_empty)
        self.empty_create_button.setVisible(is_empty)

    def _build_card(self, quiz: QuizSummary) -> QGroupBox:
        card = QGroupBox(self.cards_container)
        card_layout = QVBoxLayout()
        card.setLayout(card_layout)

        meta_row = QHBoxLayout()
        topic = QLabel(topic_label(self._language, quiz.topic).upper(), card)
        topic.setStyleSheet("font-weight: bold; font-size: 9pt;")
        meta_row.addWidget(topic)
        meta_row.addStretch()
        created = QLabel(quiz.created_at.strftime(CREATED_DATE_FORMAT), card)
        meta_row.addWidget(created)
        card_layout.addLayout(meta_row)

        title = QLabel(quiz.title, card)
        title.setWordWrap(True)
        title.setStyleSheet(Styles.get_large_label_style(16))
        card_layout.addWidget(title)

        description = QLabel(quiz.description, card)
        description.setWordWrap(True)
        description.setStyleSheet(Styles.get_secondary_label_style())
        card_layout.addWidget(description)
        card_layout.addStretch()

        play_button = QPushButton(f"▶ {translate(self._language, 'play_now')}", card)
        play_button.setStyleSheet(Styles.get_primary_button_style())
        play_button.clicked.connect(lambda _=False, quiz_id=quiz.id: self.on_play(quiz_id))
        card_layout.addWidget(play_button)

        secondary_row = QHBoxLayout()
        export_button = QPushButton(translate(self._language, "export"), card)
        export_button.clicked.connect(lambda _=False, quiz_id=quiz.id: self._handle_export(quiz_id))
        secondary_row.addWidget(export_button)
        delete_button = QPushButton(translate(self._language, "delete"), card)
        delete_button.clicked.connect(lambda _=False, summary=quiz: self._handle_delete(summary))
        secondary_row.addWidget(delete_button)
        card_layout.addLayout(secondary_row)
        return card

    def _handle_delete(self, quiz: QuizSummary) -> None:
        message = translate(self._language, "confirm_delete", title=quiz.title)
        if not confirm(self, translate(self._language, "delete"), message):
            return
        try:
            self.api_client.delete_quiz(quiz.id)
        except PulseQuizError as exc:
            show_error(self, translate(self._language, "server_error"), str(exc))
            return
        self.refresh()

    def _handle_export(self, quiz_id: int) -> None:
        try:
            quiz = self.api_client.get_quiz(quiz_id)
        except PulseQuizError as exc:
            show_error(self, translate(self._language, "server_error"), str(exc))
            return

        default_path = Path.cwd() / f"{quiz.title.replace(' ', '_')}.txt"
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            EXPORT_DIALOG_TITLE,
            str(default_path),
            EXPORT_FILE_FILTER,
        )
        if not file_path:
            return

        try:
            save_quiz_to_file(Path(file_path), quiz)
        except (OSError, ValueError) as exc:
            show_error(self, translate(self._language, "export_failed"), str(exc))
            return
        show_info(
            self,
            translate(self._language, "export"),
            translate(self._language, "quiz_exported", path=file_path),
        )

    def retranslate(self, language: Language) -> None:
        self._language = language
        self.hero_label.setText(translate(language, "ready_to_pulse"))
        self.subtitle_label.setText(translate(language, "hero_subtitle"))
        self.refresh_button.setText(translate(language, "refresh"))
        self.empty_label.setText(translate(language, "no_quizzes"))
        self.empty_create_button.setText(f"+ {translate(language, 'create')}")
        self._rebuild_cards()
