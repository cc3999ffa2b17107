"""Component for authoring a new quiz."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from PySide6.QtWidgets import (
    QButtonGroup,
    QComboBox,
    QFileDialog,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPlainTextEdit,
    QPushButton,
    QRadioButton,
    QScrollArea,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from pulse_quiz.constants.quiz_constants import (
    DEFAULT_TIME_LIMIT_SECONDS,
    OPTION_LETTERS,
    TOPIC_KEYS,
)
from pulse_quiz.constants.translations import Language, topic_label, translate
from pulse_quiz.constants.ui_constants import IMPORT_DIALOG_TITLE, IMPORT_FILE_FILTER
from pulse_quiz.core.api_client import QuizApiClient
from pulse_quiz.core.errors import MalformedQuestion, MalformedQuiz, PulseQuizError, QuizImportError
from pulse_quiz.core.models import QuestionDraft, QuizDraft
from pulse_quiz.core.quiz_importer import load_quiz_from_file
from pulse_quiz.styling.styles import Styles
from pulse_quiz.ui.dialog_helpers import show_error, show_warning

logger = logging.getLogger(__name__)


class QuestionEditor(QGroupBox):
    """Inputs for one question: text, four options, correct option and time limit."""

    def __init__(self, on_remove: Callable[[QuestionEditor], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._on_remove = on_remove
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header_row = QHBoxLayout()
        self.time_limit_label = QLabel(self)
        header_row.addWidget(self.time_limit_label)
        self.time_limit_spinbox = QSpinBox(self)
        self.time_limit_spinbox.setRange(5, 600)
        self.time_limit_spinbox.setSingleStep(5)
        self.time_limit_spinbox.setSuffix(" s")
        self.time_limit_spinbox.setValue(DEFAULT_TIME_LIMIT_SECONDS)
        header_row.addWidget(self.time_limit_spinbox)
        header_row.addStretch()
        self.remove_button = QPushButton(self)
        self.remove_button.clicked.connect(lambda: self._on_remove(self))
        header_row.addWidget(self.remove_button)
        layout.addLayout(header_row)

        self.question_input = QPlainTextEdit(self)
        self.question_input.setMaximumHeight(80)
        layout.addWidget(self.question_input)

        self.correct_group = QButtonGroup(self)
        self.option_inputs: list[QLineEdit] = []
        for index, letter in enumerate(OPTION_LETTERS):
            option_row = QHBoxLayout()
            badge = QLabel(letter, self)
            badge.setFixedWidth(32)
            badge.setStyleSheet(Styles.get_option_badge_style(letter))
            option_row.addWidget(badge)
            option_input = QLineEdit(self)
            option_row.addWidget(option_input, stretch=1)
            self.option_inputs.append(option_input)
            radio = QRadioButton(self)
            self.correct_group.addButton(radio, index)
            option_row.addWidget(radio)
            layout.addLayout(option_row)
        self.correct_group.button(0).setChecked(True)

    def set_number(self, number: int, language: Language) -> None:
        self.setTitle(f"{translate(language, 'question')} {number}")

    def retranslate(self, language: Language) -> None:
        self.time_limit_label.setText(translate(language, "time_limit"))
        self.remove_button.setText(translate(language, "remove_question"))
        self.question_input.setPlaceholderText(translate(language, "type_question"))
        for letter, option_input in zip(OPTION_LETTERS, self.option_inputs):
            option_input.setPlaceholderText(f"{translate(language, 'option')} {letter}")
        for index in range(len(OPTION_LETTERS)):
            self.correct_group.button(index).setToolTip(translate(language, "correct_option"))

    def populate(self, draft: QuestionDraft) -> None:
        self.question_input.setPlainText(draft.question_text)
        for option_input, text in zip(self.option_inputs, draft.options):
            option_input.setText(text)
        self.correct_group.button(OPTION_LETTERS.index(draft.correct_option)).setChecked(True)
        self.time_limit_spinbox.setValue(draft.time_limit)

    def build_draft(self) -> QuestionDraft:
        checked = self.correct_group.checkedId()
        return QuestionDraft.create(
            self.question_input.toPlainText(),
            [field.text() for field in self.option_inputs],
            OPTION_LETTERS[checked] if checked >= 0 else "",
            int(self.time_limit_spinbox.value()),
        )


class CreationPanel(QWidget):
    """UI component for composing a quiz and posting it to the API."""

    def __init__(
        self,
        api_client: QuizApiClient,
        on_saved: Callable[[int], None],
        on_cancel: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.api_client = api_client
        self.on_saved = on_saved
        self.on_cancel = on_cancel
        self._language = Language.EN
        self._editors: list[QuestionEditor] = []

        self._build_ui()
        self.reset_state()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header_row = QHBoxLayout()
        self.back_button = QPushButton("←", self)
        self.back_button.setFixedWidth(48)
        self.back_button.clicked.connect(self.on_cancel)
        header_row.addWidget(self.back_button)
        self.heading_label = QLabel(self)
        self.heading_label.setStyleSheet(Styles.get_large_label_style(24))
        header_row.addWidget(self.heading_label, stretch=1)
        layout.addLayout(header_row)

        self.details_group = QGroupBox(self)
        details_layout = QFormLayout()
        self.details_group.setLayout(details_layout)
        self.title_label = QLabel(self)
        self.title_input = QLineEdit(self)
        details_layout.addRow(self.title_label, self.title_input)
        self.topic_label = QLabel(self)
        self.topic_combo = QComboBox(self)
        details_layout.addRow(self.topic_label, self.topic_combo)
        self.description_label = QLabel(self)
        self.description_input = QPlainTextEdit(self)
        self.description_input.setMaximumHeight(70)
        details_layout.addRow(self.description_label, self.description_input)
        layout.addWidget(self.details_group)

        self.scroll_area = QScrollArea(self)
        self.scroll_area.setWidgetResizable(True)
        self.questions_container = QWidget(self.scroll_area)
        self.questions_layout = QVBoxLayout()
        self.questions_layout.addStretch()
        self.questions_container.setLayout(self.questions_layout)
        self.scroll_area.setWidget(self.questions_container)
        layout.addWidget(self.scroll_area, stretch=1)

        action_row = QHBoxLayout()
        self.add_button = QPushButton(self)
        self.add_button.clicked.connect(lambda: self._add_editor())
        action_row.addWidget(self.add_button)
        self.import_button = QPushButton(self)
        self.import_button.clicked.connect(self._handle_import)
        action_row.addWidget(self.import_button)
        action_row.addStretch()
        self.save_button = QPushButton(self)
        self.save_button.setStyleSheet(Styles.get_primary_button_style())
        self.save_button.clicked.connect(self._handle_save)
        action_row.addWidget(self.save_button)
        layout.addLayout(action_row)

        self.status_label = QLabel("", self)
        layout.addWidget(self.status_label)

    def reset_state(self) -> None:
        """Clear all inputs and start again with a single empty question."""
        self.title_input.clear()
        self.description_input.clear()
        for editor in list(self._editors):
            self._discard_editor(editor)
        self._add_editor()
        self.status_label.setText("")
        self.retranslate(self._language)
        self.topic_combo.setCurrentIndex(0)

    def _add_editor(self, draft: QuestionDraft | None = None) -> QuestionEditor:
        editor = QuestionEditor(self._remove_editor, self.questions_container)
        editor.retranslate(self._language)
        if draft is not None:
            editor.populate(draft)
        # Keep the trailing stretch last.
        self.questions_layout.insertWidget(self.questions_layout.count() - 1, editor)
        self._editors.append(editor)
        self._renumber()
        return editor

    def _remove_editor(self, editor: QuestionEditor) -> None:
        if len(self._editors) <= 1:
            return
        self._discard_editor(editor)
        self._renumber()

    def _discard_editor(self, editor: QuestionEditor) -> None:
        self._editors.remove(editor)
        self.questions_layout.removeWidget(editor)
        editor.deleteLater()

    def _renumber(self) -> None:
        for number, editor in enumerate(self._editors, start=1):
            editor.set_number(number, self._language)
            editor.remove_button.setEnabled(len(self._editors) > 1)

    def build_draft(self) -> QuizDraft:
        questions = []
        for number, editor in enumerate(self._editors, start=1):
            try:
                questions.append(editor.build_draft())
            except MalformedQuestion as exc:
                raise MalformedQuestion(
                    f"{translate(self._language, 'question')} {number}: {exc}"
                ) from exc
        return QuizDraft.create(
            self.title_input.text(),
            questions,
            description=self.description_input.toPlainText(),
            topic=self.topic_combo.currentData(),
        )

    def _handle_save(self) -> None:
        try:
            draft = self.build_draft()
        except (MalformedQuestion, MalformedQuiz) as exc:
            show_warning(self, translate(self._language, "save_quiz"), str(exc))
            return

        try:
            quiz_id = self.api_client.create_quiz(draft)
        except PulseQuizError as exc:
            show_error(self, translate(self._language, "server_error"), str(exc))
            return

        logger.info("Saved quiz %d (%s)", quiz_id, draft.title)
        self.status_label.setText(translate(self._language, "quiz_saved"))
        self.reset_state()
        self.on_saved(quiz_id)

    def _handle_import(self) -> None:
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            IMPORT_DIALOG_TITLE,
            str(Path.home()),
            IMPORT_FILE_FILTER,
        )
        if not file_path:
            return

        try:
            imported = load_quiz_from_file(Path(file_path))
        except (OSError, QuizImportError) as exc:
            show_error(self, translate(self._language, "import_failed"), str(exc))
            return

        self.title_input.setText(imported.title)
        self.description_input.setPlainText(imported.description)
        topic_index = self.topic_combo.findData(imported.topic)
        if topic_index < 0:
            self.topic_combo.addItem(imported.topic, userData=imported.topic)
            topic_index = self.topic_combo.count() - 1
        self.topic_combo.setCurrentIndex(topic_index)

        for editor in list(self._editors):
            self._discard_editor(editor)
        for question in imported.questions:
            self._add_editor(question)
        self.status_label.setText(
            translate(self._language, "imported_questions", count=len(imported.questions), path=file_path)
        )

    def retranslate(self, language: Language) -> None:
        self._language = language
        self.heading_label.setText(translate(language, "create_a_quiz"))
        self.details_group.setTitle(translate(language, "quiz_details"))
        self.title_label.setText(translate(language, "title"))
        self.topic_label.setText(translate(language, "topic"))
        self.description_label.setText(translate(language, "description"))
        self.add_button.setText(f"+ {translate(language, 'add_question')}")
        self.import_button.setText(translate(language, "import_file"))
        self.save_button.setText(translate(language, "save_quiz"))

        current_topic = self.topic_combo.currentData()
        self.topic_combo.clear()
        for key in TOPIC_KEYS:
            self.topic_combo.addItem(topic_label(language, key), userData=key)
        restored = self.topic_combo.findData(current_topic)
        if restored >= 0:
            self.topic_combo.setCurrentIndex(restored)
        elif current_topic:
            self.topic_combo.addItem(current_topic, userData=current_topic)
            self.topic_combo.setCurrentIndex(self.topic_combo.count() - 1)

        for editor in self._editors:
            editor.retranslate(language)
        self._renumber()

    def apply_font_size(self, font_size: int) -> None:
        style = f"font-size: {font_size}pt;"
        for button in (self.add_button, self.import_button, self.back_button):
            button.setStyleSheet(style)
