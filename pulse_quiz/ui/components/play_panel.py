"""Component for playing a quiz against the clock."""

from __future__ import annotations

import logging
from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from pulse_quiz.constants.quiz_constants import (
    OPTION_LETTERS,
    TIME_LIMIT_WARNING_WINDOW_SECONDS,
)
from pulse_quiz.constants.translations import Language, topic_label, translate
from pulse_quiz.constants.ui_constants import DEFAULT_GAME_FONT_SIZE, OPTION_ICONS
from pulse_quiz.core.api_client import QuizApiClient
from pulse_quiz.core.errors import PulseQuizError
from pulse_quiz.core.models import Quiz
from pulse_quiz.core.services.game_session import SessionPhase, SessionState
from pulse_quiz.core.services.session_driver import SessionDriver
from pulse_quiz.styling.styles import Styles
from pulse_quiz.ui.dialog_helpers import show_error
from pulse_quiz.ui.qt_countdown import QtCountdown
from pulse_quiz.ui.question_renderer import render_question

logger = logging.getLogger(__name__)


class PlayPanel(QWidget):
    """Renders whatever the current session state is; all input goes through the driver."""

    def __init__(
        self,
        api_client: QuizApiClient,
        on_home: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.api_client = api_client
        self.on_home = on_home
        self._language = Language.EN
        self._game_font_size = DEFAULT_GAME_FONT_SIZE
        self._quiz: Quiz | None = None
        self._driver: SessionDriver | None = None
        self._rendered_index: int | None = None
        self._countdown = QtCountdown(self)

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.pages = QStackedWidget(self)
        layout.addWidget(self.pages)

        self.loading_page = self._build_loading_page()
        self.lobby_page = self._build_lobby_page()
        self.question_page = self._build_question_page()
        self.result_page = self._build_result_page()
        self.game_over_page = self._build_game_over_page()
        for page in (
            self.loading_page,
            self.lobby_page,
            self.question_page,
            self.result_page,
            self.game_over_page,
        ):
            self.pages.addWidget(page)

        self.retranslate(self._language)

    def _build_loading_page(self) -> QWidget:
        page = QWidget(self)
        page_layout = QVBoxLayout()
        page.setLayout(page_layout)
        self.loading_label = QLabel(page)
        self.loading_label.setAlignment(Qt.AlignCenter)
        page_layout.addWidget(self.loading_label)
        return page

    def _build_lobby_page(self) -> QWidget:
        page = QWidget(self)
        page_layout = QVBoxLayout()
        page.setLayout(page_layout)
        page_layout.addStretch()

        self.lobby_title_label = QLabel(page)
        self.lobby_title_label.setAlignment(Qt.AlignCenter)
        self.lobby_title_label.setWordWrap(True)
        self.lobby_title_label.setStyleSheet(Styles.get_large_label_style(28))
        page_layout.addWidget(self.lobby_title_label)

        self.lobby_description_label = QLabel(page)
        self.lobby_description_label.setAlignment(Qt.AlignCenter)
        self.lobby_description_label.setWordWrap(True)
        page_layout.addWidget(self.lobby_description_label)

        self.lobby_meta_label = QLabel(page)
        self.lobby_meta_label.setAlignment(Qt.AlignCenter)
        self.lobby_meta_label.setStyleSheet(Styles.get_large_label_style(14))
        page_layout.addWidget(self.lobby_meta_label)

        self.lobby_empty_label = QLabel(page)
        self.lobby_empty_label.setAlignment(Qt.AlignCenter)
        self.lobby_empty_label.setVisible(False)
        page_layout.addWidget(self.lobby_empty_label)

        self.start_button = QPushButton(page)
        self.start_button.setStyleSheet(Styles.get_primary_button_style())
        self.start_button.clicked.connect(self._handle_start)
        page_layout.addWidget(self.start_button, alignment=Qt.AlignCenter)

        self.lobby_home_button = QPushButton(page)
        self.lobby_home_button.clicked.connect(self._handle_home)
        page_layout.addWidget(self.lobby_home_button, alignment=Qt.AlignCenter)

        page_layout.addStretch()
        return page

    def _build_question_page(self) -> QWidget:
        page = QWidget(self)
        page_layout = QVBoxLayout()
        page.setLayout(page_layout)

        header_row = QHBoxLayout()
        self.progress_label = QLabel(page)
        header_row.addWidget(self.progress_label)
        header_row.addStretch()
        self.score_label = QLabel(page)
        header_row.addWidget(self.score_label)
        page_layout.addLayout(header_row)

        timer_row = QHBoxLayout()
        self.time_label = QLabel(page)
        self.time_label.setMinimumWidth(90)
        timer_row.addWidget(self.time_label)
        self.time_progress = QProgressBar(page)
        self.time_progress.setTextVisible(False)
        timer_row.addWidget(self.time_progress, stretch=1)
        page_layout.addLayout(timer_row)

        self.question_view = QWebEngineView(page)
        page_layout.addWidget(self.question_view, stretch=1)

        options_grid = QGridLayout()
        self.option_buttons: dict[str, QPushButton] = {}
        for position, letter in enumerate(OPTION_LETTERS):
            button = QPushButton(page)
            button.setMinimumHeight(72)
            button.clicked.connect(lambda _=False, choice=letter: self._handle_answer(choice))
            row, column = divmod(position, 2)
            options_grid.addWidget(button, row, column)
            self.option_buttons[letter] = button
        page_layout.addLayout(options_grid)
        return page

    def _build_result_page(self) -> QWidget:
        page = QWidget(self)
        page_layout = QVBoxLayout()
        page.setLayout(page_layout)
        page_layout.addStretch()

        self.result_banner = QLabel(page)
        self.result_banner.setAlignment(Qt.AlignCenter)
        page_layout.addWidget(self.result_banner)

        self.result_detail_label = QLabel(page)
        self.result_detail_label.setAlignment(Qt.AlignCenter)
        self.result_detail_label.setWordWrap(True)
        page_layout.addWidget(self.result_detail_label)

        self.result_score_label = QLabel(page)
        self.result_score_label.setAlignment(Qt.AlignCenter)
        page_layout.addWidget(self.result_score_label)

        self.next_button = QPushButton(page)
        self.next_button.setStyleSheet(Styles.get_primary_button_style())
        self.next_button.clicked.connect(self._handle_next)
        page_layout.addWidget(self.next_button, alignment=Qt.AlignCenter)

        page_layout.addStretch()
        return page

    def _build_game_over_page(self) -> QWidget:
        page = QWidget(self)
        page_layout = QVBoxLayout()
        page.setLayout(page_layout)
        page_layout.addStretch()

        self.podium_label = QLabel(page)
        self.podium_label.setAlignment(Qt.AlignCenter)
        self.podium_label.setStyleSheet(Styles.get_large_label_style(32))
        page_layout.addWidget(self.podium_label)

        self.completed_label = QLabel(page)
        self.completed_label.setAlignment(Qt.AlignCenter)
        page_layout.addWidget(self.completed_label)

        self.final_score_caption = QLabel(page)
        self.final_score_caption.setAlignment(Qt.AlignCenter)
        page_layout.addWidget(self.final_score_caption)

        self.final_score_label = QLabel(page)
        self.final_score_label.setAlignment(Qt.AlignCenter)
        self.final_score_label.setStyleSheet(Styles.get_large_label_style(40))
        page_layout.addWidget(self.final_score_label)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.home_button = QPushButton(page)
        self.home_button.clicked.connect(self._handle_home)
        button_row.addWidget(self.home_button)
        self.play_again_button = QPushButton(page)
        self.play_again_button.setStyleSheet(Styles.get_primary_button_style())
        self.play_again_button.clicked.connect(self._handle_play_again)
        button_row.addWidget(self.play_again_button)
        button_row.addStretch()
        page_layout.addLayout(button_row)

        page_layout.addStretch()
        return page

    # Session lifecycle

    def load_quiz(self, quiz_id: int) -> bool:
        """Fetch the quiz from the API and open a fresh session in the lobby."""
        self.stop_session()
        self.pages.setCurrentWidget(self.loading_page)
        try:
            quiz = self.api_client.get_quiz(quiz_id)
        except PulseQuizError as exc:
            logger.error("Could not load quiz %d: %s", quiz_id, exc)
            show_error(self, translate(self._language, "server_error"), str(exc))
            return False
        self._open_session(quiz)
        return True

    def stop_session(self) -> None:
        """Close the running session, if any. Safe to call repeatedly."""
        if self._driver is not None:
            self._driver.close()
            self._driver = None
        self._rendered_index = None

    def _open_session(self, quiz: Quiz) -> None:
        self.stop_session()
        self._quiz = quiz
        self._driver = SessionDriver(quiz, self._countdown)
        self._driver.subscribe(self._render)
        self._render(self._driver.state)

    # Player intents

    def _handle_start(self) -> None:
        if self._driver is not None:
            self._driver.start()

    def _handle_answer(self, letter: str) -> None:
        if self._driver is not None:
            self._driver.submit_answer(letter)

    def _handle_next(self) -> None:
        if self._driver is not None:
            self._driver.next_question()

    def _handle_play_again(self) -> None:
        if self._quiz is not None:
            self._open_session(self._quiz)

    def _handle_home(self) -> None:
        self.stop_session()
        self.on_home()

    # Rendering

    def _render(self, state: SessionState) -> None:
        if state.phase is SessionPhase.LOBBY:
            self._render_lobby(state)
            self.pages.setCurrentWidget(self.lobby_page)
        elif state.phase is SessionPhase.QUESTION:
            self._render_question(state)
            self.pages.setCurrentWidget(self.question_page)
        elif state.phase is SessionPhase.RESULT:
            self._render_result(state)
            self.pages.setCurrentWidget(self.result_page)
        else:
            self._render_game_over(state)
            self.pages.setCurrentWidget(self.game_over_page)

    def _render_lobby(self, state: SessionState) -> None:
        if self._quiz is None:
            return
        self.lobby_title_label.setText(self._quiz.title)
        self.lobby_description_label.setText(self._quiz.description)
        self.lobby_meta_label.setText(
            f"{translate(self._language, 'question_count', count=state.question_count)}"
            f"  |  {topic_label(self._language, self._quiz.topic)}"
        )
        self.lobby_empty_label.setVisible(not state.can_start)
        self.start_button.setEnabled(state.can_start)

    def _render_question(self, state: SessionState) -> None:
        question = state.question
        if question is None:
            return
        self.progress_label.setText(
            translate(
                self._language,
                "question_progress",
                number=state.question_number,
                count=state.question_count,
            )
        )
        self.score_label.setText(f"{translate(self._language, 'score')}: {state.score}")

        self.time_progress.setRange(0, question.time_limit)
        self.time_progress.setValue(state.time_remaining)
        self.time_label.setText(f"{translate(self._language, 'time')}: {state.time_remaining}s")
        self.time_label.setStyleSheet(
            Styles.get_timer_style(
                self._game_font_size,
                warning=state.time_remaining <= TIME_LIMIT_WARNING_WINDOW_SECONDS,
            )
        )

        # Ticks only change the clock; avoid reloading the web view every second.
        if self._rendered_index != state.current_index:
            self._rendered_index = state.current_index
            self.question_view.setHtml(render_question(question.question_text, self._game_font_size))
            for letter, button in self.option_buttons.items():
                button.setText(f"{OPTION_ICONS[letter]}  {question.option_text(letter)}")
                button.setStyleSheet(Styles.get_option_button_style(letter, self._game_font_size))

    def _render_result(self, state: SessionState) -> None:
        question = state.question
        if question is None:
            return
        if state.selected_answer is None:
            banner = translate(self._language, "time_up")
        elif state.answered_correctly:
            banner = translate(self._language, "correct")
        else:
            banner = translate(self._language, "incorrect")
        self.result_banner.setText(banner)
        self.result_banner.setStyleSheet(Styles.get_result_banner_style(bool(state.answered_correctly)))

        if state.answered_correctly:
            detail = translate(self._language, "points_awarded", points=state.last_points)
        else:
            answer = f"{question.correct_option}: {question.option_text(question.correct_option)}"
            detail = translate(self._language, "correct_answer_was", answer=answer)
        self.result_detail_label.setText(detail)
        self.result_score_label.setText(f"{translate(self._language, 'score')}: {state.score}")

        next_key = "show_results" if state.is_last_question else "next_question"
        self.next_button.setText(translate(self._language, next_key))

    def _render_game_over(self, state: SessionState) -> None:
        self.final_score_label.setText(f"{state.score:,}")

    def retranslate(self, language: Language) -> None:
        self._language = language
        self.loading_label.setText(translate(language, "loading"))
        self.lobby_empty_label.setText(translate(language, "empty_quiz"))
        self.start_button.setText(translate(language, "start_game"))
        self.lobby_home_button.setText(translate(language, "home"))
        self.podium_label.setText(translate(language, "podium_finish"))
        self.completed_label.setText(translate(language, "completed_quiz"))
        self.final_score_caption.setText(translate(language, "final_score").upper())
        self.home_button.setText(translate(language, "home"))
        self.play_again_button.setText(translate(language, "play_again"))
        if self._driver is not None:
            self._rendered_index = None
            self._render(self._driver.state)

    def apply_font_size(self, font_size: int) -> None:
        self._game_font_size = font_size
        label_style = f"font-size: {font_size}pt;"
        for label in (
            self.progress_label,
            self.score_label,
            self.result_detail_label,
            self.result_score_label,
            self.final_score_caption,
            self.completed_label,
        ):
            label.setStyleSheet(label_style)
        if self._driver is not None:
            self._rendered_index = None
            self._render(self._driver.state)
