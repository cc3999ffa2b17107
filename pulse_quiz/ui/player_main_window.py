"""Qt main window switching between the browse, create and play views."""

from __future__ import annotations

from enum import Enum, auto

from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from pulse_quiz.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from pulse_quiz.constants.translations import Language, translate
from pulse_quiz.constants.ui_constants import (
    DEFAULT_GAME_FONT_SIZE,
    DEFAULT_UI_FONT_SIZE,
    WINDOW_MIN_HEIGHT,
    WINDOW_MIN_WIDTH,
    WINDOW_TITLE,
)
from pulse_quiz.core.api_client import QuizApiClient
from pulse_quiz.styling.styles import Styles
from pulse_quiz.ui.components.browser_panel import BrowserPanel
from pulse_quiz.ui.components.creation_panel import CreationPanel
from pulse_quiz.ui.components.play_panel import PlayPanel
from pulse_quiz.ui.dialog_helpers import show_info
from pulse_quiz.ui.settings_dialog import SettingsDialog


class PlayerMode(Enum):
    """Which view fills the main window."""

    BROWSE = auto()
    CREATE = auto()
    PLAY = auto()


class PlayerMainWindow(QMainWindow):
    """Main Qt window orchestrating the three views."""

    def __init__(self, api_client: QuizApiClient) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)

        self.api_client = api_client
        self._mode = PlayerMode.BROWSE
        self._language = Language.EN
        self._ui_font_size: int = DEFAULT_UI_FONT_SIZE
        self._game_font_size: int = DEFAULT_GAME_FONT_SIZE

        self._build_ui()
        self._apply_styles()
        self._retranslate()
        self.browser_panel.refresh()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_nav_bar(root_layout)

        self.mode_stack = QStackedWidget(self)
        self.browser_panel = BrowserPanel(
            self.api_client,
            on_play=self._handle_play,
            on_create=self._show_create,
            parent=self,
        )
        self.creation_panel = CreationPanel(
            self.api_client,
            on_saved=self._handle_quiz_saved,
            on_cancel=self._show_browse,
            parent=self,
        )
        self.play_panel = PlayPanel(
            self.api_client,
            on_home=self._show_browse,
            parent=self,
        )
        self.mode_stack.addWidget(self.browser_panel)
        self.mode_stack.addWidget(self.creation_panel)
        self.mode_stack.addWidget(self.play_panel)
        root_layout.addWidget(self.mode_stack)

        self._set_mode(PlayerMode.BROWSE)

    def _build_nav_bar(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()

        self.brand_label = QLabel(APP_NAME, self)
        self.brand_label.setStyleSheet(Styles.get_large_label_style(18))
        button_row.addWidget(self.brand_label)
        button_row.addStretch()

        self.home_button = QPushButton(self)
        self.home_button.setCheckable(True)
        self.home_button.clicked.connect(self._show_browse)
        button_row.addWidget(self.home_button)

        self.create_button = QPushButton(self)
        self.create_button.setCheckable(True)
        self.create_button.clicked.connect(self._show_create)
        button_row.addWidget(self.create_button)

        self.language_button = QPushButton(self)
        self.language_button.clicked.connect(self._handle_toggle_language)
        button_row.addWidget(self.language_button)

        self.about_button = QPushButton(self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton(self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.settings_button = QPushButton(self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        layout.addLayout(button_row)

    def _set_mode(self, mode: PlayerMode) -> None:
        if self._mode is PlayerMode.PLAY and mode is not PlayerMode.PLAY:
            self.play_panel.stop_session()
        self._mode = mode
        self.home_button.setChecked(mode is PlayerMode.BROWSE)
        self.create_button.setChecked(mode is PlayerMode.CREATE)

        index_map = {
            PlayerMode.BROWSE: 0,
            PlayerMode.CREATE: 1,
            PlayerMode.PLAY: 2,
        }
        self.mode_stack.setCurrentIndex(index_map[mode])

    def _show_browse(self) -> None:
        self._set_mode(PlayerMode.BROWSE)
        self.browser_panel.refresh()

    def _show_create(self) -> None:
        self._set_mode(PlayerMode.CREATE)

    def _handle_play(self, quiz_id: int) -> None:
        self._set_mode(PlayerMode.PLAY)
        if not self.play_panel.load_quiz(quiz_id):
            self._show_browse()

    def _handle_quiz_saved(self, quiz_id: int) -> None:
        self._show_browse()

    def _handle_toggle_language(self) -> None:
        self._language = self._language.toggled()
        self._retranslate()

    def _retranslate(self) -> None:
        language = self._language
        self.home_button.setText(translate(language, "home"))
        self.create_button.setText(f"+ {translate(language, 'create')}")
        self.language_button.setText(language.toggle_label)
        self.about_button.setText(translate(language, "about"))
        self.help_button.setText(translate(language, "help"))
        self.settings_button.setText(translate(language, "settings"))
        self.browser_panel.retranslate(language)
        self.creation_panel.retranslate(language)
        self.play_panel.retranslate(language)

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details, font_point_size=self._ui_font_size)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT, font_point_size=self._ui_font_size)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            self._ui_font_size,
            self._game_font_size,
            language=self._language,
        )
        if dialog.exec():
            self._ui_font_size = dialog.get_ui_font_size()
            self._game_font_size = dialog.get_game_font_size()
            self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style())

        ui_style = f"font-size: {self._ui_font_size}pt;"
        buttons = [
            self.home_button,
            self.create_button,
            self.language_button,
            self.about_button,
            self.help_button,
            self.settings_button,
        ]
        for button in buttons:
            button.setStyleSheet(ui_style)

        self.creation_panel.apply_font_size(self._ui_font_size)
        self.play_panel.apply_font_size(self._game_font_size)

    def closeEvent(self, event) -> None:  # noqa: N802
        self.play_panel.stop_session()
        super().closeEvent(event)
