"""Qt UI components for the PulseQuiz desktop client."""

from .dialog_helpers import (
    confirm,
    show_error,
    show_info,
    show_warning,
)
from .player_main_window import PlayerMainWindow
from .qt_countdown import QtCountdown
from .question_renderer import render_question

__all__ = [
    "PlayerMainWindow",
    "QtCountdown",
    "confirm",
    "show_error",
    "show_info",
    "show_warning",
    "render_question",
]
