"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "PulseQuiz"
WINDOW_MIN_WIDTH: int = 960
WINDOW_MIN_HEIGHT: int = 680

DEFAULT_UI_FONT_SIZE: int = 10
DEFAULT_GAME_FONT_SIZE: int = 16

# Shape glyph shown on each answer button, keyed by option letter.
OPTION_ICONS: dict[str, str] = {"A": "▲", "B": "◆", "C": "●", "D": "■"}

IMPORT_DIALOG_TITLE: str = "Select quiz file"
IMPORT_FILE_FILTER: str = "Quiz files (*.txt);;All files (*.*)"
EXPORT_DIALOG_TITLE: str = "Save quiz to file"
EXPORT_FILE_FILTER: str = "Quiz files (*.txt);;All files (*.*)"

CREATED_DATE_FORMAT: str = "%Y-%m-%d"
