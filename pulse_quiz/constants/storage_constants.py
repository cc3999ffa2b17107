"""Storage configuration constants for the quiz store."""

import os
from pathlib import Path

DEFAULT_DATABASE_PATH: Path = Path.home() / ".pulse_quiz" / "quizzes.db"
DATABASE_URL: str = os.environ.get(
    "PULSE_QUIZ_DATABASE_URL", f"sqlite:///{DEFAULT_DATABASE_PATH}"
)
