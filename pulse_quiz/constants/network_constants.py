"""Network configuration constants for the quiz application."""

import os

DEFAULT_HOST: str = os.environ.get("PULSE_QUIZ_HOST", "127.0.0.1")
DEFAULT_PORT: int = int(os.environ.get("PULSE_QUIZ_PORT", "8000"))
API_REQUEST_TIMEOUT_SECONDS: float = 5.0
