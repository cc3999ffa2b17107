"""Application entry point for PulseQuiz."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from pulse_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from pulse_quiz.constants.storage_constants import DATABASE_URL
from pulse_quiz.core.api_client import QuizApiClient
from pulse_quiz.core.seed import seed_all
from pulse_quiz.core.services.quiz_store import QuizStore
from pulse_quiz.server.api_server import start_api_server
from pulse_quiz.ui.player_main_window import PlayerMainWindow
from pulse_quiz.utils.logging_config import configure_logging


def main() -> None:
    """Open the store, start the API server, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting PulseQuiz...")

    store = QuizStore.from_url(DATABASE_URL)
    seeded_id = seed_all(store)
    if seeded_id is not None:
        logger.info("Seeded default quiz with id %d", seeded_id)

    start_api_server(store, host=DEFAULT_HOST, port=DEFAULT_PORT)
    api_client = QuizApiClient(base_url=f"http://{DEFAULT_HOST}:{DEFAULT_PORT}")
    api_client.wait_until_ready()

    app = QApplication(sys.argv)
    window = PlayerMainWindow(api_client=api_client)
    window.show()
    exit_code = app.exec()

    api_client.close()
    store.dispose()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
