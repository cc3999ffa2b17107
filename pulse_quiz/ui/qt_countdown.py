"""QTimer-backed countdown used by the play view."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import QObject, QTimer

from pulse_quiz.constants.quiz_constants import TICK_INTERVAL_MS


class QtCountdown(QObject):
    """Emits one tick per second on the Qt event loop until stopped."""

    def __init__(self, parent: QObject | None = None, interval_ms: int = TICK_INTERVAL_MS) -> None:
        super().__init__(parent)
        self._on_tick: Callable[[], None] | None = None
        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._handle_timeout)

    def start(self, on_tick: Callable[[], None]) -> None:
        self._on_tick = on_tick
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()
        self._on_tick = None

    def is_running(self) -> bool:
        return self._timer.isActive()

    def _handle_timeout(self) -> None:
        if self._on_tick is not None:
            self._on_tick()
