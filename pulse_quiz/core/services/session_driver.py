"""Couples a GameSession to a once-per-second countdown."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from pulse_quiz.core.models import Quiz
from pulse_quiz.core.services.game_session import (
    GameSession,
    SessionListener,
    SessionPhase,
    SessionState,
)

logger = logging.getLogger(__name__)


class Countdown(Protocol):
    """Periodic one-second timer owned by the driver."""

    def start(self, on_tick: Callable[[], None]) -> None: ...

    def stop(self) -> None: ...

    def is_running(self) -> bool: ...


class SessionDriver:
    """Forwards player intents into a session and keeps the countdown in step.

    The countdown runs only while the session is in the QUESTION phase. It is
    stopped before listeners see any state outside QUESTION, so a stale tick
    can never land on the following question.
    """

    def __init__(self, quiz: Quiz, countdown: Countdown) -> None:
        self._session = GameSession(quiz)
        self._countdown = countdown
        self._countdown_active = False
        self._active_index: int | None = None
        self._closed = False
        self._listeners: list[SessionListener] = []
        self._unsubscribe = self._session.subscribe(self._on_session_changed)

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def state(self) -> SessionState:
        return self._session.state

    @property
    def is_closed(self) -> bool:
        return self._closed

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def start(self) -> SessionState:
        if self._closed:
            return self.state
        return self._session.start()

    def submit_answer(self, option: str | None) -> SessionState:
        if self._closed:
            return self.state
        return self._session.submit_answer(option)

    def next_question(self) -> SessionState:
        if self._closed:
            return self.state
        return self._session.next_question()

    def tick(self) -> SessionState:
        if self._closed:
            return self.state
        return self._session.tick()

    def close(self) -> None:
        """Tear down the session; the countdown is stopped at most once."""
        if self._closed:
            return
        self._closed = True
        self._stop_countdown()
        self._unsubscribe()
        self._listeners.clear()

    def _on_session_changed(self, state: SessionState) -> None:
        if state.phase is SessionPhase.QUESTION:
            if self._active_index != state.current_index:
                self._stop_countdown()
                self._start_countdown(state.current_index)
        else:
            self._stop_countdown()
        for listener in list(self._listeners):
            listener(state)

    def _start_countdown(self, index: int) -> None:
        self._active_index = index
        self._countdown_active = True
        self._countdown.start(self.tick)
        logger.debug("Countdown started for question %d", index + 1)

    def _stop_countdown(self) -> None:
        if not self._countdown_active:
            return
        self._countdown_active = False
        self._active_index = None
        self._countdown.stop()
        logger.debug("Countdown stopped")
