"""State machine driving a single player's timed pass through a quiz.

The session is purely local: it never talks to the network and never reads a
clock. Time only moves when a ``Tick`` event is dispatched, which keeps the
whole machine synchronously testable. Events that arrive in the wrong phase
(double clicks, a late tick) are dropped without raising.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto

from pulse_quiz.constants.quiz_constants import (
    OPTION_LETTERS,
    SCORE_FLOOR_POINTS,
    SCORE_SPEED_BONUS_POINTS,
)
from pulse_quiz.core.models import Question, Quiz

logger = logging.getLogger(__name__)


class SessionPhase(Enum):
    """Stage of a play session."""

    LOBBY = auto()
    QUESTION = auto()
    RESULT = auto()
    GAME_OVER = auto()


@dataclass(frozen=True, slots=True)
class Start:
    pass


@dataclass(frozen=True, slots=True)
class Tick:
    pass


@dataclass(frozen=True, slots=True)
class SubmitAnswer:
    option: str | None = None


@dataclass(frozen=True, slots=True)
class NextQuestion:
    pass


SessionEvent = Start | Tick | SubmitAnswer | NextQuestion


@dataclass(frozen=True, slots=True)
class SessionState:
    """Observable snapshot handed to the presentation layer."""

    phase: SessionPhase
    current_index: int
    time_remaining: int
    score: int
    selected_answer: str | None
    question: Question | None
    question_count: int
    last_points: int = 0

    @property
    def question_number(self) -> int:
        return self.current_index + 1

    @property
    def can_start(self) -> bool:
        return self.phase is SessionPhase.LOBBY and self.question_count > 0

    @property
    def is_last_question(self) -> bool:
        return self.question_count > 0 and self.current_index == self.question_count - 1

    @property
    def answered_correctly(self) -> bool | None:
        if self.phase is not SessionPhase.RESULT or self.question is None:
            return None
        return self.selected_answer == self.question.correct_option


SessionListener = Callable[[SessionState], None]


def calculate_points(time_remaining: int, time_limit: int) -> int:
    """Points for a correct answer given the seconds left on the clock.

    ``round(1000 * time_remaining / time_limit) + 500`` with halves rounded up,
    so an instant answer earns 1500 and an answer on the buzzer earns 500.
    """
    if time_limit <= 0:
        raise ValueError("time_limit must be positive")
    remaining = max(0, min(time_remaining, time_limit))
    numerator = 2 * SCORE_SPEED_BONUS_POINTS * remaining + time_limit
    return numerator // (2 * time_limit) + SCORE_FLOOR_POINTS


class GameSession:
    """Lobby -> Question -> Result -> (Question | GameOver) for one quiz."""

    def __init__(self, quiz: Quiz) -> None:
        self._quiz = quiz
        self._phase = SessionPhase.LOBBY
        self._current_index = -1
        self._time_remaining = 0
        self._score = 0
        self._selected_answer: str | None = None
        self._last_points = 0
        self._listeners: list[SessionListener] = []

    @property
    def quiz(self) -> Quiz:
        return self._quiz

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def score(self) -> int:
        return self._score

    @property
    def state(self) -> SessionState:
        return SessionState(
            phase=self._phase,
            current_index=self._current_index,
            time_remaining=self._time_remaining,
            score=self._score,
            selected_answer=self._selected_answer,
            question=self._current_question(),
            question_count=len(self._quiz.questions),
            last_points=self._last_points,
        )

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a render callback; returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, event: SessionEvent) -> SessionState:
        """Apply one event and notify listeners if the state changed."""
        before = self.state
        if isinstance(event, Start):
            self._handle_start()
        elif isinstance(event, Tick):
            self._handle_tick()
        elif isinstance(event, SubmitAnswer):
            self._handle_submit(event.option)
        elif isinstance(event, NextQuestion):
            self._handle_next()
        else:
            raise TypeError(f"Unsupported session event: {event!r}")

        after = self.state
        if after != before:
            for listener in list(self._listeners):
                listener(after)
        return after

    def start(self) -> SessionState:
        return self.dispatch(Start())

    def tick(self) -> SessionState:
        return self.dispatch(Tick())

    def submit_answer(self, option: str | None) -> SessionState:
        return self.dispatch(SubmitAnswer(option))

    def next_question(self) -> SessionState:
        return self.dispatch(NextQuestion())

    def _handle_start(self) -> None:
        if self._phase is not SessionPhase.LOBBY:
            self._ignore("start")
            return
        if not self._quiz.questions:
            logger.info("Quiz %s has no questions; staying in lobby", self._quiz.id)
            return
        self._enter_question(0)

    def _handle_tick(self) -> None:
        if self._phase is not SessionPhase.QUESTION:
            self._ignore("tick")
            return
        self._time_remaining = max(0, self._time_remaining - 1)
        if self._time_remaining == 0:
            logger.debug("Time up on question %d", self._current_index + 1)
            self._handle_submit(None)

    def _handle_submit(self, option: str | None) -> None:
        if self._phase is not SessionPhase.QUESTION:
            self._ignore("submit_answer")
            return
        question = self._current_question()
        assert question is not None
        selected = option.strip().upper() if isinstance(option, str) else None
        if selected not in OPTION_LETTERS:
            selected = None

        points = 0
        if selected is not None and selected == question.correct_option:
            points = calculate_points(self._time_remaining, question.time_limit)
        self._selected_answer = selected
        self._last_points = points
        self._score += points
        self._phase = SessionPhase.RESULT

    def _handle_next(self) -> None:
        if self._phase is not SessionPhase.RESULT:
            self._ignore("next_question")
            return
        if self._current_index >= len(self._quiz.questions) - 1:
            self._phase = SessionPhase.GAME_OVER
            return
        self._enter_question(self._current_index + 1)

    def _enter_question(self, index: int) -> None:
        self._current_index = index
        self._time_remaining = self._quiz.questions[index].time_limit
        self._selected_answer = None
        self._last_points = 0
        self._phase = SessionPhase.QUESTION

    def _current_question(self) -> Question | None:
        if 0 <= self._current_index < len(self._quiz.questions):
            return self._quiz.questions[self._current_index]
        return None

    def _ignore(self, operation: str) -> None:
        logger.debug("Ignoring %s in phase %s", operation, self._phase.name)
