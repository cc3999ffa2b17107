"""Domain models for the quiz application."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from pulse_quiz.constants.quiz_constants import (
    DEFAULT_TIME_LIMIT_SECONDS,
    DEFAULT_TOPIC,
    OPTION_LETTERS,
)
from pulse_quiz.core.errors import MalformedQuestion, MalformedQuiz


@dataclass(frozen=True, slots=True)
class QuestionDraft:
    """Unsaved multiple-choice question as entered by an author."""

    question_text: str
    option_a: str
    option_b: str
    option_c: str
    option_d: str
    correct_option: str
    time_limit: int = DEFAULT_TIME_LIMIT_SECONDS

    @classmethod
    def create(
        cls,
        question_text: str,
        options: list[str] | tuple[str, ...],
        correct_option: str,
        time_limit: int | None = None,
    ) -> QuestionDraft:
        """Validate and normalise author input into a draft.

        Raises MalformedQuestion when the text or an option is blank, when the
        correct option is not one of A-D, or when the time limit is not a
        positive integer number of seconds.
        """
        if len(options) != len(OPTION_LETTERS):
            raise MalformedQuestion("Each question must have exactly four options.")
        cleaned_text = (question_text or "").strip()
        if not cleaned_text:
            raise MalformedQuestion("Question text must not be empty.")
        cleaned_options = [(option or "").strip() for option in options]
        if any(not option for option in cleaned_options):
            raise MalformedQuestion("Option text cannot be empty.")
        return cls(
            cleaned_text,
            *cleaned_options,
            correct_option=_normalize_correct_option(correct_option),
            time_limit=_normalize_time_limit(time_limit),
        )

    @property
    def options(self) -> tuple[str, str, str, str]:
        return (self.option_a, self.option_b, self.option_c, self.option_d)


@dataclass(frozen=True, slots=True)
class Question:
    """Stored question; immutable once loaded into a session."""

    id: int
    question_text: str
    option_a: str
    option_b: str
    option_c: str
    option_d: str
    correct_option: str
    time_limit: int

    def __post_init__(self) -> None:
        # Frozen dataclass: validate in place, values are already normalised.
        if self.time_limit is None:
            raise MalformedQuestion("Stored question is missing its time limit.")
        object.__setattr__(self, "correct_option", _normalize_correct_option(self.correct_option))
        object.__setattr__(self, "time_limit", _normalize_time_limit(self.time_limit))

    @property
    def options(self) -> tuple[str, str, str, str]:
        return (self.option_a, self.option_b, self.option_c, self.option_d)

    def option_text(self, letter: str) -> str:
        return self.options[OPTION_LETTERS.index(letter)]


@dataclass(frozen=True, slots=True)
class QuizSummary:
    """List-view projection of a quiz without its questions."""

    id: int
    title: str
    description: str
    topic: str
    created_at: datetime


@dataclass(frozen=True, slots=True)
class Quiz:
    """A quiz with its questions in play order."""

    id: int
    title: str
    description: str
    topic: str
    created_at: datetime
    questions: tuple[Question, ...] = field(default_factory=tuple)

    @property
    def question_count(self) -> int:
        return len(self.questions)

    def summary(self) -> QuizSummary:
        return QuizSummary(
            id=self.id,
            title=self.title,
            description=self.description,
            topic=self.topic,
            created_at=self.created_at,
        )


@dataclass(frozen=True, slots=True)
class QuizDraft:
    """Unsaved quiz submitted for creation."""

    title: str
    questions: tuple[QuestionDraft, ...]
    description: str = ""
    topic: str = DEFAULT_TOPIC

    @classmethod
    def create(
        cls,
        title: str,
        questions: list[QuestionDraft] | tuple[QuestionDraft, ...],
        description: str | None = None,
        topic: str | None = None,
    ) -> QuizDraft:
        cleaned_title = (title or "").strip()
        if not cleaned_title:
            raise MalformedQuiz("Quiz title must not be empty.")
        if not questions:
            raise MalformedQuiz("Quiz must contain at least one question.")
        return cls(
            title=cleaned_title,
            questions=tuple(questions),
            description=(description or "").strip(),
            topic=(topic or "").strip() or DEFAULT_TOPIC,
        )


def _normalize_correct_option(correct_option: str) -> str:
    letter = correct_option.strip().upper() if isinstance(correct_option, str) else ""
    if letter not in OPTION_LETTERS:
        raise MalformedQuestion("Correct option must be one of A, B, C, or D.")
    return letter


def _normalize_time_limit(time_limit_seconds: int | None) -> int:
    if time_limit_seconds is None:
        return DEFAULT_TIME_LIMIT_SECONDS
    if isinstance(time_limit_seconds, bool) or not isinstance(time_limit_seconds, int):
        raise MalformedQuestion("Time limit must be provided as an integer number of seconds.")
    if time_limit_seconds <= 0:
        raise MalformedQuestion("Time limit must be a positive integer.")
    return time_limit_seconds
