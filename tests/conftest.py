from datetime import datetime

import pytest

from pulse_quiz.core.models import Question, QuestionDraft, Quiz, QuizDraft
from pulse_quiz.core.services.quiz_store import QuizStore


@pytest.fixture
def store(tmp_path):
    """Provide a quiz store backed by a temporary SQLite file."""
    quiz_store = QuizStore.from_url(f"sqlite:///{tmp_path / 'test_quizzes.db'}")
    yield quiz_store
    quiz_store.dispose()


@pytest.fixture
def memory_store():
    quiz_store = QuizStore.from_url("sqlite:///:memory:")
    yield quiz_store
    quiz_store.dispose()


def _question_draft(text="What is 2 + 2?", correct="B", time_limit=20):
    return QuestionDraft.create(text, ["3", "4", "5", "6"], correct, time_limit)


def _quiz_draft(title="Arithmetic", count=2, **kwargs):
    questions = [_question_draft(text=f"Question {i + 1}") for i in range(count)]
    return QuizDraft.create(title, questions, **kwargs)


def _quiz(*specs):
    questions = tuple(
        Question(
            id=index + 1,
            question_text=f"Question {index + 1}",
            option_a="Alpha",
            option_b="Bravo",
            option_c="Charlie",
            option_d="Delta",
            correct_option=correct,
            time_limit=time_limit,
        )
        for index, (correct, time_limit) in enumerate(specs)
    )
    return Quiz(
        id=1,
        title="Phonetics",
        description="",
        topic="General",
        created_at=datetime(2024, 1, 1, 12, 0, 0),
        questions=questions,
    )


@pytest.fixture
def make_question_draft():
    return _question_draft


@pytest.fixture
def make_quiz_draft():
    return _quiz_draft


@pytest.fixture
def make_quiz():
    """Build an in-memory quiz from (correct_option, time_limit) pairs."""
    return _quiz


@pytest.fixture
def sample_draft():
    return _quiz_draft(description="Two quick sums", topic="Math")
