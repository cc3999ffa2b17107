from datetime import datetime

import pytest

from pulse_quiz.core.errors import MalformedQuestion, MalformedQuiz
from pulse_quiz.core.models import Question, QuestionDraft, Quiz, QuizDraft


def test_question_draft_normalises_input():
    draft = QuestionDraft.create("  Capital of France? ", [" Paris", "Rome ", "Berlin", "Madrid"], " a ")
    assert draft.question_text == "Capital of France?"
    assert draft.options == ("Paris", "Rome", "Berlin", "Madrid")
    assert draft.correct_option == "A"


def test_question_draft_defaults_time_limit_to_twenty():
    draft = QuestionDraft.create("Q", ["a", "b", "c", "d"], "D")
    assert draft.time_limit == 20


@pytest.mark.parametrize("correct", ["E", "", "AB", None, "1"])
def test_question_draft_rejects_bad_correct_option(correct):
    with pytest.raises(MalformedQuestion):
        QuestionDraft.create("Q", ["a", "b", "c", "d"], correct)


@pytest.mark.parametrize("time_limit", [0, -5, True, 2.5, "20"])
def test_question_draft_rejects_bad_time_limit(time_limit):
    with pytest.raises(MalformedQuestion):
        QuestionDraft.create("Q", ["a", "b", "c", "d"], "A", time_limit)


def test_question_draft_rejects_blank_text_and_options():
    with pytest.raises(MalformedQuestion):
        QuestionDraft.create("   ", ["a", "b", "c", "d"], "A")
    with pytest.raises(MalformedQuestion):
        QuestionDraft.create("Q", ["a", "", "c", "d"], "A")
    with pytest.raises(MalformedQuestion):
        QuestionDraft.create("Q", ["a", "b", "c"], "A")


def test_malformed_question_is_a_value_error():
    assert issubclass(MalformedQuestion, ValueError)


def test_question_validates_on_construction():
    with pytest.raises(MalformedQuestion):
        Question(1, "Q", "a", "b", "c", "d", "Z", 20)
    with pytest.raises(MalformedQuestion):
        Question(1, "Q", "a", "b", "c", "d", "A", 0)


def test_question_requires_time_limit():
    with pytest.raises(MalformedQuestion):
        Question(1, "Q", "a", "b", "c", "d", "A", None)
    assert QuestionDraft.create("Q", ["a", "b", "c", "d"], "A", None).time_limit == 20


def test_question_option_text():
    question = Question(1, "Q", "a", "b", "c", "d", "c", 10)
    assert question.correct_option == "C"
    assert question.option_text("C") == "c"


def test_quiz_draft_requires_title_and_questions():
    question = QuestionDraft.create("Q", ["a", "b", "c", "d"], "A")
    with pytest.raises(MalformedQuiz):
        QuizDraft.create("  ", [question])
    with pytest.raises(MalformedQuiz):
        QuizDraft.create("Title", [])


def test_quiz_draft_defaults():
    question = QuestionDraft.create("Q", ["a", "b", "c", "d"], "A")
    draft = QuizDraft.create(" Title ", [question], description=None, topic="  ")
    assert draft.title == "Title"
    assert draft.description == ""
    assert draft.topic == "General"
    assert draft.questions == (question,)


def test_quiz_summary_drops_questions():
    created = datetime(2024, 5, 1)
    quiz = Quiz(1, "T", "D", "Math", created, (Question(1, "Q", "a", "b", "c", "d", "A", 5),))
    summary = quiz.summary()
    assert quiz.question_count == 1
    assert summary.id == 1
    assert summary.created_at == created
    assert not hasattr(summary, "questions")
