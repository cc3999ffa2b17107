from datetime import datetime

import pytest

from pulse_quiz.core.models import Question, Quiz
from pulse_quiz.core.quiz_exporter import save_quiz_to_file, serialize_quiz
from pulse_quiz.core.quiz_importer import load_quiz_from_file


def test_serialize_writes_header_and_blocks(make_quiz):
    text = serialize_quiz(make_quiz(("B", 20), ("D", 30)))
    lines = text.splitlines()
    assert lines[0] == "TITLE: Phonetics"
    assert lines[1] == "TOPIC: General"
    assert "DESCRIPTION:" not in text
    assert "CORRECT: B" in lines
    assert "TIMELIMIT: 30" in lines
    assert text.count("\n---\n") == 1


def test_saved_file_can_be_imported_again(tmp_path):
    quiz = Quiz(
        id=3,
        title="Multi line",
        description="Keeps line breaks",
        topic="Science",
        created_at=datetime(2024, 1, 1),
        questions=(
            Question(1, "First line\nsecond line", "H2O", "CO2", "O2\nozone", "NaCl", "A", 25),
        ),
    )
    target = tmp_path / "exports" / "science.txt"
    save_quiz_to_file(target, quiz)

    draft = load_quiz_from_file(target)
    assert draft.title == "Multi line"
    assert draft.description == "Keeps line breaks"
    assert draft.topic == "Science"
    question = draft.questions[0]
    assert question.question_text == "First line\nsecond line"
    assert question.option_c == "O2\nozone"
    assert question.correct_option == "A"
    assert question.time_limit == 25


def test_empty_quiz_cannot_be_exported(tmp_path, make_quiz):
    with pytest.raises(ValueError):
        save_quiz_to_file(tmp_path / "empty.txt", make_quiz())


def test_multi_line_description_survives_export_and_import(tmp_path):
    quiz = Quiz(
        id=4,
        title="Notes",
        description="line one\nline two\n\nline four",
        topic="History",
        created_at=datetime(2024, 1, 1),
        questions=(Question(1, "Q?", "a", "b", "c", "d", "B", 10),),
    )
    target = tmp_path / "notes.txt"
    save_quiz_to_file(target, quiz)

    draft = load_quiz_from_file(target)
    assert draft.description == "line one\nline two\n\nline four"
    assert draft.topic == "History"
    assert draft.questions[0].question_text == "Q?"
