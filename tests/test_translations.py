import pytest

from pulse_quiz.constants.quiz_constants import TOPIC_KEYS
from pulse_quiz.constants.translations import (
    TOPIC_LABELS,
    TRANSLATIONS,
    Language,
    topic_label,
    translate,
)


def test_every_language_has_the_same_keys():
    assert set(TRANSLATIONS[Language.EN]) == set(TRANSLATIONS[Language.UZ])


@pytest.mark.parametrize("language", list(Language))
def test_every_topic_is_labelled(language):
    assert set(TOPIC_KEYS) <= set(TOPIC_LABELS[language])


def test_translate_formats_arguments():
    assert translate(Language.EN, "question_progress", number=2, count=5) == "Question 2 of 5"
    assert translate(Language.UZ, "question_count", count=15) == "15 ta savol"


def test_translate_falls_back_to_key():
    assert translate(Language.UZ, "no_such_key") == "no_such_key"


def test_topic_label_passes_unknown_topics_through():
    assert topic_label(Language.UZ, "History") == "Tarix"
    assert topic_label(Language.UZ, "Cooking") == "Cooking"


def test_language_toggle():
    assert Language.EN.toggled() is Language.UZ
    assert Language.UZ.toggled() is Language.EN
    assert Language.EN.toggle_label == "UZB"
    assert Language.UZ.toggle_label == "ENG"


@pytest.mark.parametrize("language", list(Language))
def test_file_transfer_messages_are_translated(language):
    imported = translate(language, "imported_questions", count=3, path="quiz.txt")
    exported = translate(language, "quiz_exported", path="quiz.txt")
    assert "3" in imported and "quiz.txt" in imported
    assert "quiz.txt" in exported
    for key in ("import_failed", "export_failed"):
        assert translate(language, key) != key
    assert translate(Language.UZ, "import_failed") != translate(Language.EN, "import_failed")
