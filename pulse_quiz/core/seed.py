"""Seed an empty quiz store with the default general-knowledge quiz."""

from __future__ import annotations

import logging

from pulse_quiz.core.models import QuestionDraft, QuizDraft
from pulse_quiz.core.services.quiz_store import QuizStore

logger = logging.getLogger(__name__)

DEFAULT_QUIZ_TITLE = "Umumiy Bilimlar"
DEFAULT_QUIZ_DESCRIPTION = "O'zbekiston va dunyo haqida 15 ta qiziqarli savol!"
DEFAULT_QUIZ_TOPIC = "General"

# (question, A, B, C, D, correct)
_DEFAULT_QUESTIONS: tuple[tuple[str, str, str, str, str, str], ...] = (
    ("O'zbekiston mustaqilligi qachon e'lon qilingan?", "1990", "1991", "1992", "1993", "B"),
    ("Dunyodagi eng baland tog' qaysi?", "K2", "Lhotse", "Everest", "Makalu", "C"),
    ("Quyosh tizimidagi eng katta sayyora?", "Mars", "Yupiter", "Saturn", "Neptun", "B"),
    ("Suvning kimyoviy formulasi qanday?", "CO2", "H2O", "O2", "NaCl", "B"),
    ("Alisher Navoiy kim bo'lgan?", "Sarkarda", "Shoir va mutafakkir", "Rassom", "Sayohatchi", "B"),
    ("O'zbekiston poytaxti qaysi shahar?", "Samarqand", "Buxoro", "Toshkent", "Xiva", "C"),
    ("Inson tanasidagi eng katta a'zo nima?", "Yurak", "O'pka", "Teri", "Jigar", "C"),
    ("Bir kunda necha soat bor?", "12", "24", "48", "60", "B"),
    ("Eng tez yuguradigan quruqlik hayvoni?", "Arslon", "Gepard", "Yo'lbars", "Bo'ri", "B"),
    ("Yer yuzida nechta okean bor?", "3", "4", "5", "6", "C"),
    ("O'zbekiston bayrog'ida nechta yulduz bor?", "10", "12", "15", "7", "B"),
    (
        "Kompyuterning asosiy hisoblash qismi nima deb ataladi?",
        "Monitor",
        "Klaviatura",
        "Protsessor",
        "Sichqoncha",
        "C",
    ),
    ("Shaxmat taxtasida jami nechta katak bor?", "32", "64", "100", "81", "B"),
    ("Dunyodagi eng chuqur ko'l qaysi?", "Kaspiy", "Viktoriya", "Baykal", "Orol", "C"),
    ("Amir Temur qayerda tug'ilgan?", "Toshkent", "Samarqand", "Xo'ja Ilg'or (Shahrisabz)", "Buxoro", "C"),
)


def is_seeded(store: QuizStore) -> bool:
    return store.count_quizzes() > 0


def build_default_quiz() -> QuizDraft:
    questions = [
        QuestionDraft.create(text, [a, b, c, d], correct)
        for text, a, b, c, d, correct in _DEFAULT_QUESTIONS
    ]
    return QuizDraft.create(
        DEFAULT_QUIZ_TITLE,
        questions,
        description=DEFAULT_QUIZ_DESCRIPTION,
        topic=DEFAULT_QUIZ_TOPIC,
    )


def seed_all(store: QuizStore) -> int | None:
    """Insert the default quiz unless the store already holds quizzes.

    Returns the new quiz id, or None when nothing was seeded.
    """
    if is_seeded(store):
        return None
    quiz_id = store.create_quiz(build_default_quiz())
    logger.info("Seeded default quiz %d", quiz_id)
    return quiz_id
