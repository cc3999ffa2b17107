"""Relational persistence for quizzes and their questions."""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from pulse_quiz.core.db import Base, QuestionRecord, QuizRecord, create_db_engine
from pulse_quiz.core.errors import QuizNotFoundError, QuizStoreError
from pulse_quiz.core.models import Question, Quiz, QuizDraft, QuizSummary

logger = logging.getLogger(__name__)


class QuizStore:
    """Creates and reads quizzes; question order is insertion order."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._session_factory = sessionmaker(bind=engine, expire_on_commit=False)

    @classmethod
    def from_url(cls, database_url: str) -> QuizStore:
        store = cls(create_db_engine(database_url))
        store.create_schema()
        return store

    @property
    def engine(self) -> Engine:
        return self._engine

    def create_schema(self) -> None:
        Base.metadata.create_all(self._engine)

    def dispose(self) -> None:
        self._engine.dispose()

    def list_quizzes(self) -> list[QuizSummary]:
        """Return quiz summaries, newest first."""
        stmt = select(QuizRecord).order_by(QuizRecord.created_at.desc(), QuizRecord.id.desc())
        with self._session_factory() as session:
            records = session.scalars(stmt).all()
            return [_to_summary(record) for record in records]

    def get_quiz(self, quiz_id: int) -> Quiz:
        with self._session_factory() as session:
            record = session.get(QuizRecord, quiz_id)
            if record is None:
                raise QuizNotFoundError(quiz_id)
            questions = session.scalars(
                select(QuestionRecord)
                .where(QuestionRecord.quiz_id == quiz_id)
                .order_by(QuestionRecord.id.asc())
            ).all()
            summary = _to_summary(record)
            return Quiz(
                id=summary.id,
                title=summary.title,
                description=summary.description,
                topic=summary.topic,
                created_at=summary.created_at,
                questions=tuple(_to_question(question) for question in questions),
            )

    def create_quiz(self, draft: QuizDraft) -> int:
        """Insert a quiz and all of its questions in one transaction."""
        try:
            with self._session_factory.begin() as session:
                record = QuizRecord(
                    title=draft.title,
                    description=draft.description,
                    topic=draft.topic,
                )
                session.add(record)
                # Flush the quiz first so question ids follow in draft order.
                session.flush()
                for question in draft.questions:
                    session.add(
                        QuestionRecord(
                            quiz_id=record.id,
                            question_text=question.question_text,
                            option_a=question.option_a,
                            option_b=question.option_b,
                            option_c=question.option_c,
                            option_d=question.option_d,
                            correct_option=question.correct_option,
                            time_limit=question.time_limit,
                        )
                    )
                    session.flush()
                quiz_id = record.id
        except SQLAlchemyError as exc:
            logger.exception("Failed to create quiz %r", draft.title)
            raise QuizStoreError("Failed to create quiz") from exc

        logger.info(
            "Created quiz %d (%r) with %d questions", quiz_id, draft.title, len(draft.questions)
        )
        return quiz_id

    def delete_quiz(self, quiz_id: int) -> None:
        try:
            with self._session_factory.begin() as session:
                record = session.get(QuizRecord, quiz_id)
                if record is None:
                    raise QuizNotFoundError(quiz_id)
                session.delete(record)
        except SQLAlchemyError as exc:
            logger.exception("Failed to delete quiz %d", quiz_id)
            raise QuizStoreError("Failed to delete quiz") from exc
        logger.info("Deleted quiz %d", quiz_id)

    def count_quizzes(self) -> int:
        with self._session_factory() as session:
            return session.scalar(select(func.count()).select_from(QuizRecord)) or 0


def _to_summary(record: QuizRecord) -> QuizSummary:
    return QuizSummary(
        id=record.id,
        title=record.title,
        description=record.description or "",
        topic=record.topic or "",
        created_at=record.created_at,
    )


def _to_question(record: QuestionRecord) -> Question:
    return Question(
        id=record.id,
        question_text=record.question_text,
        option_a=record.option_a,
        option_b=record.option_b,
        option_c=record.option_c,
        option_d=record.option_d,
        correct_option=record.correct_option,
        time_limit=record.time_limit,
    )
