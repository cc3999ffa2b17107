"""SQLAlchemy schema and engine setup for the quiz store."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    create_engine,
    event,
    func,
)
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship
from sqlalchemy.pool import StaticPool

from pulse_quiz.constants.quiz_constants import DEFAULT_TIME_LIMIT_SECONDS, DEFAULT_TOPIC


class Base(DeclarativeBase):
    pass


class QuizRecord(Base):
    __tablename__ = "quizzes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    topic: Mapped[str | None] = mapped_column(String(64), default=DEFAULT_TOPIC)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.current_timestamp()
    )

    questions: Mapped[list[QuestionRecord]] = relationship(
        back_populates="quiz",
        cascade="all, delete-orphan",
        order_by="QuestionRecord.id",
    )


class QuestionRecord(Base):
    __tablename__ = "questions"
    __table_args__ = (
        CheckConstraint(
            "correct_option IN ('A','B','C','D')",
            name="ck_questions_correct_option",
        ),
        CheckConstraint("time_limit > 0", name="ck_questions_time_limit_positive"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    quiz_id: Mapped[int] = mapped_column(ForeignKey("quizzes.id"), nullable=False, index=True)
    question_text: Mapped[str] = mapped_column(Text, nullable=False)
    option_a: Mapped[str] = mapped_column(Text, nullable=False)
    option_b: Mapped[str] = mapped_column(Text, nullable=False)
    option_c: Mapped[str] = mapped_column(Text, nullable=False)
    option_d: Mapped[str] = mapped_column(Text, nullable=False)
    correct_option: Mapped[str] = mapped_column(String(1), nullable=False)
    time_limit: Mapped[int] = mapped_column(
        Integer, nullable=False, default=DEFAULT_TIME_LIMIT_SECONDS
    )

    quiz: Mapped[QuizRecord] = relationship(back_populates="questions")


def create_db_engine(database_url: str) -> Engine:
    """Return an engine for ``database_url`` with SQLite foreign keys enabled."""
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return create_engine(url)

    database = url.database
    if not database or database == ":memory:":
        # One shared connection so every session sees the same in-memory data.
        engine = create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        Path(database).parent.mkdir(parents=True, exist_ok=True)
        engine = create_engine(url, connect_args={"check_same_thread": False})

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _connection_record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys = ON")
        cursor.close()

    return engine
