"""FastAPI server exposing the quiz store over HTTP."""

from __future__ import annotations

import logging
from datetime import datetime
from threading import Thread

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Response
from pydantic import BaseModel, ConfigDict, Field

from pulse_quiz.constants.about import APP_NAME, APP_VERSION
from pulse_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from pulse_quiz.constants.quiz_constants import DEFAULT_TOPIC
from pulse_quiz.core.errors import (
    MalformedQuestion,
    MalformedQuiz,
    QuizNotFoundError,
    QuizStoreError,
)
from pulse_quiz.core.models import QuestionDraft, QuizDraft
from pulse_quiz.core.services.quiz_store import QuizStore

logger = logging.getLogger(__name__)


class QuestionPayload(BaseModel):
    """Payload schema for one question of a new quiz."""

    question_text: str
    option_a: str
    option_b: str
    option_c: str
    option_d: str
    correct_option: str
    time_limit: int | None = None


class CreateQuizPayload(BaseModel):
    """Payload schema for creating a quiz."""

    title: str
    description: str | None = None
    topic: str | None = DEFAULT_TOPIC
    questions: list[QuestionPayload] = Field(min_length=1)


class QuizSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    topic: str
    created_at: datetime


class QuestionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    question_text: str
    option_a: str
    option_b: str
    option_c: str
    option_d: str
    correct_option: str
    time_limit: int


class QuizResponse(QuizSummaryResponse):
    questions: list[QuestionResponse]


class CreateQuizResponse(BaseModel):
    id: int
    message: str


def _build_draft(payload: CreateQuizPayload) -> QuizDraft:
    try:
        questions = [
            QuestionDraft.create(
                question.question_text,
                [question.option_a, question.option_b, question.option_c, question.option_d],
                question.correct_option,
                question.time_limit,
            )
            for question in payload.questions
        ]
        return QuizDraft.create(
            payload.title,
            questions,
            description=payload.description,
            topic=payload.topic,
        )
    except (MalformedQuestion, MalformedQuiz) as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


def _get_store_dependency(store: QuizStore):
    def dependency() -> QuizStore:
        return store

    return dependency


def create_api_app(store: QuizStore) -> FastAPI:
    """Create a FastAPI application wired to the provided quiz store."""
    app = FastAPI(title=f"{APP_NAME} API", version=APP_VERSION)
    store_dep = _get_store_dependency(store)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/api/quizzes", response_model=list[QuizSummaryResponse])
    def list_quizzes(quiz_store: QuizStore = Depends(store_dep)):
        return quiz_store.list_quizzes()

    @app.get("/api/quizzes/{quiz_id}", response_model=QuizResponse)
    def get_quiz(quiz_id: int, quiz_store: QuizStore = Depends(store_dep)):
        try:
            return quiz_store.get_quiz(quiz_id)
        except QuizNotFoundError as exc:
            raise HTTPException(status_code=404, detail="Quiz not found") from exc

    @app.post("/api/quizzes", status_code=201, response_model=CreateQuizResponse)
    def create_quiz(payload: CreateQuizPayload, quiz_store: QuizStore = Depends(store_dep)):
        draft = _build_draft(payload)
        try:
            quiz_id = quiz_store.create_quiz(draft)
        except QuizStoreError as exc:
            raise HTTPException(status_code=500, detail="Failed to create quiz") from exc
        return CreateQuizResponse(id=quiz_id, message="Quiz created successfully")

    @app.delete("/api/quizzes/{quiz_id}", status_code=204)
    def delete_quiz(quiz_id: int, quiz_store: QuizStore = Depends(store_dep)) -> Response:
        try:
            quiz_store.delete_quiz(quiz_id)
        except QuizNotFoundError as exc:
            raise HTTPException(status_code=404, detail="Quiz not found") from exc
        except QuizStoreError as exc:
            raise HTTPException(status_code=500, detail="Failed to delete quiz") from exc
        return Response(status_code=204)

    return app


def start_api_server(
    store: QuizStore,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_api_app(store)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="QuizApiServer", daemon=True)
    thread.start()
    logger.info("Quiz API listening on http://%s:%d", host, port)
    return thread
