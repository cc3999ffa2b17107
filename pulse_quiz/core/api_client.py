"""HTTP client used by the desktop views to talk to the Quiz API."""

from __future__ import annotations

import logging
import time
from dataclasses import asdict
from datetime import datetime
from typing import Any

import httpx

from pulse_quiz.constants.network_constants import API_REQUEST_TIMEOUT_SECONDS
from pulse_quiz.core.errors import QuizApiError, QuizNotFoundError
from pulse_quiz.core.models import Question, Quiz, QuizDraft, QuizSummary

logger = logging.getLogger(__name__)


class QuizApiClient:
    """Thin synchronous wrapper around the /api/quizzes endpoints."""

    def __init__(self, base_url: str | None = None, client: httpx.Client | None = None) -> None:
        if client is None:
            if base_url is None:
                raise ValueError("Either base_url or client must be provided.")
            client = httpx.Client(base_url=base_url, timeout=API_REQUEST_TIMEOUT_SECONDS)
        self._client = client

    def close(self) -> None:
        self._client.close()

    def is_healthy(self) -> bool:
        try:
            response = self._client.get("/health")
        except httpx.HTTPError:
            return False
        return response.status_code == 200

    def wait_until_ready(self, timeout: float = 5.0, interval: float = 0.1) -> bool:
        """Poll /health until the server answers or ``timeout`` seconds pass."""
        deadline = time.monotonic() + timeout
        while True:
            if self.is_healthy():
                return True
            if time.monotonic() >= deadline:
                logger.warning("Quiz server did not become ready within %.1fs", timeout)
                return False
            time.sleep(interval)

    def list_quizzes(self) -> list[QuizSummary]:
        payload = self._request("GET", "/api/quizzes")
        return [_parse_summary(item) for item in payload]

    def get_quiz(self, quiz_id: int) -> Quiz:
        payload = self._request("GET", f"/api/quizzes/{quiz_id}", quiz_id=quiz_id)
        summary = _parse_summary(payload)
        return Quiz(
            id=summary.id,
            title=summary.title,
            description=summary.description,
            topic=summary.topic,
            created_at=summary.created_at,
            questions=tuple(Question(**item) for item in payload.get("questions", [])),
        )

    def create_quiz(self, draft: QuizDraft) -> int:
        body = {
            "title": draft.title,
            "description": draft.description,
            "topic": draft.topic,
            "questions": [asdict(question) for question in draft.questions],
        }
        payload = self._request("POST", "/api/quizzes", json=body)
        return int(payload["id"])

    def delete_quiz(self, quiz_id: int) -> None:
        self._request("DELETE", f"/api/quizzes/{quiz_id}", quiz_id=quiz_id)

    def _request(
        self,
        method: str,
        url: str,
        *,
        quiz_id: int | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        try:
            response = self._client.request(method, url, json=json)
        except httpx.HTTPError as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise QuizApiError(f"Unable to reach the quiz server: {exc}") from exc

        if response.status_code == 404 and quiz_id is not None:
            raise QuizNotFoundError(quiz_id)
        if response.is_error:
            detail = _extract_detail(response)
            logger.error("%s %s returned %d: %s", method, url, response.status_code, detail)
            raise QuizApiError(detail, status_code=response.status_code)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()


def _extract_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    detail = body.get("detail") if isinstance(body, dict) else None
    if isinstance(detail, list):
        # pydantic validation errors
        detail = "; ".join(str(item.get("msg", item)) for item in detail)
    return str(detail or f"Request failed with status {response.status_code}")


def _parse_summary(payload: dict[str, Any]) -> QuizSummary:
    return QuizSummary(
        id=int(payload["id"]),
        title=payload["title"],
        description=payload.get("description") or "",
        topic=payload.get("topic") or "",
        created_at=datetime.fromisoformat(payload["created_at"].replace("Z", "+00:00")),
    )
