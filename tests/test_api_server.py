import pytest
from fastapi.testclient import TestClient

from pulse_quiz.core.errors import QuizStoreError
from pulse_quiz.server.api_server import create_api_app


def _question_payload(**overrides):
    payload = {
        "question_text": "What is 2 + 2?",
        "option_a": "3",
        "option_b": "4",
        "option_c": "5",
        "option_d": "6",
        "correct_option": "B",
        "time_limit": 15,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def client(store):
    return TestClient(create_api_app(store))


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_list_quizzes_empty(client):
    response = client.get("/api/quizzes")
    assert response.status_code == 200
    assert response.json() == []


def test_list_quizzes_returns_summaries_newest_first(client, store, make_quiz_draft):
    older = store.create_quiz(make_quiz_draft(title="Older"))
    newer = store.create_quiz(make_quiz_draft(title="Newer"))
    body = client.get("/api/quizzes").json()
    assert [item["id"] for item in body] == [newer, older]
    assert set(body[0]) == {"id", "title", "description", "topic", "created_at"}


def test_get_quiz_includes_ordered_questions(client, store, make_quiz_draft):
    quiz_id = store.create_quiz(make_quiz_draft(count=3, topic="Math"))
    response = client.get(f"/api/quizzes/{quiz_id}")
    assert response.status_code == 200
    body = response.json()
    assert body["id"] == quiz_id
    assert body["topic"] == "Math"
    assert [q["question_text"] for q in body["questions"]] == [
        "Question 1",
        "Question 2",
        "Question 3",
    ]
    assert body["questions"][0]["correct_option"] == "B"
    assert body["questions"][0]["time_limit"] == 20


def test_get_missing_quiz_returns_404(client):
    response = client.get("/api/quizzes/12345")
    assert response.status_code == 404
    assert response.json() == {"detail": "Quiz not found"}


def test_create_quiz(client, store):
    response = client.post(
        "/api/quizzes",
        json={
            "title": "Sums",
            "description": "Easy",
            "topic": "Math",
            "questions": [_question_payload(), _question_payload(question_text="1 + 1?", time_limit=None)],
        },
    )
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Quiz created successfully"

    quiz = store.get_quiz(body["id"])
    assert quiz.title == "Sums"
    assert [q.time_limit for q in quiz.questions] == [15, 20]


def test_create_quiz_defaults_topic(client, store):
    response = client.post(
        "/api/quizzes",
        json={"title": "No topic", "questions": [_question_payload()]},
    )
    assert response.status_code == 201
    assert store.get_quiz(response.json()["id"]).topic == "General"


def test_create_quiz_normalises_correct_option(client, store):
    response = client.post(
        "/api/quizzes",
        json={"title": "Lower", "questions": [_question_payload(correct_option="c")]},
    )
    assert response.status_code == 201
    assert store.get_quiz(response.json()["id"]).questions[0].correct_option == "C"


@pytest.mark.parametrize(
    "question",
    [
        _question_payload(correct_option="E"),
        _question_payload(time_limit=0),
        _question_payload(time_limit=-10),
        _question_payload(option_c="   "),
    ],
)
def test_create_quiz_rejects_malformed_question(client, store, question):
    response = client.post("/api/quizzes", json={"title": "Bad", "questions": [question]})
    assert response.status_code == 422
    assert store.count_quizzes() == 0


def test_create_quiz_rejects_empty_question_list(client, store):
    response = client.post("/api/quizzes", json={"title": "Empty", "questions": []})
    assert response.status_code == 422
    assert store.count_quizzes() == 0


def test_create_quiz_rejects_blank_title(client, store):
    response = client.post("/api/quizzes", json={"title": "  ", "questions": [_question_payload()]})
    assert response.status_code == 422
    assert store.count_quizzes() == 0


def test_create_quiz_store_failure_returns_500(client, store, monkeypatch):
    def _fail(draft):
        raise QuizStoreError("Failed to create quiz")

    monkeypatch.setattr(store, "create_quiz", _fail)
    response = client.post("/api/quizzes", json={"title": "Boom", "questions": [_question_payload()]})
    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to create quiz"}


def test_delete_quiz(client, store, make_quiz_draft):
    quiz_id = store.create_quiz(make_quiz_draft())
    response = client.delete(f"/api/quizzes/{quiz_id}")
    assert response.status_code == 204
    assert store.count_quizzes() == 0
    assert client.delete(f"/api/quizzes/{quiz_id}").status_code == 404
