"""Exception hierarchy shared by the store, API and client layers."""


class PulseQuizError(Exception):
    pass


class MalformedQuestion(PulseQuizError, ValueError):
    """Raised when a question fails validation at construction time."""


class MalformedQuiz(PulseQuizError, ValueError):
    """Raised when quiz metadata or its question list is invalid."""


class QuizStoreError(PulseQuizError):
    pass


class QuizNotFoundError(QuizStoreError):
    def __init__(self, quiz_id: int) -> None:
        super().__init__(f"Quiz {quiz_id} not found")
        self.quiz_id = quiz_id


class QuizApiError(PulseQuizError):
    """Raised by the HTTP client when the Quiz API cannot be reached or fails."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class QuizImportError(PulseQuizError):
    """Raised when a quiz definition cannot be parsed."""
