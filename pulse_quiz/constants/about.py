"""Static metadata describing PulseQuiz."""

APP_NAME = "PulseQuiz"
APP_VERSION = "0.1"
APP_LICENSE = "Apache-2.0"
APP_ABOUT_TEXT = (
    "PulseQuiz is a quiz host built with Qt and FastAPI. "
    "Browse quizzes, author new ones with multiple-choice questions, "
    "and play them against the clock: faster correct answers score more."
)

HELP_TEXT = (
    "Pick a quiz from the list and press Play. Each question has a countdown; "
    "a correct answer scores 500 points plus up to 1000 more depending on how "
    "much time is left. When the timer runs out the question counts as unanswered.\n\n"
    "Quizzes can also be imported from a .txt file:\n\n"
    "TITLE: Capitals\nTOPIC: Geography\n\n"
    "Q: What is the capital of Uzbekistan?\n"
    "A: Samarkand\nB: Bukhara\nC: Tashkent\nD: Khiva\n"
    "CORRECT: C\nTIMELIMIT: 20"
)
