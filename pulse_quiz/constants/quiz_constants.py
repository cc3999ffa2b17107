"""Quiz-related constants shared across UI and core layers."""

OPTION_LETTERS: tuple[str, ...] = ("A", "B", "C", "D")
DEFAULT_TIME_LIMIT_SECONDS: int = 20
DEFAULT_TOPIC: str = "General"
TOPIC_KEYS: tuple[str, ...] = (
    "General",
    "Science",
    "History",
    "Geography",
    "Math",
    "Sport",
    "Technology",
    "Art",
)

# Scoring: a correct answer earns the floor plus a share of the bonus
# proportional to the time left on the clock.
SCORE_FLOOR_POINTS: int = 500
SCORE_SPEED_BONUS_POINTS: int = 1000

TICK_INTERVAL_MS: int = 1000
TIME_LIMIT_WARNING_WINDOW_SECONDS: int = 5
