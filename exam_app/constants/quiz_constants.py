"""Quiz-related constants shared across UI and core layers."""

SECONDS_PER_QUESTION: int = 60
DEFAULT_QUESTION_COUNT: int = 10
TICK_INTERVAL_MS: int = 1000
TIME_WARNING_THRESHOLD_SECONDS: int = 60
GOOD_SCORE_PERCENTAGE: int = 70
AVERAGE_SCORE_PERCENTAGE: int = 50
RECENT_QUIZ_LIMIT: int = 3
FEATURED_EXAM_LIMIT: int = 3
DEFAULT_DISPLAY_NAME: str = "Student"
