"""Stateless helpers used by the results, history and quiz views."""

from __future__ import annotations

from enum import Enum
import math

from exam_app.constants.quiz_constants import (
    AVERAGE_SCORE_PERCENTAGE,
    GOOD_SCORE_PERCENTAGE,
    TIME_WARNING_THRESHOLD_SECONDS,
)


class ScoreBand(Enum):
    GOOD = "good"
    AVERAGE = "average"
    POOR = "poor"


class OptionHighlight(Enum):
    """How an option is tinted when reviewing a graded question."""

    SELECTED_WRONG = "selected-wrong"
    CORRECT = "correct"
    NEUTRAL = "neutral"


def score_percentage(score: int, total: int) -> int:
    """Whole-number percentage; an empty quiz scores 0."""
    if total <= 0:
        return 0
    return math.floor(score * 100 / total + 0.5)


def score_band(percentage: int) -> ScoreBand:
    if percentage >= GOOD_SCORE_PERCENTAGE:
        return ScoreBand.GOOD
    if percentage >= AVERAGE_SCORE_PERCENTAGE:
        return ScoreBand.AVERAGE
    return ScoreBand.POOR


def option_highlight(option_key: str, user_answer_key: str, correct_option_key: str) -> OptionHighlight:
    # A correct pick is shown as correct, not as the user's wrong pick.
    if option_key == correct_option_key:
        return OptionHighlight.CORRECT
    if user_answer_key and option_key == user_answer_key:
        return OptionHighlight.SELECTED_WRONG
    return OptionHighlight.NEUTRAL


def format_countdown(seconds: int) -> str:
    """Render seconds as ``m:ss``."""
    seconds = max(0, seconds)
    minutes, remaining = divmod(seconds, 60)
    return f"{minutes}:{remaining:02d}"


def is_time_warning(seconds: int) -> bool:
    return seconds < TIME_WARNING_THRESHOLD_SECONDS
