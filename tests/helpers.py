"""Test doubles and payload builders shared across the test modules."""

from __future__ import annotations

from typing import Callable

from exam_app.core.errors import ExamAppError
from exam_app.core.models import Answer, GradeResult, Question, QuestionOption, QuestionResult


class ManualScheduler:
    """Tick scheduler driven by the test instead of a clock."""

    def __init__(self) -> None:
        self.callback: Callable[[], None] | None = None
        self.running = False
        self.start_calls = 0
        self.stop_calls = 0

    def start(self, callback: Callable[[], None]) -> None:
        self.callback = callback
        self.running = True
        self.start_calls += 1

    def stop(self) -> None:
        self.running = False
        self.stop_calls += 1

    @property
    def is_running(self) -> bool:
        return self.running

    def fire(self, times: int = 1) -> None:
        """Deliver ticks while the scheduler is running."""
        for _ in range(times):
            if not self.running or self.callback is None:
                return
            self.callback()


class RecordingGrader:
    """Grading dispatcher that holds requests until the test completes them."""

    def __init__(self) -> None:
        self.requests: list[tuple[int, list[Answer]]] = []
        self._pending: list[tuple[Callable[[GradeResult], None], Callable[[ExamAppError], None]]] = []

    def dispatch(self, session_id, answers, on_success, on_failure) -> None:
        self.requests.append((session_id, answers))
        self._pending.append((on_success, on_failure))

    @property
    def pending(self) -> int:
        return len(self._pending)

    def succeed(self, result: GradeResult) -> None:
        on_success, _ = self._pending.pop(0)
        on_success(result)

    def fail(self, error: ExamAppError) -> None:
        _, on_failure = self._pending.pop(0)
        on_failure(error)


def make_question(question_id: int, keys: str = "ABCD", correct: str = "A", subject_id: int = 1) -> Question:
    return Question(
        id=question_id,
        subject_id=subject_id,
        year=2020,
        question_text=f"Question {question_id}?",
        options=tuple(QuestionOption(key=key, text=f"Option {key}") for key in keys),
        correct_option_key=correct,
        explanation_text="Because.",
    )


def question_payload(question_id: int, keys: str = "ABCD", correct: str = "A") -> dict:
    return {
        "id": question_id,
        "subjectId": 1,
        "year": 2020,
        "questionText": f"Question {question_id}?",
        "options": [{"key": key, "text": f"Option {key}"} for key in keys],
        "correctOptionKey": correct,
        "explanationText": "Because.",
        "difficultyLevel": "easy",
        "language": "en",
    }


def graded(session_id: int, questions: list[Question], picks: dict[int, str]) -> GradeResult:
    """Grade ``picks`` the way the service does: an empty pick is incorrect."""
    results = [
        QuestionResult(
            question_id=question.id,
            question=question,
            user_answer_key=picks.get(question.id, ""),
            is_correct=bool(picks.get(question.id)) and picks[question.id] == question.correct_option_key,
        )
        for question in questions
    ]
    return GradeResult(
        session_id=session_id,
        score=sum(1 for result in results if result.is_correct),
        total_questions=len(results),
        results=results,
    )
