"""Hand-off of quiz answers to the grading endpoint."""

from __future__ import annotations

from typing import Callable, Protocol

from exam_app.core.errors import ExamAppError
from exam_app.core.models import Answer, GradeResult
from exam_app.core.services.content_service import ContentService

GradeCallback = Callable[[GradeResult], None]
FailureCallback = Callable[[ExamAppError], None]


class GradingDispatcher(Protocol):
    """Sends answers for grading and reports back through exactly one callback."""

    def dispatch(
        self,
        session_id: int,
        answers: list[Answer],
        on_success: GradeCallback,
        on_failure: FailureCallback,
    ) -> None: ...


class BlockingGradingDispatcher:
    """Grades inline on the calling thread; completion fires before ``dispatch`` returns."""

    def __init__(self, content_service: ContentService) -> None:
        self._content = content_service

    def dispatch(
        self,
        session_id: int,
        answers: list[Answer],
        on_success: GradeCallback,
        on_failure: FailureCallback,
    ) -> None:
        try:
            result = self._content.grade_quiz(session_id, answers)
        except ExamAppError as exc:
            on_failure(exc)
            return
        on_success(result)
