"""Facade used by the UI: browsing, quiz setup and history."""

from __future__ import annotations

import logging
from typing import Callable

from exam_app.constants.quiz_constants import DEFAULT_DISPLAY_NAME, FEATURED_EXAM_LIMIT, RECENT_QUIZ_LIMIT
from exam_app.constants.study_tips import STUDY_TIPS
from exam_app.core.countdown import TickScheduler
from exam_app.core.errors import ExamAppError, InvalidInputError
from exam_app.core.models import (
    Exam,
    GradeResult,
    HomeDashboard,
    Note,
    Question,
    QuizHistoryEntry,
    StudyTip,
    Subject,
    User,
)
from exam_app.core.quiz_session import QuizSessionController
from exam_app.core.services.auth_service import AuthService
from exam_app.core.services.content_service import ContentService
from exam_app.core.services.grading import BlockingGradingDispatcher, GradingDispatcher

logger = logging.getLogger(__name__)


class ExamManager:
    """Facade over the auth and content services plus quiz session creation."""

    def __init__(self, content_service: ContentService, auth_service: AuthService) -> None:
        self._content = content_service
        self._auth = auth_service

    @property
    def content_service(self) -> ContentService:
        return self._content

    # --- Auth Delegation ---

    def login(self, email: str, password: str) -> User:
        return self._auth.login(email, password)

    def register(self, name: str, email: str, password: str) -> User:
        return self._auth.register(name, email, password)

    def logout(self) -> None:
        self._auth.logout()

    def is_authenticated(self) -> bool:
        return self._auth.is_authenticated()

    def get_current_user(self) -> User | None:
        return self._auth.get_current_user()

    # --- Content Delegation ---

    def list_exams(self) -> list[Exam]:
        return self._content.list_exams()

    def list_subjects(self, exam_id: int) -> list[Subject]:
        return self._content.list_subjects(exam_id)

    def list_questions(self, subject_id: int) -> list[Question]:
        return self._content.list_questions(subject_id)

    def get_question(self, question_id: int) -> Question:
        return self._content.get_question(question_id)

    def list_notes(self, subject_id: int) -> list[Note]:
        return self._content.list_notes(subject_id)

    def get_note(self, note_id: int) -> Note:
        return self._content.get_note(note_id)

    def list_quiz_history(self) -> list[QuizHistoryEntry]:
        return self._content.list_quiz_history()

    # --- Home and Resources ---

    def get_dashboard(self) -> HomeDashboard:
        """Greeting, the latest few quizzes and a handful of exams for the home page."""
        user = self.get_current_user()
        history = self._content.list_quiz_history()
        exams = self._content.list_exams()
        return HomeDashboard(
            display_name=(user.name if user and user.name else DEFAULT_DISPLAY_NAME),
            recent_quizzes=history[:RECENT_QUIZ_LIMIT],
            featured_exams=exams[:FEATURED_EXAM_LIMIT],
        )

    def list_resource_subjects(self) -> list[Subject]:
        """Subjects of the first listed exam, shown on the resources page."""
        exams = self._content.list_exams()
        if not exams:
            return []
        return self._content.list_subjects(exams[0].id)

    def get_study_tips(self) -> list[StudyTip]:
        return list(STUDY_TIPS)

    # --- Quiz Setup ---

    @staticmethod
    def parse_question_count(text: str | int | None) -> int:
        """Validate the requested number of questions; it must be a positive whole number."""
        try:
            count = int(text.strip() if isinstance(text, str) else text)
        except (TypeError, ValueError) as exc:
            raise InvalidInputError("Please enter a valid number of questions") from exc
        if count <= 0:
            raise InvalidInputError("Please enter a valid number of questions")
        return count

    def start_quiz_session(
        self,
        subject_id: int,
        question_count: str | int | None,
        scheduler: TickScheduler,
        grader: GradingDispatcher | None = None,
        confirm_exit: Callable[[], bool] | None = None,
        on_change: Callable[[QuizSessionController], None] | None = None,
        on_result: Callable[[GradeResult], None] | None = None,
        on_error: Callable[[ExamAppError], None] | None = None,
    ) -> QuizSessionController:
        """Request questions from the server and hand them straight to a new controller."""
        count = self.parse_question_count(question_count)
        quiz = self._content.start_quiz(subject_id, count)
        controller = QuizSessionController(
            session_id=quiz.session_id,
            grader=grader or BlockingGradingDispatcher(self._content),
            scheduler=scheduler,
            confirm_exit=confirm_exit,
            on_change=on_change,
            on_result=on_result,
            on_error=on_error,
        )
        controller.initialize(quiz.questions)
        logger.info("Quiz session %s ready with %d question(s)", quiz.session_id, controller.get_question_count())
        return controller
