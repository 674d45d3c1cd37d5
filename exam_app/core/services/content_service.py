"""Client for the content and grading endpoints of the exam service."""

from __future__ import annotations

import logging

from exam_app.core.models import (
    Answer,
    Exam,
    GradeResult,
    Note,
    Question,
    QuizHistoryEntry,
    QuizStart,
    Subject,
)
from exam_app.core.schemas import (
    ExamPayload,
    NotePayload,
    QuestionPayload,
    QuizGradeRequest,
    QuizGradeResponse,
    QuizHistoryPayload,
    QuizStartRequest,
    QuizStartResponse,
    SubjectPayload,
    parse_model,
    parse_model_list,
)
from exam_app.core.services.api_client import ApiClient, RequestAction

logger = logging.getLogger(__name__)

_FETCH_EXAMS = RequestAction("fetch exams", "fetching exams")
_FETCH_SUBJECTS = RequestAction("fetch subjects", "fetching subjects")
_FETCH_QUESTIONS = RequestAction("fetch questions", "fetching questions")
_FETCH_QUESTION = RequestAction("fetch question", "fetching question")
_FETCH_NOTES = RequestAction("fetch notes", "fetching notes")
_FETCH_NOTE = RequestAction("fetch note", "fetching note")
_START_QUIZ = RequestAction("start quiz", "starting quiz")
_GRADE_QUIZ = RequestAction("grade quiz", "grading quiz")
_FETCH_HISTORY = RequestAction("fetch quiz history", "fetching quiz history")


class ContentService:
    """Typed access to exams, subjects, questions, notes and quizzes."""

    def __init__(self, api_client: ApiClient) -> None:
        self._api = api_client

    def list_exams(self) -> list[Exam]:
        payload = self._api.get("/exams", _FETCH_EXAMS)
        return [item.to_domain() for item in parse_model_list(ExamPayload, payload)]

    def list_subjects(self, exam_id: int) -> list[Subject]:
        payload = self._api.get(f"/exams/{exam_id}/subjects", _FETCH_SUBJECTS)
        return [item.to_domain() for item in parse_model_list(SubjectPayload, payload)]

    def list_questions(self, subject_id: int) -> list[Question]:
        payload = self._api.get(f"/subjects/{subject_id}/questions", _FETCH_QUESTIONS)
        return [item.to_domain() for item in parse_model_list(QuestionPayload, payload)]

    def get_question(self, question_id: int) -> Question:
        payload = self._api.get(f"/questions/{question_id}", _FETCH_QUESTION)
        return parse_model(QuestionPayload, payload).to_domain()

    def list_notes(self, subject_id: int) -> list[Note]:
        payload = self._api.get(f"/notes/subject/{subject_id}", _FETCH_NOTES)
        return [item.to_domain() for item in parse_model_list(NotePayload, payload)]

    def get_note(self, note_id: int) -> Note:
        payload = self._api.get(f"/notes/{note_id}", _FETCH_NOTE)
        return parse_model(NotePayload, payload).to_domain()

    def start_quiz(self, subject_id: int, question_count: int | None = None) -> QuizStart:
        request = QuizStartRequest(subject_id=subject_id, number_of_questions=question_count)
        payload = self._api.post("/quizzes/start", _START_QUIZ, request.model_dump(by_alias=True))
        quiz = parse_model(QuizStartResponse, payload).to_domain()
        logger.info(
            "Started quiz session %s for subject %s with %d question(s)",
            quiz.session_id,
            subject_id,
            len(quiz.questions),
        )
        return quiz

    def grade_quiz(self, session_id: int, answers: list[Answer]) -> GradeResult:
        request = QuizGradeRequest.from_answers(session_id, answers)
        payload = self._api.post("/quizzes/grade", _GRADE_QUIZ, request.model_dump(by_alias=True))
        result = parse_model(QuizGradeResponse, payload).to_domain()
        logger.info(
            "Quiz session %s graded: %d/%d",
            result.session_id,
            result.score,
            result.total_questions,
        )
        return result

    def list_quiz_history(self) -> list[QuizHistoryEntry]:
        payload = self._api.get("/quizzes/history", _FETCH_HISTORY)
        return [item.to_domain() for item in parse_model_list(QuizHistoryPayload, payload)]
