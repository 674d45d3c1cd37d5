"""FastAPI demo implementation of the exam content and grading API.

Serves the same JSON contract as the production service so the desktop client
can run without one (``app_main.py --demo-server``) and so tests can exercise
the client end to end.
"""

from __future__ import annotations

import logging
from threading import Thread

from fastapi import APIRouter, Depends, FastAPI, Header, HTTPException, Request
from fastapi.responses import JSONResponse
import uvicorn

from exam_app.constants.network_constants import (
    DEMO_SERVER_API_PREFIX,
    DEMO_SERVER_HOST,
    DEMO_SERVER_PORT,
)
from exam_app.constants.quiz_constants import DEFAULT_QUESTION_COUNT
from exam_app.core.models import User
from exam_app.core.schemas import (
    AuthResponse,
    ExamPayload,
    LoginRequest,
    NotePayload,
    QuestionPayload,
    QuestionResultPayload,
    QuizGradeRequest,
    QuizGradeResponse,
    QuizHistoryPayload,
    QuizStartRequest,
    QuizStartResponse,
    RegisterRequest,
    SubjectPayload,
    UserPayload,
)
from exam_app.server.demo_content import DemoContentBank, DemoContentError, build_demo_bank

logger = logging.getLogger(__name__)


def _http_error(exc: DemoContentError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=str(exc))


def _get_bank_dependency(bank: DemoContentBank):
    def dependency() -> DemoContentBank:
        return bank

    return dependency


def create_demo_app(bank: DemoContentBank | None = None) -> FastAPI:
    """Create a FastAPI application serving ``bank`` under ``/api``."""
    bank = bank or build_demo_bank()
    app = FastAPI(title="ExamPrepQt Demo API", version="0.1.0")
    bank_dep = _get_bank_dependency(bank)
    router = APIRouter(prefix=DEMO_SERVER_API_PREFIX)

    @app.exception_handler(HTTPException)
    async def _message_body(_: Request, exc: HTTPException) -> JSONResponse:
        # The client expects {"message": ...} like the production service.
        return JSONResponse(status_code=exc.status_code, content={"message": exc.detail})

    def current_user(
        authorization: str | None = Header(default=None),
        content: DemoContentBank = Depends(bank_dep),
    ) -> User:
        token = None
        if authorization and authorization.lower().startswith("bearer "):
            token = authorization[7:].strip()
        try:
            return content.user_for_token(token)
        except DemoContentError as exc:
            raise _http_error(exc) from exc

    @router.post("/auth/register", status_code=201)
    def register(payload: RegisterRequest, content: DemoContentBank = Depends(bank_dep)) -> UserPayload:
        try:
            user = content.register(payload.name, payload.email, payload.password)
        except DemoContentError as exc:
            raise _http_error(exc) from exc
        return UserPayload.from_domain(user)

    @router.post("/auth/login")
    def login(payload: LoginRequest, content: DemoContentBank = Depends(bank_dep)) -> AuthResponse:
        try:
            token, user = content.authenticate(payload.email, payload.password)
        except DemoContentError as exc:
            raise _http_error(exc) from exc
        logger.info("Demo login for %s", user.email)
        return AuthResponse(token=token, user=UserPayload.from_domain(user))

    @router.get("/auth/me")
    def me(user: User = Depends(current_user)) -> UserPayload:
        return UserPayload.from_domain(user)

    @router.get("/exams")
    def list_exams(content: DemoContentBank = Depends(bank_dep)) -> list[ExamPayload]:
        return [ExamPayload.from_domain(exam) for exam in content.list_exams()]

    @router.get("/exams/{exam_id}/subjects")
    def list_subjects(exam_id: int, content: DemoContentBank = Depends(bank_dep)) -> list[SubjectPayload]:
        try:
            subjects = content.list_subjects(exam_id)
        except DemoContentError as exc:
            raise _http_error(exc) from exc
        return [SubjectPayload.from_domain(subject) for subject in subjects]

    @router.get("/subjects/{subject_id}/questions")
    def list_questions(subject_id: int, content: DemoContentBank = Depends(bank_dep)) -> list[QuestionPayload]:
        try:
            questions = content.list_questions(subject_id)
        except DemoContentError as exc:
            raise _http_error(exc) from exc
        return [QuestionPayload.from_domain(question) for question in questions]

    @router.get("/questions/{question_id}")
    def get_question(question_id: int, content: DemoContentBank = Depends(bank_dep)) -> QuestionPayload:
        try:
            return QuestionPayload.from_domain(content.get_question(question_id))
        except DemoContentError as exc:
            raise _http_error(exc) from exc

    @router.get("/notes/subject/{subject_id}")
    def list_notes(subject_id: int, content: DemoContentBank = Depends(bank_dep)) -> list[NotePayload]:
        try:
            notes = content.list_notes(subject_id)
        except DemoContentError as exc:
            raise _http_error(exc) from exc
        return [NotePayload.from_domain(note) for note in notes]

    @router.get("/notes/{note_id}")
    def get_note(note_id: int, content: DemoContentBank = Depends(bank_dep)) -> NotePayload:
        try:
            return NotePayload.from_domain(content.get_note(note_id))
        except DemoContentError as exc:
            raise _http_error(exc) from exc

    @router.post("/quizzes/start", status_code=201)
    def start_quiz(
        payload: QuizStartRequest,
        user: User = Depends(current_user),
        content: DemoContentBank = Depends(bank_dep),
    ) -> QuizStartResponse:
        count = payload.number_of_questions or DEFAULT_QUESTION_COUNT
        try:
            session_id, questions = content.start_quiz(user, payload.subject_id, count)
        except DemoContentError as exc:
            raise _http_error(exc) from exc
        return QuizStartResponse(
            session_id=session_id,
            questions=[QuestionPayload.from_domain(question) for question in questions],
        )

    @router.post("/quizzes/grade")
    def grade_quiz(
        payload: QuizGradeRequest,
        user: User = Depends(current_user),
        content: DemoContentBank = Depends(bank_dep),
    ) -> QuizGradeResponse:
        answers = [answer.to_domain() for answer in payload.answers]
        try:
            result = content.grade_quiz(user, payload.session_id, answers)
        except DemoContentError as exc:
            raise _http_error(exc) from exc
        return QuizGradeResponse(
            session_id=result.session_id,
            score=result.score,
            total_questions=result.total_questions,
            results=[
                QuestionResultPayload(
                    question_id=item.question_id,
                    question=QuestionPayload.from_domain(item.question),
                    user_answer_key=item.user_answer_key,
                    is_correct=item.is_correct,
                )
                for item in result.results
            ],
        )

    @router.get("/quizzes/history")
    def quiz_history(
        user: User = Depends(current_user),
        content: DemoContentBank = Depends(bank_dep),
    ) -> list[QuizHistoryPayload]:
        return [
            QuizHistoryPayload(
                id=entry.id,
                user_id=entry.user_id,
                subject_id=entry.subject_id,
                subject=SubjectPayload.from_domain(entry.subject),
                start_time=entry.start_time,
                end_time=entry.end_time,
                score=entry.score,
                total_questions=entry.total_questions,
            )
            for entry in content.list_history(user)
        ]

    app.include_router(router)
    return app


def start_demo_server(
    bank: DemoContentBank | None = None,
    host: str = DEMO_SERVER_HOST,
    port: int = DEMO_SERVER_PORT,
) -> Thread:
    """Start the demo API in a background daemon thread."""
    app = create_demo_app(bank)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="warning")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="ExamDemoServer", daemon=True)
    thread.start()
    logger.info("Demo API listening on http://%s:%s%s", host, port, DEMO_SERVER_API_PREFIX)
    return thread
