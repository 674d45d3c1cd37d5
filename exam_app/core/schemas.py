"""Pydantic schemas for the JSON payloads exchanged with the content service.

The service speaks camelCase (``questionText``, ``correctOptionKey``...). These
schemas own that mapping so the rest of the code only deals with the
dataclasses from :mod:`exam_app.core.models`. The demo server reuses the same
schemas for its responses, which keeps both sides of the contract in one place.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from exam_app.core.errors import ParseError
from exam_app.core.models import (
    Answer,
    AuthSession,
    Exam,
    GradeResult,
    Note,
    Question,
    QuestionOption,
    QuestionResult,
    QuizHistoryEntry,
    QuizStart,
    Subject,
    User,
)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class CamelModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ExamPayload(CamelModel):
    id: int
    name: str
    description: str = ""
    country_code: str | None = None

    def to_domain(self) -> Exam:
        return Exam(
            id=self.id,
            name=self.name,
            description=self.description,
            country_code=self.country_code,
        )

    @classmethod
    def from_domain(cls, exam: Exam) -> ExamPayload:
        return cls(id=exam.id, name=exam.name, description=exam.description, country_code=exam.country_code)


class SubjectPayload(CamelModel):
    id: int
    exam_id: int
    name: str
    description: str = ""

    def to_domain(self) -> Subject:
        return Subject(id=self.id, exam_id=self.exam_id, name=self.name, description=self.description)

    @classmethod
    def from_domain(cls, subject: Subject) -> SubjectPayload:
        return cls(
            id=subject.id,
            exam_id=subject.exam_id,
            name=subject.name,
            description=subject.description,
        )


class QuestionOptionPayload(CamelModel):
    key: str
    text: str

    @field_validator("key")
    @classmethod
    def _key_is_token(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped or any(char.isspace() for char in stripped):
            raise ValueError("Option key must be a single non-empty token.")
        return stripped


class QuestionPayload(CamelModel):
    id: int
    subject_id: int
    year: int = 0
    question_text: str
    options: list[QuestionOptionPayload] = []
    correct_option_key: str = ""
    explanation_text: str | None = None
    difficulty_level: str | None = None
    language: str | None = None

    @field_validator("options")
    @classmethod
    def _unique_option_keys(cls, value: list[QuestionOptionPayload]) -> list[QuestionOptionPayload]:
        keys = [option.key for option in value]
        if len(keys) != len(set(keys)):
            raise ValueError("Option keys must be unique within a question.")
        return value

    def to_domain(self) -> Question:
        return Question(
            id=self.id,
            subject_id=self.subject_id,
            year=self.year,
            question_text=self.question_text,
            options=tuple(QuestionOption(key=option.key, text=option.text) for option in self.options),
            correct_option_key=self.correct_option_key,
            explanation_text=self.explanation_text or "",
            difficulty_level=self.difficulty_level or "",
            language=self.language or "",
        )

    @classmethod
    def from_domain(cls, question: Question) -> QuestionPayload:
        return cls(
            id=question.id,
            subject_id=question.subject_id,
            year=question.year,
            question_text=question.question_text,
            options=[QuestionOptionPayload(key=o.key, text=o.text) for o in question.options],
            correct_option_key=question.correct_option_key,
            explanation_text=question.explanation_text,
            difficulty_level=question.difficulty_level,
            language=question.language,
        )


class NotePayload(CamelModel):
    id: int
    subject_id: int
    title: str
    content: str = ""
    language: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_domain(self) -> Note:
        return Note(
            id=self.id,
            subject_id=self.subject_id,
            title=self.title,
            content=self.content,
            language=self.language or "",
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    @classmethod
    def from_domain(cls, note: Note) -> NotePayload:
        return cls(
            id=note.id,
            subject_id=note.subject_id,
            title=note.title,
            content=note.content,
            language=note.language,
            created_at=note.created_at,
            updated_at=note.updated_at,
        )


class QuizStartRequest(CamelModel):
    subject_id: int
    number_of_questions: int | None = None


class QuizStartResponse(CamelModel):
    session_id: int
    questions: list[QuestionPayload]

    def to_domain(self) -> QuizStart:
        return QuizStart(
            session_id=self.session_id,
            questions=[question.to_domain() for question in self.questions],
        )


class AnswerPayload(CamelModel):
    question_id: int
    user_answer_key: str = ""

    def to_domain(self) -> Answer:
        return Answer(question_id=self.question_id, user_answer_key=self.user_answer_key)


class QuizGradeRequest(CamelModel):
    session_id: int
    answers: list[AnswerPayload]

    @classmethod
    def from_answers(cls, session_id: int, answers: list[Answer]) -> QuizGradeRequest:
        return cls(
            session_id=session_id,
            answers=[
                AnswerPayload(question_id=answer.question_id, user_answer_key=answer.user_answer_key)
                for answer in answers
            ],
        )


class QuestionResultPayload(CamelModel):
    question_id: int
    question: QuestionPayload
    user_answer_key: str = ""
    is_correct: bool


class QuizGradeResponse(CamelModel):
    session_id: int
    score: int
    total_questions: int
    results: list[QuestionResultPayload]

    def to_domain(self) -> GradeResult:
        return GradeResult(
            session_id=self.session_id,
            score=self.score,
            total_questions=self.total_questions,
            results=[
                QuestionResult(
                    question_id=item.question_id,
                    question=item.question.to_domain(),
                    user_answer_key=item.user_answer_key,
                    is_correct=item.is_correct,
                )
                for item in self.results
            ],
        )


class QuizHistoryPayload(CamelModel):
    id: int
    user_id: int
    subject_id: int
    subject: SubjectPayload
    start_time: datetime | None = None
    end_time: datetime | None = None
    score: int
    total_questions: int

    def to_domain(self) -> QuizHistoryEntry:
        return QuizHistoryEntry(
            id=self.id,
            user_id=self.user_id,
            subject_id=self.subject_id,
            subject=self.subject.to_domain(),
            start_time=self.start_time,
            end_time=self.end_time,
            score=self.score,
            total_questions=self.total_questions,
        )


class UserPayload(CamelModel):
    id: int
    email: str
    name: str = ""

    def to_domain(self) -> User:
        return User(id=self.id, email=self.email, name=self.name)

    @classmethod
    def from_domain(cls, user: User) -> UserPayload:
        return cls(id=user.id, email=user.email, name=user.name)


class LoginRequest(CamelModel):
    email: str
    password: str


class RegisterRequest(CamelModel):
    name: str = ""
    email: str
    password: str


class AuthResponse(CamelModel):
    token: str
    user: UserPayload

    def to_domain(self) -> AuthSession:
        return AuthSession(token=self.token, user=self.user.to_domain())

    @classmethod
    def from_domain(cls, session: AuthSession) -> AuthResponse:
        return cls(token=session.token, user=UserPayload.from_domain(session.user))


class ErrorPayload(CamelModel):
    message: str


def parse_model(schema: type[SchemaT], payload: Any) -> SchemaT:
    """Validate ``payload`` against ``schema``, raising :class:`ParseError` on mismatch."""
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        raise ParseError(f"Malformed {schema.__name__} payload: {exc.error_count()} error(s)") from exc


def parse_model_list(schema: type[SchemaT], payload: Any) -> list[SchemaT]:
    """Validate a JSON array of ``schema`` objects."""
    try:
        return TypeAdapter(list[schema]).validate_python(payload)
    except ValidationError as exc:
        raise ParseError(f"Malformed {schema.__name__} list: {exc.error_count()} error(s)") from exc
