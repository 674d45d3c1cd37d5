"""Domain models for the exam preparation client."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True, slots=True)
class Exam:
    """An exam such as a national entrance test."""

    id: int
    name: str
    description: str = ""
    country_code: str | None = None


@dataclass(frozen=True, slots=True)
class Subject:
    """A subject belonging to one exam."""

    id: int
    exam_id: int
    name: str
    description: str = ""


@dataclass(frozen=True, slots=True)
class QuestionOption:
    """One selectable option; ``key`` is a short token such as ``"A"``."""

    key: str
    text: str


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question as served by the content API."""

    id: int
    subject_id: int
    year: int
    question_text: str
    options: tuple[QuestionOption, ...]
    correct_option_key: str
    explanation_text: str = ""
    difficulty_level: str = ""
    language: str = ""

    def option_keys(self) -> tuple[str, ...]:
        return tuple(option.key for option in self.options)

    def has_option(self, key: str) -> bool:
        return any(option.key == key for option in self.options)


@dataclass(frozen=True, slots=True)
class Note:
    """Study note for a subject. ``content`` is markdown."""

    id: int
    subject_id: int
    title: str
    content: str
    language: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(slots=True)
class Answer:
    """The user's selection for one question; an empty key means unanswered."""

    question_id: int
    user_answer_key: str = ""

    @property
    def is_answered(self) -> bool:
        return bool(self.user_answer_key)


@dataclass(frozen=True, slots=True)
class QuizStart:
    """Server response to a quiz setup request."""

    session_id: int
    questions: list[Question]


@dataclass(frozen=True, slots=True)
class QuestionResult:
    """Grading outcome for a single question."""

    question_id: int
    question: Question
    user_answer_key: str
    is_correct: bool


@dataclass(frozen=True, slots=True)
class GradeResult:
    """Graded quiz handed to the results view."""

    session_id: int
    score: int
    total_questions: int
    results: list[QuestionResult] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class QuizHistoryEntry:
    """A completed quiz attempt listed in the user's history."""

    id: int
    user_id: int
    subject_id: int
    subject: Subject
    start_time: datetime | None
    end_time: datetime | None
    score: int
    total_questions: int


@dataclass(frozen=True, slots=True)
class User:
    """Signed-in account."""

    id: int
    email: str
    name: str = ""


@dataclass(frozen=True, slots=True)
class AuthSession:
    """Bearer token issued at login together with the account it belongs to."""

    token: str
    user: User


@dataclass(frozen=True, slots=True)
class StudyTip:
    title: str
    content: str


@dataclass(frozen=True, slots=True)
class HomeDashboard:
    """What the home page shows right after sign-in."""

    display_name: str
    recent_quizzes: list[QuizHistoryEntry] = field(default_factory=list)
    featured_exams: list[Exam] = field(default_factory=list)
