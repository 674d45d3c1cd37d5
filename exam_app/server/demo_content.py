"""In-memory content bank backing the demo server."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
import hashlib
import random
import secrets
from threading import Lock

from exam_app.core.models import (
    Answer,
    Exam,
    GradeResult,
    Note,
    Question,
    QuestionOption,
    QuestionResult,
    QuizHistoryEntry,
    Subject,
    User,
)


class DemoContentError(Exception):
    """Raised for requests the bank cannot satisfy; carries an HTTP status."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(slots=True)
class _QuizAttempt:
    session_id: int
    user_id: int
    subject_id: int
    question_ids: list[int]
    started_at: datetime
    result: GradeResult | None = None


@dataclass(slots=True)
class _Account:
    user: User
    password_hash: str


def _hash_password(password: str) -> str:
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _question(
    question_id: int,
    subject_id: int,
    year: int,
    text: str,
    options: list[str],
    correct: str,
    explanation: str,
    difficulty: str = "medium",
) -> Question:
    return Question(
        id=question_id,
        subject_id=subject_id,
        year=year,
        question_text=text,
        options=tuple(QuestionOption(key=chr(ord("A") + idx), text=value) for idx, value in enumerate(options)),
        correct_option_key=correct,
        explanation_text=explanation,
        difficulty_level=difficulty,
        language="en",
    )


@dataclass
class DemoContentBank:
    """Thread-safe store of exams, subjects, questions, notes, accounts and quiz attempts."""

    exams: list[Exam] = field(default_factory=list)
    subjects: list[Subject] = field(default_factory=list)
    questions: list[Question] = field(default_factory=list)
    notes: list[Note] = field(default_factory=list)
    rng: random.Random = field(default_factory=random.Random)
    _accounts: dict[str, _Account] = field(default_factory=dict, init=False)
    _tokens: dict[str, int] = field(default_factory=dict, init=False)
    _attempts: dict[int, _QuizAttempt] = field(default_factory=dict, init=False)
    _history: list[QuizHistoryEntry] = field(default_factory=list, init=False)
    _next_session_id: int = field(default=1, init=False)
    _next_user_id: int = field(default=1, init=False)
    _lock: Lock = field(default_factory=Lock, init=False, repr=False)

    # --- Accounts ---

    def register(self, name: str, email: str, password: str) -> User:
        key = email.strip().lower()
        if not key or not password:
            raise DemoContentError("Email and password are required", 400)
        with self._lock:
            if key in self._accounts:
                raise DemoContentError("An account with this email already exists", 409)
            user = User(id=self._next_user_id, email=key, name=name.strip())
            self._next_user_id += 1
            self._accounts[key] = _Account(user=user, password_hash=_hash_password(password))
            return user

    def authenticate(self, email: str, password: str) -> tuple[str, User]:
        with self._lock:
            account = self._accounts.get(email.strip().lower())
            if account is None or account.password_hash != _hash_password(password):
                raise DemoContentError("Invalid email or password", 401)
            token = secrets.token_hex(16)
            self._tokens[token] = account.user.id
            return token, account.user

    def user_for_token(self, token: str | None) -> User:
        with self._lock:
            user_id = self._tokens.get(token or "")
            for account in self._accounts.values():
                if account.user.id == user_id:
                    return account.user
        raise DemoContentError("Authentication required", 401)

    # --- Content ---

    def list_exams(self) -> list[Exam]:
        return list(self.exams)

    def list_subjects(self, exam_id: int) -> list[Subject]:
        if not any(exam.id == exam_id for exam in self.exams):
            raise DemoContentError("Exam not found", 404)
        return [subject for subject in self.subjects if subject.exam_id == exam_id]

    def list_questions(self, subject_id: int) -> list[Question]:
        self._require_subject(subject_id)
        return [question for question in self.questions if question.subject_id == subject_id]

    def get_question(self, question_id: int) -> Question:
        for question in self.questions:
            if question.id == question_id:
                return question
        raise DemoContentError("Question not found", 404)

    def list_notes(self, subject_id: int) -> list[Note]:
        self._require_subject(subject_id)
        return [note for note in self.notes if note.subject_id == subject_id]

    def get_note(self, note_id: int) -> Note:
        for note in self.notes:
            if note.id == note_id:
                return note
        raise DemoContentError("Note not found", 404)

    # --- Quizzes ---

    def start_quiz(self, user: User, subject_id: int, question_count: int) -> tuple[int, list[Question]]:
        if question_count <= 0:
            raise DemoContentError("Number of questions must be positive", 400)
        pool = self.list_questions(subject_id)
        if not pool:
            raise DemoContentError("No questions available for this subject", 404)
        with self._lock:
            selected = self.rng.sample(pool, min(question_count, len(pool)))
            session_id = self._next_session_id
            self._next_session_id += 1
            self._attempts[session_id] = _QuizAttempt(
                session_id=session_id,
                user_id=user.id,
                subject_id=subject_id,
                question_ids=[question.id for question in selected],
                started_at=_utcnow(),
            )
        return session_id, selected

    def grade_quiz(self, user: User, session_id: int, answers: list[Answer]) -> GradeResult:
        with self._lock:
            attempt = self._attempts.get(session_id)
            if attempt is None or attempt.user_id != user.id:
                raise DemoContentError("Quiz session not found", 404)
            if attempt.result is not None:
                # A resubmission gets the stored grade back.
                return attempt.result

        selected = {answer.question_id: answer.user_answer_key for answer in answers}
        results = []
        for question_id in attempt.question_ids:
            question = self.get_question(question_id)
            user_key = selected.get(question_id, "")
            results.append(
                QuestionResult(
                    question_id=question_id,
                    question=question,
                    user_answer_key=user_key,
                    is_correct=bool(user_key) and user_key == question.correct_option_key,
                )
            )
        score = sum(1 for result in results if result.is_correct)
        subject = self._require_subject(attempt.subject_id)
        graded = GradeResult(session_id=session_id, score=score, total_questions=len(results), results=results)
        with self._lock:
            if attempt.result is not None:
                return attempt.result
            attempt.result = graded
            self._history.append(
                QuizHistoryEntry(
                    id=session_id,
                    user_id=user.id,
                    subject_id=subject.id,
                    subject=subject,
                    start_time=attempt.started_at,
                    end_time=_utcnow(),
                    score=score,
                    total_questions=len(results),
                )
            )
        return graded

    def list_history(self, user: User) -> list[QuizHistoryEntry]:
        with self._lock:
            entries = [entry for entry in self._history if entry.user_id == user.id]
        return sorted(
            entries,
            key=lambda entry: (entry.end_time or entry.start_time or _utcnow(), entry.id),
            reverse=True,
        )

    def _require_subject(self, subject_id: int) -> Subject:
        for subject in self.subjects:
            if subject.id == subject_id:
                return subject
        raise DemoContentError("Subject not found", 404)


DEMO_USER_EMAIL = "demo@example.com"
DEMO_USER_PASSWORD = "demo1234"


def build_demo_bank(seed: int | None = None) -> DemoContentBank:
    """Create a bank with a small sample catalogue and a demo account."""
    exams = [
        Exam(id=1, name="University Entrance Exam", description="General entrance examination", country_code="GH"),
        Exam(id=2, name="Senior School Certificate", description="Final secondary school examination"),
    ]
    subjects = [
        Subject(id=1, exam_id=1, name="Mathematics", description="Algebra, geometry and arithmetic"),
        Subject(id=2, exam_id=1, name="Physics", description="Mechanics and energy"),
        Subject(id=3, exam_id=2, name="Biology", description="Cells and living systems"),
    ]
    questions = [
        _question(1, 1, 2019, "What is $2 + 2$?", ["3", "4", "5", "22"], "B", "Adding two and two gives four.", "easy"),
        _question(2, 1, 2019, "Solve for $x$: $3x = 12$.", ["3", "4", "6", "9"], "B", "Divide both sides by 3."),
        _question(3, 1, 2020, "What is $30^\\circ$ in radians?", ["$\\pi/2$", "$\\pi/6$", "$\\pi/3$", "$\\pi/4$"], "B",
                  "Multiply degrees by $\\pi/180$."),
        _question(4, 1, 2020, "The sum of interior angles of a triangle is:", ["90°", "180°", "270°", "360°"], "B",
                  "Any triangle's interior angles add up to $180^\\circ$.", "easy"),
        _question(5, 1, 2021, "What is $\\sqrt{81}$?", ["7", "8", "9", "10"], "C", "$9 \\times 9 = 81$.", "easy"),
        _question(6, 2, 2019, "The SI unit of force is the:", ["Joule", "Newton", "Watt", "Pascal"], "B",
                  "One newton accelerates one kilogram at $1\\,m/s^2$.", "easy"),
        _question(7, 2, 2021, "Kinetic energy is given by:", ["$mgh$", "$\\frac{1}{2}mv^2$", "$mv$", "$Fd$"], "B",
                  "Kinetic energy grows with the square of speed."),
        _question(8, 3, 2022, "The powerhouse of the cell is the:", ["Nucleus", "Ribosome", "Mitochondrion", "Golgi body"],
                  "C", "Mitochondria produce most of the cell's ATP.", "easy"),
    ]
    created = datetime(2024, 1, 15, 9, 0, tzinfo=timezone.utc)
    notes = [
        Note(id=1, subject_id=1, title="Linear equations",
             content="A **linear equation** has the form $ax + b = 0$.\n\nSolve it by isolating $x$: $x = -b/a$.",
             language="en", created_at=created, updated_at=created),
        Note(id=2, subject_id=1, title="Angles",
             content="| Degrees | Radians |\n| --- | --- |\n| 30 | $\\pi/6$ |\n| 90 | $\\pi/2$ |\n| 180 | $\\pi$ |",
             language="en", created_at=created, updated_at=created),
        Note(id=3, subject_id=2, title="Newton's laws",
             content="1. Inertia\n2. $F = ma$\n3. Action and reaction", language="en",
             created_at=created, updated_at=created),
    ]
    bank = DemoContentBank(
        exams=exams,
        subjects=subjects,
        questions=questions,
        notes=notes,
        rng=random.Random(seed),
    )
    bank.register("Demo Student", DEMO_USER_EMAIL, DEMO_USER_PASSWORD)
    return bank
