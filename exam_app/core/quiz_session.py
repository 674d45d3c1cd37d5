"""State machine for one timed quiz attempt.

States::

    LOADING -> ACTIVE -> SUBMITTING -> SUBMITTED
                 |  \\                     ^
                 |   -> TIMED_OUT ---------+ (via SUBMITTING)
                 v
               EXITED

A failed grading request moves SUBMITTING back to ACTIVE with answers and the
remaining time intact, so the user can submit again.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum, auto
import logging
from typing import Any, Callable

from exam_app.constants.quiz_constants import SECONDS_PER_QUESTION
from exam_app.core.countdown import TickScheduler
from exam_app.core.errors import (
    ExamAppError,
    InvalidInputError,
    InvalidStateError,
    ParseError,
    SubmissionInProgressError,
)
from exam_app.core.models import Answer, GradeResult, Question
from exam_app.core.schemas import QuestionPayload, parse_model
from exam_app.core.services.grading import GradingDispatcher

logger = logging.getLogger(__name__)


class QuizState(Enum):
    """Lifecycle of a quiz attempt."""

    LOADING = auto()
    ACTIVE = auto()
    SUBMITTING = auto()
    SUBMITTED = auto()
    EXITED = auto()
    TIMED_OUT = auto()


@dataclass(slots=True)
class QuizSession:
    """Mutable working state of an attempt; dropped once the attempt ends."""

    session_id: int
    questions: list[Question]
    answers: list[Answer]
    current_index: int = 0
    remaining_seconds: int = 0


def _always_confirm() -> bool:
    return True


class QuizSessionController:
    """Owns navigation, answers and the countdown of a single quiz attempt."""

    def __init__(
        self,
        session_id: int | None,
        grader: GradingDispatcher,
        scheduler: TickScheduler,
        confirm_exit: Callable[[], bool] | None = None,
        on_change: Callable[[QuizSessionController], None] | None = None,
        on_result: Callable[[GradeResult], None] | None = None,
        on_error: Callable[[ExamAppError], None] | None = None,
    ) -> None:
        self._session_id = session_id
        self._grader = grader
        self._scheduler = scheduler
        self._confirm_exit = confirm_exit or _always_confirm
        self._on_change = on_change
        self._on_result = on_result
        self._on_error = on_error

        self._state = QuizState.LOADING
        self._session: QuizSession | None = None
        self._answers_by_id: dict[int, Answer] = {}
        self._questions_by_id: dict[int, Question] = {}
        self._auto_submitted = False
        self._closed = False
        self._result: GradeResult | None = None
        self._last_error: ExamAppError | None = None

    # --- Lifecycle ---

    def initialize(self, questions: Sequence[Question | Mapping[str, Any]]) -> None:
        """Create empty answers, start the countdown and enter ACTIVE."""
        if self._state is not QuizState.LOADING:
            raise InvalidStateError("Quiz session has already been initialized.")
        if self._session_id is None:
            raise InvalidInputError("Session ID is required")

        parsed = _parse_questions(questions)
        answers = [Answer(question_id=question.id) for question in parsed]
        self._session = QuizSession(
            session_id=self._session_id,
            questions=parsed,
            answers=answers,
            current_index=0,
            remaining_seconds=SECONDS_PER_QUESTION * len(parsed),
        )
        self._questions_by_id = {question.id: question for question in parsed}
        self._answers_by_id = {answer.question_id: answer for answer in answers}
        self._scheduler.start(self.tick)
        self._set_state(QuizState.ACTIVE)

    def request_exit(self) -> bool:
        """Ask the confirmation gate; on accept stop the countdown and discard the attempt."""
        if self._state not in (QuizState.LOADING, QuizState.ACTIVE):
            raise InvalidStateError(f"Cannot exit a quiz that is {self._state.name.lower()}.")
        if not self._confirm_exit():
            return False
        self._scheduler.stop()
        self._discard_session()
        self._set_state(QuizState.EXITED)
        return True

    def close(self) -> None:
        """Tear down: the countdown never fires after this."""
        self._closed = True
        self._scheduler.stop()

    # --- Answers and navigation ---

    def select_answer(self, question_id: int, option_key: str) -> None:
        """Record ``option_key`` for ``question_id``; an empty key clears the selection."""
        self._require_active("select an answer")
        answer = self._answers_by_id.get(question_id)
        if answer is None:
            logger.debug("Ignoring answer for question %s outside session %s", question_id, self._session_id)
            return
        if option_key and not self._questions_by_id[question_id].has_option(option_key):
            raise InvalidInputError(f"Option {option_key!r} does not belong to question {question_id}.")
        if answer.user_answer_key == option_key:
            return
        answer.user_answer_key = option_key
        self._notify_change()

    def advance(self) -> None:
        self._move_to(self._require_session().current_index + 1, "advance")

    def retreat(self) -> None:
        self._move_to(self._require_session().current_index - 1, "go back")

    def go_to(self, index: int) -> None:
        self._move_to(index, "jump to a question")

    def _move_to(self, index: int, action: str) -> None:
        self._require_active(action)
        session = self._require_session()
        clamped = max(0, min(index, len(session.questions) - 1))
        if clamped == session.current_index:
            return
        session.current_index = clamped
        self._notify_change()

    # --- Countdown and submission ---

    def tick(self) -> None:
        """Advance the countdown by one second; zero triggers a single automatic submit."""
        if self._state is not QuizState.ACTIVE or self._session is None:
            return
        session = self._session
        if session.remaining_seconds > 0:
            session.remaining_seconds -= 1
            self._notify_change()
        if session.remaining_seconds == 0 and not self._auto_submitted:
            self._auto_submitted = True
            self._scheduler.stop()
            logger.info("Countdown expired for quiz session %s", self._session_id)
            self._set_state(QuizState.TIMED_OUT)
            self.submit()

    def submit(self) -> None:
        """Stop the countdown and send every answer to the grader."""
        if self._state is QuizState.SUBMITTING:
            raise SubmissionInProgressError("Quiz is already being submitted.")
        if self._state not in (QuizState.ACTIVE, QuizState.TIMED_OUT):
            raise InvalidStateError(f"Cannot submit a quiz that is {self._state.name.lower()}.")
        session = self._require_session()

        self._scheduler.stop()
        self._set_state(QuizState.SUBMITTING)
        answers = [Answer(question_id=a.question_id, user_answer_key=a.user_answer_key) for a in session.answers]
        logger.info(
            "Submitting quiz session %s (%d of %d answered)",
            session.session_id,
            sum(1 for answer in answers if answer.is_answered),
            len(answers),
        )
        self._grader.dispatch(session.session_id, answers, self._handle_graded, self._handle_grading_failed)

    def _handle_graded(self, result: GradeResult) -> None:
        if self._state is not QuizState.SUBMITTING:
            logger.warning("Dropping grade result for session %s in state %s", self._session_id, self._state.name)
            return
        self._result = result
        self._last_error = None
        self._discard_session()
        self._set_state(QuizState.SUBMITTED)
        if self._on_result is not None:
            self._on_result(result)

    def _handle_grading_failed(self, error: ExamAppError) -> None:
        if self._state is not QuizState.SUBMITTING:
            logger.warning("Dropping grading failure for session %s in state %s", self._session_id, self._state.name)
            return
        logger.warning("Grading failed for quiz session %s: %s", self._session_id, error)
        self._last_error = error
        self._set_state(QuizState.ACTIVE)
        session = self._require_session()
        if not self._closed and session.remaining_seconds > 0:
            self._scheduler.start(self.tick)
        if self._on_error is not None:
            self._on_error(error)

    # --- Accessors ---

    def get_state(self) -> QuizState:
        return self._state

    def get_session_id(self) -> int | None:
        return self._session_id

    def get_questions(self) -> list[Question]:
        return list(self._session.questions) if self._session else []

    def get_answers(self) -> list[Answer]:
        return list(self._session.answers) if self._session else []

    def get_question_count(self) -> int:
        return len(self._session.questions) if self._session else 0

    def get_answered_count(self) -> int:
        return sum(1 for answer in self.get_answers() if answer.is_answered)

    def get_current_index(self) -> int:
        return self._session.current_index if self._session else 0

    def get_current_question(self) -> Question | None:
        if self._session is None:
            return None
        return self._session.questions[self._session.current_index]

    def get_current_answer(self) -> Answer | None:
        question = self.get_current_question()
        return self._answers_by_id.get(question.id) if question else None

    def get_remaining_seconds(self) -> int:
        return self._session.remaining_seconds if self._session else 0

    def is_first_question(self) -> bool:
        return self.get_current_index() == 0

    def is_last_question(self) -> bool:
        return self.get_current_index() == self.get_question_count() - 1

    def get_result(self) -> GradeResult | None:
        return self._result

    def get_last_error(self) -> ExamAppError | None:
        return self._last_error

    # --- Internals ---

    def _require_active(self, action: str) -> None:
        if self._state is not QuizState.ACTIVE:
            raise InvalidStateError(f"Cannot {action} while the quiz is {self._state.name.lower()}.")

    def _require_session(self) -> QuizSession:
        if self._session is None:
            raise InvalidStateError("No quiz session is in progress.")
        return self._session

    def _discard_session(self) -> None:
        self._session = None
        self._answers_by_id = {}
        self._questions_by_id = {}

    def _set_state(self, state: QuizState) -> None:
        if state is self._state:
            return
        logger.info("Quiz session %s: %s -> %s", self._session_id, self._state.name, state.name)
        self._state = state
        self._notify_change()

    def _notify_change(self) -> None:
        if self._on_change is not None:
            self._on_change(self)


def _parse_questions(questions: Sequence[Question | Mapping[str, Any]]) -> list[Question]:
    if not questions:
        raise InvalidInputError("Quiz must contain at least one question.")

    parsed: list[Question] = []
    for item in questions:
        if isinstance(item, Question):
            question = item
        elif isinstance(item, Mapping):
            try:
                question = parse_model(QuestionPayload, item).to_domain()
            except ParseError as exc:
                raise InvalidInputError("Failed to parse questions data") from exc
        else:
            raise InvalidInputError(f"Unsupported question entry: {type(item).__name__}")

        keys = question.option_keys()
        if not keys:
            raise InvalidInputError(f"Question {question.id} has no options.")
        if len(set(keys)) != len(keys):
            raise InvalidInputError(f"Question {question.id} has duplicate option keys.")
        parsed.append(question)

    ids = [question.id for question in parsed]
    if len(set(ids)) != len(ids):
        raise InvalidInputError("Quiz contains duplicate question ids.")
    return parsed
