"""Grades quizzes on a worker thread and reports back on the GUI thread."""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QRunnable, Qt, QThreadPool, Signal, Slot

from exam_app.core.errors import ExamAppError, NetworkError
from exam_app.core.models import Answer
from exam_app.core.services.content_service import ContentService
from exam_app.core.services.grading import FailureCallback, GradeCallback

logger = logging.getLogger(__name__)


class _GradingRelay(QObject):
    """Lives on the GUI thread; queued signals carry the worker's outcome back."""

    succeeded = Signal(object)
    failed = Signal(object)

    def __init__(self, on_success: GradeCallback, on_failure: FailureCallback, on_done) -> None:
        super().__init__()
        self._on_success = on_success
        self._on_failure = on_failure
        self._on_done = on_done
        self.succeeded.connect(self._deliver_success, Qt.QueuedConnection)
        self.failed.connect(self._deliver_failure, Qt.QueuedConnection)

    @Slot(object)
    def _deliver_success(self, result) -> None:
        try:
            self._on_success(result)
        finally:
            self._on_done(self)

    @Slot(object)
    def _deliver_failure(self, error) -> None:
        try:
            self._on_failure(error)
        finally:
            self._on_done(self)


class _GradingTask(QRunnable):
    def __init__(
        self,
        content_service: ContentService,
        session_id: int,
        answers: list[Answer],
        relay: _GradingRelay,
    ) -> None:
        super().__init__()
        self._content = content_service
        self._session_id = session_id
        self._answers = answers
        self._relay = relay

    def run(self) -> None:
        try:
            result = self._content.grade_quiz(self._session_id, self._answers)
        except ExamAppError as exc:
            self._relay.failed.emit(exc)
            return
        except Exception as exc:
            logger.exception("Grading session %s failed unexpectedly", self._session_id)
            self._relay.failed.emit(NetworkError(f"Failed to grade quiz: {exc}"))
            return
        self._relay.succeeded.emit(result)


class QtGradingDispatcher:
    """Runs ``ContentService.grade_quiz`` on a ``QThreadPool``."""

    def __init__(self, content_service: ContentService, pool: QThreadPool | None = None) -> None:
        self._content = content_service
        self._pool = pool or QThreadPool.globalInstance()
        self._pending: set[_GradingRelay] = set()

    def dispatch(
        self,
        session_id: int,
        answers: list[Answer],
        on_success: GradeCallback,
        on_failure: FailureCallback,
    ) -> None:
        relay = _GradingRelay(on_success, on_failure, self._pending.discard)
        self._pending.add(relay)
        logger.debug("Queueing grading of session %s", session_id)
        self._pool.start(_GradingTask(self._content, session_id, answers, relay))
