"""QTimer-backed countdown scheduler owned by one quiz controller."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QObject, QTimer

from exam_app.constants.quiz_constants import TICK_INTERVAL_MS


class QtTickScheduler:
    """Calls the registered callback every ``interval_ms`` on the GUI thread."""

    def __init__(self, parent: QObject | None = None, interval_ms: int = TICK_INTERVAL_MS) -> None:
        self._callback: Callable[[], None] | None = None
        self._disposed = False
        self._timer = QTimer(parent)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_timeout)

    def start(self, callback: Callable[[], None]) -> None:
        self._callback = callback
        if not self._timer.isActive():
            self._timer.start()

    def stop(self) -> None:
        if not self._disposed and self._timer.isActive():
            self._timer.stop()

    def dispose(self) -> None:
        """Stop the timer and release it once control returns to the event loop."""
        if self._disposed:
            return
        self.stop()
        self._callback = None
        self._disposed = True
        self._timer.deleteLater()

    @property
    def is_running(self) -> bool:
        return not self._disposed and self._timer.isActive()

    def _on_timeout(self) -> None:
        if self._callback is not None:
            self._callback()
