"""Recurring one-second task that drives a quiz countdown."""

from __future__ import annotations

from typing import Callable, Protocol


class TickScheduler(Protocol):
    """A cancellable recurring task with a single owner.

    ``start`` must not stack callbacks: starting an already running scheduler
    replaces the callback and keeps one tick per interval.
    """

    def start(self, callback: Callable[[], None]) -> None: ...

    def stop(self) -> None: ...

    @property
    def is_running(self) -> bool: ...
