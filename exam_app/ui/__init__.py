"""Qt UI components for the exam preparation client."""

from .countdown_timer import QtTickScheduler
from .dialog_helpers import (
    confirm_exit_quiz,
    confirm_submit_quiz,
    show_error,
    show_info,
    show_warning,
)
from .grading_worker import QtGradingDispatcher
from .main_window import ExamMainWindow

__all__ = [
    "ExamMainWindow",
    "QtGradingDispatcher",
    "QtTickScheduler",
    "confirm_exit_quiz",
    "confirm_submit_quiz",
    "show_error",
    "show_info",
    "show_warning",
]
