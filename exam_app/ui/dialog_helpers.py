"""Helper functions for common dialog patterns in the exam client."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget

from exam_app.constants.ui_constants import (
    EXIT_DIALOG_MESSAGE,
    EXIT_DIALOG_TITLE,
    SUBMIT_DIALOG_MESSAGE,
    SUBMIT_DIALOG_TITLE,
)


def _confirm(parent: QWidget, title: str, message: str) -> bool:
    reply = QMessageBox.question(
        parent,
        title,
        message,
        QMessageBox.Yes | QMessageBox.Cancel,
        QMessageBox.Cancel,
    )
    return reply == QMessageBox.Yes


def confirm_exit_quiz(parent: QWidget) -> bool:
    """Ask before abandoning a quiz in progress.

    Returns:
        True if the user chose to exit, False otherwise
    """
    return _confirm(parent, EXIT_DIALOG_TITLE, EXIT_DIALOG_MESSAGE)


def confirm_submit_quiz(parent: QWidget, unanswered: int = 0) -> bool:
    """Ask before sending answers for grading, mentioning skipped questions."""
    message = SUBMIT_DIALOG_MESSAGE
    if unanswered:
        message = f"{message}\n\n{unanswered} question(s) are still unanswered."
    return _confirm(parent, SUBMIT_DIALOG_TITLE, message)


def show_error(parent: QWidget, title: str, message: str) -> None:
    """Show error dialog.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Error message
    """
    QMessageBox.critical(parent, title, message)


def show_info(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.information(parent, title, message)


def show_warning(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.warning(parent, title, message)
