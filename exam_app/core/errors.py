"""Exception hierarchy shared by the services, the quiz controller and the UI."""

from __future__ import annotations


class ExamAppError(Exception):
    """Base class for every error surfaced to the user."""


class InvalidInputError(ExamAppError):
    """Raised when caller-supplied data cannot start or drive a quiz session."""


class NetworkError(ExamAppError):
    """Raised when a request to the content service fails.

    ``status_code`` is ``None`` when no response was received at all.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class AuthenticationError(NetworkError):
    """Raised when the service rejects the credentials or the bearer token."""


class ParseError(ExamAppError):
    """Raised when a response payload does not match the expected schema."""


class InvalidStateError(ExamAppError):
    """Raised when a quiz operation is not allowed in the current state."""


class SubmissionInProgressError(InvalidStateError):
    """Raised when a quiz is submitted while a grading request is in flight."""
