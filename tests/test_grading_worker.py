from exam_app.core.errors import NetworkError
from exam_app.core.models import Answer
from exam_app.ui.grading_worker import _GradingTask


class _Recorder:
    def __init__(self) -> None:
        self.emitted = []

    def emit(self, value) -> None:
        self.emitted.append(value)


class _Relay:
    def __init__(self) -> None:
        self.succeeded = _Recorder()
        self.failed = _Recorder()


class _ExplodingContent:
    def grade_quiz(self, session_id, answers):
        raise RuntimeError("connection pool exhausted")


class _FailingContent:
    def grade_quiz(self, session_id, answers):
        raise NetworkError("Failed to grade quiz", status_code=500)


def test_unexpected_error_is_reported_as_network_error():
    relay = _Relay()

    _GradingTask(_ExplodingContent(), 4, [Answer(1, "A")], relay).run()

    assert relay.succeeded.emitted == []
    (error,) = relay.failed.emitted
    assert isinstance(error, NetworkError)
    assert "connection pool exhausted" in str(error)


def test_service_error_is_forwarded_unchanged():
    relay = _Relay()

    _GradingTask(_FailingContent(), 4, [], relay).run()

    assert relay.failed.emitted[0].status_code == 500
