from __future__ import annotations

import pytest

from exam_app.core.errors import (
    InvalidInputError,
    InvalidStateError,
    NetworkError,
    SubmissionInProgressError,
)
from exam_app.core.quiz_session import QuizSessionController, QuizState

from helpers import graded, make_question, question_payload


def _answers_as_pairs(answers):
    return [(answer.question_id, answer.user_answer_key) for answer in answers]


# --- Initialization ---


@pytest.mark.parametrize("count", [1, 3, 10])
def test_initialize_creates_one_empty_answer_per_question(make_controller, scheduler, count):
    questions = [make_question(question_id) for question_id in range(1, count + 1)]
    controller = make_controller()

    controller.initialize(questions)

    assert controller.get_state() is QuizState.ACTIVE
    assert [answer.question_id for answer in controller.get_answers()] == list(range(1, count + 1))
    assert all(answer.user_answer_key == "" for answer in controller.get_answers())
    assert controller.get_remaining_seconds() == 60 * count
    assert controller.get_current_index() == 0
    assert scheduler.running


def test_initialize_accepts_wire_payloads(make_controller):
    controller = make_controller()

    controller.initialize([question_payload(11), question_payload(12, keys="AB", correct="B")])

    assert [question.id for question in controller.get_questions()] == [11, 12]
    assert controller.get_questions()[1].option_keys() == ("A", "B")


def test_initialize_rejects_empty_list(make_controller, scheduler):
    controller = make_controller()

    with pytest.raises(InvalidInputError):
        controller.initialize([])

    assert controller.get_state() is QuizState.LOADING
    assert not scheduler.running


@pytest.mark.parametrize(
    "payload",
    [
        {"id": 1, "subjectId": 1},
        {"id": "not-a-number", "subjectId": 1, "questionText": "?", "options": []},
        {"id": 1, "subjectId": 1, "questionText": "?", "options": [{"key": "A B", "text": "x"}]},
        {"id": 1, "subjectId": 1, "questionText": "?", "options": [{"key": "A", "text": "x"}, {"key": "A", "text": "y"}]},
    ],
)
def test_initialize_rejects_malformed_payloads(make_controller, payload):
    controller = make_controller()

    with pytest.raises(InvalidInputError):
        controller.initialize([payload])


def test_initialize_rejects_question_without_options(make_controller):
    controller = make_controller()

    with pytest.raises(InvalidInputError):
        controller.initialize([make_question(1, keys="")])


def test_initialize_rejects_duplicate_question_ids(make_controller):
    controller = make_controller()

    with pytest.raises(InvalidInputError):
        controller.initialize([make_question(1), make_question(1)])


def test_initialize_requires_session_id(make_controller):
    controller = make_controller(session_id=None)

    with pytest.raises(InvalidInputError):
        controller.initialize([make_question(1)])


def test_initialize_twice_is_rejected(make_controller):
    controller = make_controller()
    controller.initialize([make_question(1)])

    with pytest.raises(InvalidStateError):
        controller.initialize([make_question(2)])


# --- Answers ---


def test_select_answer_is_idempotent_and_isolated(make_controller):
    changes = []
    controller = make_controller(on_change=changes.append)
    controller.initialize([make_question(1), make_question(2)])
    controller.select_answer(2, "C")
    changes.clear()

    controller.select_answer(1, "B")
    controller.select_answer(1, "B")

    assert _answers_as_pairs(controller.get_answers()) == [(1, "B"), (2, "C")]
    assert len(changes) == 1

    controller.select_answer(1, "D")
    assert _answers_as_pairs(controller.get_answers()) == [(1, "D"), (2, "C")]


def test_select_answer_for_unknown_question_is_ignored(make_controller):
    controller = make_controller()
    controller.initialize([make_question(1)])

    controller.select_answer(99, "A")

    assert _answers_as_pairs(controller.get_answers()) == [(1, "")]


def test_select_answer_rejects_foreign_option_key(make_controller):
    controller = make_controller()
    controller.initialize([make_question(1, keys="AB")])

    with pytest.raises(InvalidInputError):
        controller.select_answer(1, "E")

    assert controller.get_current_answer().user_answer_key == ""


def test_select_empty_key_clears_selection(make_controller):
    controller = make_controller()
    controller.initialize([make_question(1)])
    controller.select_answer(1, "A")

    controller.select_answer(1, "")

    assert not controller.get_current_answer().is_answered


def test_select_answer_requires_active_state(make_controller):
    controller = make_controller()

    with pytest.raises(InvalidStateError):
        controller.select_answer(1, "A")


# --- Navigation ---


def test_navigation_is_clamped(make_controller):
    controller = make_controller()
    controller.initialize([make_question(1), make_question(2), make_question(3)])

    controller.retreat()
    assert controller.get_current_index() == 0
    assert controller.is_first_question()

    for _ in range(5):
        controller.advance()
    assert controller.get_current_index() == 2
    assert controller.is_last_question()

    controller.go_to(-4)
    assert controller.get_current_index() == 0
    controller.go_to(1)
    assert controller.get_current_question().id == 2


def test_navigation_is_rejected_while_submitting(make_controller):
    controller = make_controller()
    controller.initialize([make_question(1), make_question(2)])
    controller.submit()

    with pytest.raises(InvalidStateError):
        controller.advance()
    with pytest.raises(InvalidStateError):
        controller.retreat()


# --- Submission ---


def test_manual_submission_sends_every_answer(make_controller, scheduler, grader):
    questions = [make_question(1, correct="B"), make_question(2), make_question(3, correct="A")]
    results = []
    controller = make_controller(on_result=results.append)
    controller.initialize(questions)
    scheduler.fire(30)
    assert controller.get_remaining_seconds() == 150

    controller.select_answer(1, "B")
    controller.advance()
    controller.advance()
    controller.select_answer(3, "A")
    controller.submit()

    assert controller.get_state() is QuizState.SUBMITTING
    assert not scheduler.running
    session_id, answers = grader.requests[0]
    assert session_id == 7
    assert _answers_as_pairs(answers) == [(1, "B"), (2, ""), (3, "A")]

    grader.succeed(graded(7, questions, {1: "B", 3: "A"}))

    assert controller.get_state() is QuizState.SUBMITTED
    assert results[0].score == 2
    assert controller.get_result() is results[0]
    assert controller.get_answers() == []


def test_second_submit_while_in_flight_is_rejected(make_controller, grader):
    controller = make_controller()
    controller.initialize([make_question(1)])
    controller.submit()

    with pytest.raises(SubmissionInProgressError):
        controller.submit()

    assert len(grader.requests) == 1


def test_submit_after_success_is_rejected(make_controller, grader):
    questions = [make_question(1)]
    controller = make_controller()
    controller.initialize(questions)
    controller.submit()
    grader.succeed(graded(7, questions, {}))

    with pytest.raises(InvalidStateError):
        controller.submit()
    assert len(grader.requests) == 1


def test_countdown_expiry_submits_exactly_once(make_controller, scheduler, grader):
    questions = [make_question(question_id) for question_id in range(1, 6)]
    seen_states = []
    controller = make_controller(on_change=lambda c: seen_states.append(c.get_state()))
    controller.initialize(questions)
    controller.select_answer(1, "A")
    controller.select_answer(4, "C")

    scheduler.fire(300)
    controller.tick()
    controller.tick()

    assert controller.get_remaining_seconds() == 0
    assert QuizState.TIMED_OUT in seen_states
    assert controller.get_state() is QuizState.SUBMITTING
    assert len(grader.requests) == 1
    answers = grader.requests[0][1]
    assert len(answers) == 5
    assert sum(1 for answer in answers if not answer.is_answered) == 3


def test_failed_submission_resumes_countdown(make_controller, scheduler, grader):
    errors = []
    controller = make_controller(on_error=errors.append)
    controller.initialize([make_question(1), make_question(2)])
    controller.select_answer(1, "B")
    scheduler.fire(10)
    controller.submit()

    grader.fail(NetworkError("Network error while grading quiz"))

    assert controller.get_state() is QuizState.ACTIVE
    assert controller.get_remaining_seconds() == 110
    assert scheduler.running
    assert _answers_as_pairs(controller.get_answers()) == [(1, "B"), (2, "")]
    assert isinstance(errors[0], NetworkError)
    assert controller.get_last_error() is errors[0]

    scheduler.fire()
    assert controller.get_remaining_seconds() == 109

    controller.submit()
    assert _answers_as_pairs(grader.requests[1][1]) == [(1, "B"), (2, "")]


def test_failed_automatic_submission_allows_manual_retry(make_controller, scheduler, grader):
    questions = [make_question(1)]
    controller = make_controller()
    controller.initialize(questions)
    scheduler.fire(60)
    grader.fail(NetworkError("Network error while grading quiz"))

    assert controller.get_state() is QuizState.ACTIVE
    assert not scheduler.running
    controller.tick()
    assert len(grader.requests) == 1

    controller.submit()
    grader.succeed(graded(7, questions, {}))
    assert controller.get_state() is QuizState.SUBMITTED


# --- Exit and teardown ---


def test_exit_confirmed_discards_session(make_controller, scheduler):
    controller = make_controller(confirm_exit=lambda: True)
    controller.initialize([make_question(1)])

    assert controller.request_exit()

    assert controller.get_state() is QuizState.EXITED
    assert not scheduler.running
    assert controller.get_answers() == []


def test_exit_cancelled_keeps_session(make_controller, scheduler):
    controller = make_controller(confirm_exit=lambda: False)
    controller.initialize([make_question(1)])

    assert not controller.request_exit()

    assert controller.get_state() is QuizState.ACTIVE
    assert scheduler.running


def test_exit_rejected_while_submitting(make_controller):
    controller = make_controller()
    controller.initialize([make_question(1)])
    controller.submit()

    with pytest.raises(InvalidStateError):
        controller.request_exit()


def test_close_stops_countdown_and_blocks_restart(make_controller, scheduler, grader):
    controller = make_controller()
    controller.initialize([make_question(1)])
    controller.submit()
    controller.close()

    grader.fail(NetworkError("offline"))

    assert not scheduler.running
    assert scheduler.start_calls == 1


def test_late_grade_result_after_exit_is_dropped(scheduler, grader):
    results = []
    controller = QuizSessionController(3, grader=grader, scheduler=scheduler, on_result=results.append)
    questions = [make_question(1)]
    controller.initialize(questions)
    controller.submit()
    grader.fail(NetworkError("offline"))
    controller.request_exit()

    controller._handle_graded(graded(3, questions, {}))

    assert results == []
    assert controller.get_state() is QuizState.EXITED
