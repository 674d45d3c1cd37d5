from datetime import datetime, timezone

import pytest

from exam_app.core.errors import ParseError
from exam_app.core.models import Answer
from exam_app.core.schemas import (
    NotePayload,
    QuestionPayload,
    QuizGradeRequest,
    QuizGradeResponse,
    QuizHistoryPayload,
    QuizStartRequest,
    parse_model,
    parse_model_list,
)

from helpers import question_payload


def test_question_payload_maps_camel_case_fields():
    question = parse_model(QuestionPayload, question_payload(4, correct="C")).to_domain()

    assert question.id == 4
    assert question.subject_id == 1
    assert question.correct_option_key == "C"
    assert question.option_keys() == ("A", "B", "C", "D")
    assert question.explanation_text == "Because."


def test_question_payload_fills_missing_optional_fields():
    payload = {"id": 1, "subjectId": 2, "questionText": "?", "options": [{"key": "A", "text": "yes"}]}

    question = parse_model(QuestionPayload, payload).to_domain()

    assert question.year == 0
    assert question.explanation_text == ""
    assert question.difficulty_level == ""


def test_question_payload_trims_option_keys():
    payload = question_payload(1)
    payload["options"][0]["key"] = " A "

    question = parse_model(QuestionPayload, payload).to_domain()

    assert question.option_keys()[0] == "A"


@pytest.mark.parametrize("bad_key", ["", "  ", "A B"])
def test_question_payload_rejects_bad_option_keys(bad_key):
    payload = question_payload(1)
    payload["options"][1]["key"] = bad_key

    with pytest.raises(ParseError):
        parse_model(QuestionPayload, payload)


def test_parse_model_list_requires_a_list():
    with pytest.raises(ParseError):
        parse_model_list(QuestionPayload, {"id": 1})


def test_note_payload_parses_timestamps():
    note = parse_model(
        NotePayload,
        {"id": 1, "subjectId": 1, "title": "T", "content": "**x**", "createdAt": "2024-01-15T09:00:00Z"},
    ).to_domain()

    assert note.created_at == datetime(2024, 1, 15, 9, 0, tzinfo=timezone.utc)
    assert note.updated_at is None


def test_grade_request_serializes_empty_answers():
    request = QuizGradeRequest.from_answers(5, [Answer(1, "B"), Answer(2)])

    assert request.model_dump(by_alias=True) == {
        "sessionId": 5,
        "answers": [
            {"questionId": 1, "userAnswerKey": "B"},
            {"questionId": 2, "userAnswerKey": ""},
        ],
    }


def test_start_request_uses_wire_names():
    request = QuizStartRequest(subject_id=3, number_of_questions=10)

    assert request.model_dump(by_alias=True) == {"subjectId": 3, "numberOfQuestions": 10}


def test_grade_response_to_domain():
    payload = {
        "sessionId": 9,
        "score": 1,
        "totalQuestions": 2,
        "results": [
            {"questionId": 1, "question": question_payload(1), "userAnswerKey": "A", "isCorrect": True},
            {"questionId": 2, "question": question_payload(2), "isCorrect": False},
        ],
    }

    result = parse_model(QuizGradeResponse, payload).to_domain()

    assert result.score == 1
    assert result.total_questions == 2
    assert result.results[1].user_answer_key == ""
    assert result.results[0].question.question_text == "Question 1?"


def test_history_payload_requires_subject():
    with pytest.raises(ParseError):
        parse_model(QuizHistoryPayload, {"id": 1, "userId": 1, "subjectId": 1, "score": 1, "totalQuestions": 2})
