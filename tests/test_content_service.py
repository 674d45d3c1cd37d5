import pytest

from exam_app.core.errors import AuthenticationError, NetworkError
from exam_app.core.models import Answer
from exam_app.server.demo_content import DEMO_USER_EMAIL, DEMO_USER_PASSWORD


@pytest.fixture
def signed_in(auth_service):
    auth_service.login(DEMO_USER_EMAIL, DEMO_USER_PASSWORD)


def test_catalogue_browsing(content_service):
    exams = content_service.list_exams()
    subjects = content_service.list_subjects(exams[0].id)
    questions = content_service.list_questions(subjects[0].id)

    assert [exam.id for exam in exams] == [1, 2]
    assert [subject.name for subject in subjects] == ["Mathematics", "Physics"]
    assert len(questions) == 5
    assert questions[0].option_keys() == ("A", "B", "C", "D")
    assert content_service.get_question(1).correct_option_key == "B"


def test_notes(content_service):
    notes = content_service.list_notes(1)

    assert [note.title for note in notes] == ["Linear equations", "Angles"]
    assert content_service.get_note(3).title == "Newton's laws"
    assert notes[0].created_at is not None


def test_unknown_exam_surfaces_server_message(content_service):
    with pytest.raises(NetworkError, match="Exam not found"):
        content_service.list_subjects(99)


def test_start_quiz_requires_login(content_service):
    with pytest.raises(AuthenticationError):
        content_service.start_quiz(1, 3)


def test_start_and_grade_quiz(content_service, signed_in):
    quiz = content_service.start_quiz(1, 3)

    assert len(quiz.questions) == 3
    assert len({question.id for question in quiz.questions}) == 3

    first, second, third = quiz.questions
    answers = [
        Answer(first.id, first.correct_option_key),
        Answer(second.id, ""),
        Answer(third.id, next(key for key in third.option_keys() if key != third.correct_option_key)),
    ]
    result = content_service.grade_quiz(quiz.session_id, answers)

    assert result.session_id == quiz.session_id
    assert result.score == 1
    assert result.total_questions == 3
    assert [item.is_correct for item in result.results] == [True, False, False]
    assert result.results[1].user_answer_key == ""


def test_quiz_size_is_capped_by_pool(content_service, signed_in):
    quiz = content_service.start_quiz(2, 10)

    assert len(quiz.questions) == 2


def test_regrading_returns_the_first_result(content_service, signed_in):
    quiz = content_service.start_quiz(1, 1)
    question = quiz.questions[0]
    first = content_service.grade_quiz(quiz.session_id, [Answer(question.id, question.correct_option_key)])

    again = content_service.grade_quiz(quiz.session_id, [Answer(question.id, "")])

    assert again == first
    assert again.score == 1
    assert len(content_service.list_quiz_history()) == 1


def test_history_lists_graded_quizzes(content_service, signed_in):
    assert content_service.list_quiz_history() == []
    quiz = content_service.start_quiz(1, 2)
    content_service.grade_quiz(quiz.session_id, [Answer(q.id, q.correct_option_key) for q in quiz.questions])

    history = content_service.list_quiz_history()

    assert len(history) == 1
    assert history[0].subject.name == "Mathematics"
    assert history[0].score == 2
    assert history[0].total_questions == 2
