from exam_app.server.demo_content import DEMO_USER_EMAIL, DEMO_USER_PASSWORD


def _login(client) -> dict:
    response = client.post("/auth/login", json={"email": DEMO_USER_EMAIL, "password": DEMO_USER_PASSWORD})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


def test_responses_use_camel_case(demo_client):
    response = demo_client.get("/subjects/1/questions")

    assert response.status_code == 200
    first = response.json()[0]
    assert {"subjectId", "questionText", "correctOptionKey", "explanationText"} <= first.keys()
    assert first["options"][0] == {"key": "A", "text": "3"}


def test_errors_use_message_body(demo_client):
    response = demo_client.get("/notes/999")

    assert response.status_code == 404
    assert response.json() == {"message": "Note not found"}


def test_me_requires_bearer_token(demo_client):
    assert demo_client.get("/auth/me").status_code == 401

    response = demo_client.get("/auth/me", headers=_login(demo_client))

    assert response.json()["email"] == DEMO_USER_EMAIL


def test_start_quiz_defaults_question_count(demo_client):
    response = demo_client.post("/quizzes/start", json={"subjectId": 1}, headers=_login(demo_client))

    assert response.status_code == 201
    assert len(response.json()["questions"]) == 5


def test_grading_is_scoped_to_the_owner(demo_client):
    owner = _login(demo_client)
    started = demo_client.post("/quizzes/start", json={"subjectId": 3, "numberOfQuestions": 1}, headers=owner).json()
    demo_client.post("/auth/register", json={"name": "Eve", "email": "eve@example.com", "password": "pw"})
    other = demo_client.post("/auth/login", json={"email": "eve@example.com", "password": "pw"}).json()["token"]

    response = demo_client.post(
        "/quizzes/grade",
        json={"sessionId": started["sessionId"], "answers": []},
        headers={"Authorization": f"Bearer {other}"},
    )

    assert response.status_code == 404


def test_unanswered_questions_are_incorrect(demo_client):
    headers = _login(demo_client)
    started = demo_client.post("/quizzes/start", json={"subjectId": 2, "numberOfQuestions": 2}, headers=headers).json()

    response = demo_client.post(
        "/quizzes/grade",
        json={"sessionId": started["sessionId"], "answers": [{"questionId": q["id"], "userAnswerKey": ""} for q in started["questions"]]},
        headers=headers,
    )

    body = response.json()
    assert body["score"] == 0
    assert body["totalQuestions"] == 2
    assert all(item["isCorrect"] is False for item in body["results"])


def test_resubmitting_a_graded_session_returns_the_stored_grade(demo_client):
    headers = _login(demo_client)
    started = demo_client.post("/quizzes/start", json={"subjectId": 3, "numberOfQuestions": 1}, headers=headers).json()
    question = started["questions"][0]
    body = {
        "sessionId": started["sessionId"],
        "answers": [{"questionId": question["id"], "userAnswerKey": question["correctOptionKey"]}],
    }

    first = demo_client.post("/quizzes/grade", json=body, headers=headers)
    second = demo_client.post("/quizzes/grade", json=body, headers=headers)

    assert first.status_code == second.status_code == 200
    assert second.json() == first.json()
    history = demo_client.get("/quizzes/history", headers=headers).json()
    assert [entry["id"] for entry in history] == [started["sessionId"]]
