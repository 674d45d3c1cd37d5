import json

import httpx
import pytest

from exam_app.core.errors import AuthenticationError, NetworkError, ParseError
from exam_app.core.models import AuthSession, User
from exam_app.core.services.api_client import ApiClient, RequestAction
from exam_app.core.services.token_store import MemoryTokenStore

FETCH = RequestAction("fetch exams", "fetching exams")


def _client(handler, token_store=None) -> ApiClient:
    return ApiClient(
        "http://exam.test/api",
        token_provider=token_store,
        transport=httpx.MockTransport(handler),
    )


def test_get_joins_base_path_and_returns_json():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[{"id": 1, "name": "Exam"}])

    assert _client(handler).get("/exams", FETCH) == [{"id": 1, "name": "Exam"}]
    assert seen[0].url.path == "/api/exams"
    assert "authorization" not in seen[0].headers


def test_bearer_token_is_attached_when_present():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.headers.get("authorization"))
        return httpx.Response(200, json={})

    store = MemoryTokenStore()
    client = _client(handler, token_store=store)
    client.get("/exams", FETCH)
    store.save(AuthSession(token="abc", user=User(id=1, email="a@b.c")))
    client.get("/exams", FETCH)

    assert seen == [None, "Bearer abc"]


def test_post_sends_json_body():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json={"ok": True})

    _client(handler).post("/quizzes/start", FETCH, {"subjectId": 1})

    assert seen[0].method == "POST"
    assert json.loads(seen[0].content) == {"subjectId": 1}


def test_server_message_is_surfaced():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"message": "Exam not found"})

    with pytest.raises(NetworkError) as excinfo:
        _client(handler).get("/exams/9/subjects", FETCH)

    assert str(excinfo.value) == "Exam not found"
    assert excinfo.value.status_code == 404


def test_fallback_message_when_body_has_none():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="boom")

    with pytest.raises(NetworkError, match="^Failed to fetch exams$"):
        _client(handler).get("/exams", FETCH)


def test_unauthorized_maps_to_authentication_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"detail": "Invalid email or password"})

    with pytest.raises(AuthenticationError, match="Invalid email or password"):
        _client(handler).get("/exams", FETCH)


def test_transport_failure_maps_to_network_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(NetworkError, match="^Network error while fetching exams$") as excinfo:
        _client(handler).get("/exams", FETCH)

    assert excinfo.value.status_code is None


def test_invalid_json_maps_to_parse_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>")

    with pytest.raises(ParseError):
        _client(handler).get("/exams", FETCH)


def test_empty_body_returns_none():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(204)

    assert _client(handler).get("/exams", FETCH) is None
