import json

import pytest

from exam_app.core.errors import AuthenticationError, InvalidInputError, NetworkError, ParseError
from exam_app.core.models import AuthSession, User
from exam_app.core.services.token_store import FileTokenStore
from exam_app.server.demo_content import DEMO_USER_EMAIL, DEMO_USER_PASSWORD


def test_login_stores_token_and_user(auth_service, token_store):
    user = auth_service.login(DEMO_USER_EMAIL, DEMO_USER_PASSWORD)

    assert user.email == DEMO_USER_EMAIL
    assert auth_service.is_authenticated()
    assert auth_service.get_token() == token_store.get_token()
    assert auth_service.get_current_user() == user


def test_login_with_wrong_password_fails(auth_service):
    with pytest.raises(AuthenticationError, match="Invalid email or password"):
        auth_service.login(DEMO_USER_EMAIL, "nope")

    assert not auth_service.is_authenticated()


@pytest.mark.parametrize(("email", "password"), [("", "x"), ("  ", "x"), ("a@b.c", "")])
def test_login_requires_both_fields(auth_service, email, password):
    with pytest.raises(InvalidInputError, match="Please fill in all fields"):
        auth_service.login(email, password)


def test_register_signs_in(auth_service):
    user = auth_service.register("Ada", "ada@example.com", "secret")

    assert user.name == "Ada"
    assert auth_service.is_authenticated()


def test_register_duplicate_email_is_rejected(auth_service):
    with pytest.raises(NetworkError) as excinfo:
        auth_service.register("Again", DEMO_USER_EMAIL, "whatever")

    assert excinfo.value.status_code == 409


def test_logout_forgets_session(auth_service):
    auth_service.login(DEMO_USER_EMAIL, DEMO_USER_PASSWORD)

    auth_service.logout()

    assert not auth_service.is_authenticated()
    assert auth_service.get_current_user() is None


def test_file_token_store_round_trip(tmp_path):
    path = tmp_path / "nested" / "session.json"
    session = AuthSession(token="tok", user=User(id=3, email="x@y.z", name="X"))

    FileTokenStore(path).save(session)

    assert json.loads(path.read_text(encoding="utf-8"))["token"] == "tok"
    assert FileTokenStore(path).load() == session
    assert FileTokenStore(path).get_token() == "tok"


def test_file_token_store_missing_file(tmp_path):
    store = FileTokenStore(tmp_path / "missing.json")

    assert store.load() is None
    assert store.get_token() is None


def test_file_token_store_clear_removes_file(tmp_path):
    path = tmp_path / "session.json"
    store = FileTokenStore(path)
    store.save(AuthSession(token="tok", user=User(id=1, email="a@b.c")))

    store.clear()

    assert not path.exists()
    assert store.get_token() is None


def test_file_token_store_rejects_corrupt_file(tmp_path):
    path = tmp_path / "session.json"
    path.write_text('{"token": "t"}', encoding="utf-8")

    with pytest.raises(ParseError):
        FileTokenStore(path).load()


@pytest.mark.parametrize(
    "document",
    [
        {"token": 123, "user": {"id": 7, "email": "a@b.c"}},
        {"token": "t", "user": {"id": 7, "email": 5}},
        {"token": "t", "user": {"id": "seven", "email": "a@b.c"}},
    ],
)
def test_file_token_store_rejects_mistyped_fields(tmp_path, document):
    path = tmp_path / "session.json"
    path.write_text(json.dumps(document), encoding="utf-8")

    with pytest.raises(ParseError):
        FileTokenStore(path).load()


def test_file_token_store_rejects_invalid_json(tmp_path):
    path = tmp_path / "session.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ParseError, match="not valid JSON"):
        FileTokenStore(path).load()


def test_file_token_store_writes_camel_case_document(tmp_path):
    path = tmp_path / "session.json"

    FileTokenStore(path).save(AuthSession(token="tok", user=User(id=2, email="a@b.c", name="Ann")))

    assert json.loads(path.read_text(encoding="utf-8")) == {
        "token": "tok",
        "user": {"id": 2, "email": "a@b.c", "name": "Ann"},
    }
