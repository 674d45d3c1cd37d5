from __future__ import annotations

from fastapi.testclient import TestClient
import pytest

from exam_app.core.quiz_session import QuizSessionController
from exam_app.core.services.api_client import ApiClient
from exam_app.core.services.auth_service import AuthService
from exam_app.core.services.content_service import ContentService
from exam_app.core.services.token_store import MemoryTokenStore
from exam_app.server.demo_content import build_demo_bank
from exam_app.server.demo_server import create_demo_app

from helpers import ManualScheduler, RecordingGrader


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def grader() -> RecordingGrader:
    return RecordingGrader()


@pytest.fixture
def make_controller(scheduler, grader):
    """Build a controller wired to the manual scheduler and recording grader."""

    def factory(session_id: int | None = 7, **kwargs) -> QuizSessionController:
        return QuizSessionController(session_id, grader=grader, scheduler=scheduler, **kwargs)

    return factory


@pytest.fixture
def demo_bank():
    return build_demo_bank(seed=1)


@pytest.fixture
def demo_client(demo_bank):
    with TestClient(create_demo_app(demo_bank), base_url="http://testserver/api") as client:
        yield client


@pytest.fixture
def token_store() -> MemoryTokenStore:
    return MemoryTokenStore()


@pytest.fixture
def api_client(demo_client, token_store) -> ApiClient:
    return ApiClient(token_provider=token_store, http_client=demo_client)


@pytest.fixture
def content_service(api_client) -> ContentService:
    return ContentService(api_client)


@pytest.fixture
def auth_service(api_client, token_store) -> AuthService:
    return AuthService(api_client, token_store)
