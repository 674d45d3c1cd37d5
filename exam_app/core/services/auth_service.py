"""Login, registration and session bookkeeping against the auth endpoints."""

from __future__ import annotations

import logging

from exam_app.core.errors import InvalidInputError
from exam_app.core.models import User
from exam_app.core.schemas import AuthResponse, LoginRequest, RegisterRequest, parse_model
from exam_app.core.services.api_client import ApiClient, RequestAction
from exam_app.core.services.token_store import TokenStore

logger = logging.getLogger(__name__)

_LOGIN = RequestAction("log in", "logging in")
_REGISTER = RequestAction("register", "registering")


class AuthService:
    """Issues and forgets bearer tokens; the token itself lives in a :class:`TokenStore`."""

    def __init__(self, api_client: ApiClient, token_store: TokenStore) -> None:
        self._api = api_client
        self._store = token_store

    def login(self, email: str, password: str) -> User:
        email = email.strip()
        if not email or not password:
            raise InvalidInputError("Please fill in all fields")
        request = LoginRequest(email=email, password=password)
        payload = self._api.post("/auth/login", _LOGIN, request.model_dump(by_alias=True))
        session = parse_model(AuthResponse, payload).to_domain()
        self._store.save(session)
        logger.info("Logged in as %s", session.user.email)
        return session.user

    def register(self, name: str, email: str, password: str) -> User:
        """Create an account and sign straight into it."""
        email = email.strip()
        if not email or not password:
            raise InvalidInputError("Please fill in all fields")
        request = RegisterRequest(name=name.strip(), email=email, password=password)
        self._api.post("/auth/register", _REGISTER, request.model_dump(by_alias=True))
        logger.info("Registered %s", email)
        return self.login(email, password)

    def logout(self) -> None:
        session = self._store.load()
        self._store.clear()
        if session:
            logger.info("Logged out %s", session.user.email)

    def get_token(self) -> str | None:
        return self._store.get_token()

    def is_authenticated(self) -> bool:
        return bool(self.get_token())

    def get_current_user(self) -> User | None:
        session = self._store.load()
        return session.user if session else None
