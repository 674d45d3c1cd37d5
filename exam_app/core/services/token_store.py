"""Storage for the bearer token issued at login."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

from exam_app.core.errors import ParseError
from exam_app.core.models import AuthSession
from exam_app.core.schemas import AuthResponse, parse_model

logger = logging.getLogger(__name__)


class TokenProvider(Protocol):
    """Anything that can hand out the current bearer token."""

    def get_token(self) -> str | None: ...


class TokenStore(TokenProvider, Protocol):
    """Holds the signed-in session between requests."""

    def load(self) -> AuthSession | None: ...

    def save(self, session: AuthSession) -> None: ...

    def clear(self) -> None: ...


class MemoryTokenStore:
    """Keeps the session for the lifetime of the process only."""

    def __init__(self, session: AuthSession | None = None) -> None:
        self._session = session

    def get_token(self) -> str | None:
        return self._session.token if self._session else None

    def load(self) -> AuthSession | None:
        return self._session

    def save(self, session: AuthSession) -> None:
        self._session = session

    def clear(self) -> None:
        self._session = None


class FileTokenStore:
    """Persists the session as a small JSON document.

    File layout::

        {"token": "...", "user": {"id": 1, "email": "...", "name": "..."}}
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._cached: AuthSession | None = None
        self._loaded = False

    @property
    def path(self) -> Path:
        return self._path

    def get_token(self) -> str | None:
        session = self.load()
        return session.token if session else None

    def load(self) -> AuthSession | None:
        if self._loaded:
            return self._cached
        self._loaded = True
        if not self._path.exists():
            return None
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except ValueError as exc:
            raise ParseError(f"Stored session in {self._path} is not valid JSON") from exc
        self._cached = parse_model(AuthResponse, data).to_domain()
        return self._cached

    def save(self, session: AuthSession) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        document = AuthResponse.from_domain(session).model_dump_json(by_alias=True, indent=2)
        self._path.write_text(document, encoding="utf-8")
        self._cached = session
        self._loaded = True
        logger.debug("Saved session for %s to %s", session.user.email, self._path)

    def clear(self) -> None:
        if self._path.exists():
            self._path.unlink()
        self._cached = None
        self._loaded = True
