"""Thin httpx wrapper for the content service REST API."""

from __future__ import annotations

import logging
from typing import Any, Generator, NamedTuple

import httpx

from exam_app.constants.network_constants import DEFAULT_API_URL, DEFAULT_TIMEOUT_SECONDS
from exam_app.core.errors import AuthenticationError, NetworkError, ParseError
from exam_app.core.services.token_store import TokenProvider

logger = logging.getLogger(__name__)


class RequestAction(NamedTuple):
    """Human readable description of a request used in error messages."""

    infinitive: str  # "fetch exams"
    gerund: str  # "fetching exams"


class BearerTokenAuth(httpx.Auth):
    """Attach ``Authorization: Bearer <token>`` when the provider has a token."""

    def __init__(self, token_provider: TokenProvider) -> None:
        self._token_provider = token_provider

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        token = self._token_provider.get_token()
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
        yield request


class ApiClient:
    """Sends JSON requests and maps failures onto the application error types."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        token_provider: TokenProvider | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        if http_client is None:
            http_client = httpx.Client(
                base_url=base_url,
                timeout=timeout,
                transport=transport,
                headers={"Content-Type": "application/json"},
            )
        self._client = http_client
        self._auth = BearerTokenAuth(token_provider) if token_provider is not None else None

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    def get(self, path: str, action: RequestAction) -> Any:
        return self._request("GET", path, action)

    def post(self, path: str, action: RequestAction, payload: dict[str, Any] | None = None) -> Any:
        return self._request("POST", path, action, payload)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> ApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _request(
        self,
        method: str,
        path: str,
        action: RequestAction,
        payload: dict[str, Any] | None = None,
    ) -> Any:
        auth = self._auth if self._auth is not None else httpx.USE_CLIENT_DEFAULT
        try:
            response = self._client.request(method, path, json=payload, auth=auth)
        except httpx.RequestError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise NetworkError(f"Network error while {action.gerund}") from exc

        if response.is_error:
            message = _extract_message(response) or f"Failed to {action.infinitive}"
            logger.warning("%s %s returned %s: %s", method, path, response.status_code, message)
            error_type = AuthenticationError if response.status_code == 401 else NetworkError
            raise error_type(message, status_code=response.status_code)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise ParseError(f"Invalid JSON received while {action.gerund}") from exc


def _extract_message(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message") or body.get("detail")
        if isinstance(message, str) and message:
            return message
    return None
