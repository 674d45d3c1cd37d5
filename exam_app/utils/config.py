"""Runtime configuration read from the environment."""

from __future__ import annotations

from dataclasses import dataclass, replace
import os
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

from exam_app.constants.network_constants import DEFAULT_API_URL, DEFAULT_TIMEOUT_SECONDS
from exam_app.core.errors import InvalidInputError

API_URL_ENV = "EXAM_APP_API_URL"
TIMEOUT_ENV = "EXAM_APP_TIMEOUT_SECONDS"
TOKEN_FILE_ENV = "EXAM_APP_TOKEN_FILE"
LOG_LEVEL_ENV = "EXAM_APP_LOG_LEVEL"


def _default_token_file() -> Path:
    return Path.home() / ".exam_app" / "session.json"


@dataclass(frozen=True, slots=True)
class AppConfig:
    api_url: str = DEFAULT_API_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    token_file: Path | None = None
    log_level: str = "INFO"

    @classmethod
    def from_environment(
        cls,
        environ: Mapping[str, str] | None = None,
        dotenv_path: Path | None = None,
    ) -> AppConfig:
        """Read settings from ``environ``, or from the process environment plus a ``.env`` file."""
        if environ is None:
            load_dotenv(dotenv_path)
            env: Mapping[str, str] = os.environ
        else:
            env = environ
        timeout_text = env.get(TIMEOUT_ENV)
        try:
            timeout = float(timeout_text) if timeout_text else DEFAULT_TIMEOUT_SECONDS
        except ValueError as exc:
            raise InvalidInputError(f"{TIMEOUT_ENV} must be a number, got {timeout_text!r}") from exc
        if timeout <= 0:
            raise InvalidInputError(f"{TIMEOUT_ENV} must be positive")
        token_file = env.get(TOKEN_FILE_ENV)
        return cls(
            api_url=env.get(API_URL_ENV) or DEFAULT_API_URL,
            timeout_seconds=timeout,
            token_file=Path(token_file).expanduser() if token_file else _default_token_file(),
            log_level=(env.get(LOG_LEVEL_ENV) or "INFO").upper(),
        )

    def with_overrides(self, api_url: str | None = None, log_level: str | None = None) -> AppConfig:
        """Apply command-line overrides on top of the environment."""
        return replace(
            self,
            api_url=api_url or self.api_url,
            log_level=log_level.upper() if log_level else self.log_level,
        )
