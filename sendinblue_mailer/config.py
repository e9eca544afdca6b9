from __future__ import annotations

"""Adapter configuration (loaded from environment variables + .env).

Design:
- The API key has no default; delivery refuses to start without it.
- The base URI is threaded explicitly into the dispatcher, so tests point it
  at a local fake server instead of patching globals.
- Environment variables always override .env file values.
"""

from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator


DEFAULT_BASE_URI = "https://api.sendinblue.com"
FILTERED = "[FILTERED]"

SUPPORTED_DIALECTS = ("v2", "v3")


class AppConfig(BaseModel):
    api_key: str | None = None
    base_uri: str = DEFAULT_BASE_URI
    dialect: str = "v3"

    # None leaves the transport's own defaults in place
    request_timeout_seconds: int | None = None

    log_path: Path = Path(".logs/sendinblue.log")
    log_level: str = "INFO"

    @field_validator("base_uri")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        v = value.strip().rstrip("/")
        if not v:
            raise ValueError("base_uri cannot be empty")
        return v

    @field_validator("dialect")
    @classmethod
    def _known_dialect(cls, value: str) -> str:
        v = value.strip().lower()
        if v not in SUPPORTED_DIALECTS:
            raise ValueError(f"dialect must be one of {list(SUPPORTED_DIALECTS)}")
        return v

    @field_validator("request_timeout_seconds")
    @classmethod
    def _positive_timeout(cls, value: int | None) -> int | None:
        if value is not None and value <= 0:
            raise ValueError("value must be positive")
        return value

    @property
    def api_key_set(self) -> bool:
        return self.api_key not in (None, "")

    def redacted(self) -> dict[str, Any]:
        options = self.model_dump(mode="json")
        if self.api_key_set:
            options["api_key"] = FILTERED
        return options


def load_config(env_file: str | None = ".env") -> AppConfig:
    if env_file:
        load_dotenv(env_file, override=False)
    timeout = _getenv_opt("SENDINBLUE_TIMEOUT_SECONDS")
    return AppConfig(
        api_key=_getenv_opt("SENDINBLUE_API_KEY"),
        base_uri=_getenv_str("SENDINBLUE_BASE_URI", DEFAULT_BASE_URI),
        dialect=_getenv_str("SENDINBLUE_DIALECT", "v3"),
        request_timeout_seconds=int(timeout) if timeout is not None else None,
        log_path=Path(_getenv_str("LOG_PATH", ".logs/sendinblue.log")),
        log_level=_getenv_str("LOG_LEVEL", "INFO"),
    )


def _getenv_opt(name: str) -> str | None:
    import os

    value = os.getenv(name)
    if value is None or value == "":
        return None
    return value


def _getenv_str(name: str, default: str) -> str:
    value = _getenv_opt(name)
    return value if value is not None else default
