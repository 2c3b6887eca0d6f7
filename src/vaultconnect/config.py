"""Settings loader for the Connect client."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from vaultconnect.core.http.backoff import BackoffSchedule


class ConfigError(ValueError):
    """Raised when settings are missing or invalid."""


class ConnectSettings(BaseModel):
    api_token: str = Field(min_length=1)
    server_url: str = Field(min_length=1)
    retries: int = Field(default=1, ge=0, le=20)
    backoff_min_s: float = Field(default=0.1, ge=0)
    backoff_max_s: float = Field(default=20.0, ge=0)
    timeout_s: float = Field(default=15.0, gt=0)
    user_agent: str = "vaultconnect/0.1"
    log_level: Optional[str] = None

    @model_validator(mode="after")
    def _check_backoff_bounds(self) -> ConnectSettings:
        if self.backoff_min_s > self.backoff_max_s:
            raise ValueError("backoff_min_s must be <= backoff_max_s")
        return self

    def backoff(self) -> BackoffSchedule:
        return BackoffSchedule(
            max_attempts=self.retries,
            min_wait=self.backoff_min_s,
            max_wait=self.backoff_max_s,
        )


_STR_ENV = {
    "api_token": "OP_API_TOKEN",
    "server_url": "OP_SERVER_URL",
    "user_agent": "VAULTCONNECT_HTTP_USER_AGENT",
    "log_level": "VAULTCONNECT_LOG_LEVEL",
}
_INT_ENV = {
    "retries": "VAULTCONNECT_HTTP_RETRIES",
}
_FLOAT_ENV = {
    "backoff_min_s": "VAULTCONNECT_HTTP_BACKOFF_MIN_S",
    "backoff_max_s": "VAULTCONNECT_HTTP_BACKOFF_MAX_S",
    "timeout_s": "VAULTCONNECT_HTTP_TIMEOUT_S",
}


def _get_float_env(name: str) -> float | None:
    raw = os.getenv(name)
    if raw is None:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def _get_int_env(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _read_file(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping")
    section = data.get("connect", data)
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: 'connect' must be a mapping")
    return dict(section)


def load_settings(path: Optional[str | Path] = None) -> ConnectSettings:
    """Load settings from an optional YAML file, then apply environment overrides."""
    values: dict[str, Any] = _read_file(Path(path)) if path else {}

    for field, env_name in _STR_ENV.items():
        raw = os.getenv(env_name)
        if raw:
            values[field] = raw
    for field, env_name in _INT_ENV.items():
        parsed_int = _get_int_env(env_name)
        if parsed_int is not None:
            values[field] = parsed_int
    for field, env_name in _FLOAT_ENV.items():
        parsed_float = _get_float_env(env_name)
        if parsed_float is not None:
            values[field] = parsed_float

    missing = [env for field, env in (("api_token", "OP_API_TOKEN"), ("server_url", "OP_SERVER_URL")) if not values.get(field)]
    if missing:
        raise ConfigError(f"missing required settings: {', '.join(missing)}")

    try:
        return ConnectSettings.model_validate(values)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
