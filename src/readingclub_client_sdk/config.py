from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable, Mapping

from dotenv import load_dotenv

from .retry import DEFAULT_RETRYABLE_STATUSES, RetryPolicy
from .session_expiry import LOGIN_PATH

CREDENTIAL_MODES = frozenset({"include", "omit"})


class ConfigError(ValueError):
    pass


def _default_headers() -> dict[str, str]:
    return {"Content-Type": "application/json"}


@dataclass(frozen=True)
class ClientConfig:
    api_base_url: str
    env_name: str = "dev"
    app_url: str | None = None
    timeout_seconds: float = 10.0
    credential_mode: str = "include"
    default_headers: Mapping[str, str] = field(default_factory=_default_headers)
    debug: bool = False
    login_path: str = LOGIN_PATH

    @property
    def normalized_env(self) -> str:
        return self.env_name.lower().strip()

    @property
    def sends_credentials(self) -> bool:
        return self.credential_mode == "include"


def _require(values: dict[str, str | None], required: Iterable[str]) -> None:
    missing = [key for key in required if not values.get(key)]
    if missing:
        raise ConfigError(f"Missing required config values: {', '.join(missing)}")


def _coerce_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _read_float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid {name}: expected a number, got {raw!r}") from exc


def _read_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid {name}: expected an integer, got {raw!r}") from exc


def _read_int_set(name: str, default: Iterable[int]) -> frozenset[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return frozenset(default)
    try:
        return frozenset(int(item) for item in raw.split(",") if item.strip())
    except ValueError as exc:
        raise ConfigError(f"Invalid {name}: expected comma separated integers, got {raw!r}") from exc


def _validate(condition: bool, message: str) -> None:
    if not condition:
        raise ConfigError(message)


def load_config(env_file: str | None = None) -> ClientConfig:
    """Load client config from environment with optional .env override."""
    load_dotenv(env_file)

    env_name = (os.getenv("READINGCLUB_ENV") or "dev").strip()
    env_key = env_name.upper()

    api_base_url = (
        (os.getenv(f"READINGCLUB_API_BASE_URL_{env_key}") or "").strip()
        or (os.getenv("READINGCLUB_API_BASE_URL") or "").strip()
    )
    _require({"READINGCLUB_API_BASE_URL": api_base_url}, ["READINGCLUB_API_BASE_URL"])

    app_url = (os.getenv("READINGCLUB_APP_URL") or "").strip() or None

    timeout_seconds = _read_float("READINGCLUB_TIMEOUT_SECONDS", "10")
    _validate(
        timeout_seconds > 0,
        f"Invalid READINGCLUB_TIMEOUT_SECONDS: expected > 0, got {timeout_seconds}",
    )

    credential_mode = (os.getenv("READINGCLUB_CREDENTIAL_MODE") or "include").strip().lower()
    _validate(
        credential_mode in CREDENTIAL_MODES,
        (
            "Invalid READINGCLUB_CREDENTIAL_MODE: "
            f"expected one of {sorted(CREDENTIAL_MODES)}, got {credential_mode!r}"
        ),
    )

    login_path = (os.getenv("READINGCLUB_LOGIN_PATH") or LOGIN_PATH).strip()
    _validate(
        login_path.startswith("/"),
        f"Invalid READINGCLUB_LOGIN_PATH: expected an absolute path, got {login_path!r}",
    )

    debug = _coerce_bool(os.getenv("READINGCLUB_DEBUG"), env_name.lower() == "dev")

    return ClientConfig(
        api_base_url=api_base_url.rstrip("/"),
        env_name=env_name,
        app_url=app_url.rstrip("/") if app_url else None,
        timeout_seconds=timeout_seconds,
        credential_mode=credential_mode,
        debug=debug,
        login_path=login_path,
    )


def load_retry_policy(env_file: str | None = None) -> RetryPolicy:
    load_dotenv(env_file)

    max_retries = _read_int("READINGCLUB_RETRY_MAX", "2")
    _validate(max_retries >= 0, f"Invalid READINGCLUB_RETRY_MAX: expected >= 0, got {max_retries}")

    base_delay_ms = _read_int("READINGCLUB_RETRY_BASE_DELAY_MS", "1000")
    _validate(
        base_delay_ms >= 0,
        f"Invalid READINGCLUB_RETRY_BASE_DELAY_MS: expected >= 0, got {base_delay_ms}",
    )

    statuses = _read_int_set("READINGCLUB_RETRY_STATUSES", DEFAULT_RETRYABLE_STATUSES)
    _validate(
        all(400 <= status <= 599 for status in statuses),
        f"Invalid READINGCLUB_RETRY_STATUSES: expected HTTP error statuses, got {sorted(statuses)}",
    )

    return RetryPolicy(
        max_retries=max_retries,
        base_delay_ms=base_delay_ms,
        retryable_statuses=statuses,
    )
