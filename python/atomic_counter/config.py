"""Environment-driven configuration for the counter service."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any


def _read_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _read_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        parsed = int(value)
        return parsed if parsed > 0 else default
    except ValueError:
        return default


_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _read_level(value: str | None, default: str) -> str:
    if value is None:
        return default
    level = value.strip().upper()
    return level if level in _LOG_LEVELS else default


@dataclass(frozen=True)
class CounterSettings:
    """Configuration container."""

    host: str = "0.0.0.0"
    port: int = 8080
    # Lifetime of the name/team cookies, enforced by the browser
    session_max_age: int = 3600
    history_size: int = 5
    refresh_seconds: int = 2
    log_level: str = "INFO"
    access_log: bool = True

    @classmethod
    def from_env(cls) -> "CounterSettings":
        host = os.environ.get("COUNTER_HOST", cls.host).strip() or cls.host
        port = _read_int(os.environ.get("COUNTER_PORT"), cls.port)
        session_max_age = _read_int(
            os.environ.get("COUNTER_SESSION_MAX_AGE"), cls.session_max_age
        )
        history_size = _read_int(os.environ.get("COUNTER_HISTORY_SIZE"), cls.history_size)
        refresh_seconds = _read_int(
            os.environ.get("COUNTER_REFRESH_SECONDS"), cls.refresh_seconds
        )
        log_level = _read_level(os.environ.get("COUNTER_LOG_LEVEL"), cls.log_level)
        access_log = _read_bool(os.environ.get("COUNTER_ACCESS_LOG"), cls.access_log)

        return cls(
            host=host,
            port=port,
            session_max_age=session_max_age,
            history_size=history_size,
            refresh_seconds=refresh_seconds,
            log_level=log_level,
            access_log=access_log,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a dict suitable for logging/debugging."""

        return {
            "host": self.host,
            "port": self.port,
            "session_max_age": self.session_max_age,
            "history_size": self.history_size,
            "refresh_seconds": self.refresh_seconds,
            "log_level": self.log_level,
            "access_log": self.access_log,
        }
