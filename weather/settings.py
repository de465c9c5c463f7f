"""Environment-driven configuration for the weather CLI.

All values are read from the process environment. The run mode is decided
once from WEATHER_API_KEY: an absent, empty or `demo` key selects mock data.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Final, TypeAlias

DEMO_API_KEY: Final[str] = "demo"
DEFAULT_API_HOST: Final[str] = "api.openweathermap.org"
DEFAULT_LANG: Final[str] = "en"
DEFAULT_TIMEOUT_S: Final[float] = 5.0
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"


class SettingsError(Exception):
    """Raised when an environment value cannot be used."""

    def __init__(self, message: str, *, code: str) -> None:
        super().__init__(message)
        self.code = code


@dataclass(frozen=True)
class MockMode:
    pass


@dataclass(frozen=True)
class LiveMode:
    api_key: str = field(repr=False)


RunMode: TypeAlias = MockMode | LiveMode


@dataclass(frozen=True)
class Settings:
    mode: RunMode
    api_host: str = DEFAULT_API_HOST
    lang: str = DEFAULT_LANG
    timeout_s: float = DEFAULT_TIMEOUT_S
    display_tz: str | None = None
    log_level: str = DEFAULT_LOG_LEVEL


def resolve_mode(api_key: str | None) -> RunMode:
    key = (api_key or "").strip()
    if not key or key == DEMO_API_KEY:
        return MockMode()
    return LiveMode(api_key=key)


def _read_timeout(raw: str | None) -> float:
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT_S
    try:
        value = float(raw)
    except ValueError as exc:
        raise SettingsError(
            "WEATHER_REQUEST_TIMEOUT_S must be a number.",
            code="bad_timeout",
        ) from exc
    if value <= 0:
        raise SettingsError(
            "WEATHER_REQUEST_TIMEOUT_S must be greater than zero.",
            code="bad_timeout",
        )
    return value


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build settings from `environ` (defaults to `os.environ`)."""

    env = os.environ if environ is None else environ
    display_tz = (env.get("WEATHER_DISPLAY_TZ") or "").strip() or None
    return Settings(
        mode=resolve_mode(env.get("WEATHER_API_KEY")),
        api_host=(env.get("WEATHER_API_HOST") or "").strip()
        or DEFAULT_API_HOST,
        lang=(env.get("WEATHER_LANG") or "").strip() or DEFAULT_LANG,
        timeout_s=_read_timeout(env.get("WEATHER_REQUEST_TIMEOUT_S")),
        display_tz=display_tz,
        log_level=(env.get("WEATHER_LOG_LEVEL") or DEFAULT_LOG_LEVEL)
        .strip()
        .upper(),
    )


def logging_config(level: str) -> dict[str, object]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {
                "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
            },
        },
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "formatter": "plain",
            },
        },
        "loggers": {
            "weather": {
                "handlers": ["stderr"],
                "level": level,
                "propagate": False,
            },
        },
    }
