from __future__ import annotations

import random

import httpx

from ..settings import LiveMode, MockMode, RunMode, Settings
from .base import WeatherProvider
from .http import HttpClient
from .mock import MockProvider
from .openweather import OpenWeatherProvider


def build_provider(
    settings: Settings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    rng: random.Random | None = None,
) -> WeatherProvider:
    """Instantiate the provider for the configured run mode."""

    mode: RunMode = settings.mode
    if isinstance(mode, MockMode):
        return MockProvider(rng=rng)
    if isinstance(mode, LiveMode):
        http = HttpClient(
            host=settings.api_host,
            timeout=settings.timeout_s,
            transport=transport,
        )
        return OpenWeatherProvider(
            api_key=mode.api_key, http=http, lang=settings.lang
        )
    raise ValueError(f"Unsupported run mode: {mode!r}")
