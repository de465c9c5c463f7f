from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Sequence
from typing import Final

from .engines.base import WeatherProvider
from .engines.errors import FetchError, HttpStatusError
from .engines.types import FetchFailure, FetchResult, FetchSuccess
from .metrics import (
    weather_provider_errors_total,
    weather_provider_latency_seconds,
    weather_provider_requests_total,
)

logger = logging.getLogger(__name__)

FAILURE_PREFIX: Final[str] = "Failed to fetch weather"
UNKNOWN_ERROR: Final[str] = "Unknown error"


def _failure_from(exc: FetchError) -> FetchFailure:
    cause = str(exc).strip() or UNKNOWN_ERROR
    status_code = exc.status_code if isinstance(exc, HttpStatusError) else None
    return FetchFailure(
        kind=exc.kind,
        message=f"{FAILURE_PREFIX}: {cause}",
        status_code=status_code,
    )


async def fetch_by_city(city: str, provider: WeatherProvider) -> FetchResult:
    """Fetch one city and fold any `FetchError` into a `FetchFailure`."""

    provider_name = provider.name
    weather_provider_requests_total.labels(provider=provider_name).inc()
    start_time = time.perf_counter()
    try:
        record = await provider.current(city)
    except FetchError as exc:
        weather_provider_errors_total.labels(
            provider=provider_name,
            error_type=exc.kind,
        ).inc()
        logger.warning(
            "weather.fetch.failed city=%s kind=%s err=%s",
            city,
            exc.kind,
            exc,
        )
        return _failure_from(exc)
    finally:
        duration = time.perf_counter() - start_time
        weather_provider_latency_seconds.labels(
            provider=provider_name
        ).observe(duration)

    logger.debug(
        "weather.fetch.ok city=%s provider=%s", city, provider_name
    )
    return FetchSuccess(record=record)


async def fetch_many(
    cities: Sequence[str], provider: WeatherProvider
) -> list[FetchResult]:
    """Fetch every city concurrently; results keep the input order."""

    results = await asyncio.gather(
        *(fetch_by_city(city, provider) for city in cities)
    )
    return list(results)
