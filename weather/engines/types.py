from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal, TypeAlias

ProviderName = Literal["mock", "openweather"]
ErrorKind = Literal["transport", "timeout", "http_status", "parse"]


@dataclass(frozen=True)
class WeatherRecord:
    location: str
    temperature_c: int
    description: str
    humidity_pct: int
    wind_speed_mps: float
    captured_at: datetime
    source: ProviderName


@dataclass(frozen=True)
class FetchSuccess:
    record: WeatherRecord

    @property
    def ok(self) -> Literal[True]:
        return True


@dataclass(frozen=True)
class FetchFailure:
    """A fetch that did not produce a record.

    `kind` tells callers which stage failed; `status_code` is only set for
    `http_status` failures.
    """

    kind: ErrorKind
    message: str
    status_code: int | None = None

    @property
    def ok(self) -> Literal[False]:
        return False


FetchResult: TypeAlias = FetchSuccess | FetchFailure
