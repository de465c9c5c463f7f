from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Final

from ..timeutils import now_utc
from .base import WeatherProvider
from .types import ProviderName, WeatherRecord


@dataclass(frozen=True)
class MockCity:
    location: str
    temperature_c: int
    description: str
    humidity_pct: int
    wind_speed_mps: float


KNOWN_CITIES: Final[dict[str, MockCity]] = {
    "tokyo": MockCity("Tokyo, JP", 22, "clear", 65, 3.2),
    "osaka": MockCity("Osaka, JP", 24, "cloudy", 70, 2.8),
    "kyoto": MockCity("Kyoto, JP", 20, "light rain", 80, 1.5),
}

CONDITIONS: Final[tuple[str, ...]] = ("clear", "cloudy", "rain", "snow")

TEMPERATURE_RANGE: Final[tuple[int, int]] = (5, 35)
HUMIDITY_RANGE: Final[tuple[int, int]] = (40, 80)
WIND_RANGE: Final[tuple[float, float]] = (0.0, 10.0)


class MockProvider(WeatherProvider):
    """Offline provider used when no API key is configured.

    Known cities return fixed values; any other name gets uniformly random
    values within the module ranges. Never raises.
    """

    name: ProviderName = "mock"

    def __init__(self, *, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    async def current(self, city: str) -> WeatherRecord:
        return self.generate(city)

    def generate(self, city: str) -> WeatherRecord:
        known = KNOWN_CITIES.get(city.casefold())
        if known is not None:
            return WeatherRecord(
                location=known.location,
                temperature_c=known.temperature_c,
                description=known.description,
                humidity_pct=known.humidity_pct,
                wind_speed_mps=known.wind_speed_mps,
                captured_at=now_utc(),
                source=self.name,
            )
        return WeatherRecord(
            location=f"{city}, Unknown",
            temperature_c=self._rng.randint(*TEMPERATURE_RANGE),
            description=self._rng.choice(CONDITIONS),
            humidity_pct=self._rng.randint(*HUMIDITY_RANGE),
            wind_speed_mps=round(self._rng.uniform(*WIND_RANGE), 1),
            captured_at=now_utc(),
            source=self.name,
        )
