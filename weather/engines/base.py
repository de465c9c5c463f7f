from __future__ import annotations

from abc import ABC, abstractmethod

from .types import ProviderName, WeatherRecord


class WeatherProvider(ABC):
    """Abstract base for weather providers."""

    name: ProviderName

    @abstractmethod
    async def current(self, city: str) -> WeatherRecord:
        """Return current conditions for a city or raise `FetchError`."""
