from __future__ import annotations

import json
import math
from collections.abc import Mapping
from typing import Any, Final
from urllib.parse import quote, urlencode

from ..timeutils import now_utc
from .base import WeatherProvider
from .errors import ParseError
from .http import HttpClient
from .types import ProviderName, WeatherRecord

CURRENT_WEATHER_PATH: Final[str] = "/data/2.5/weather"


class OpenWeatherProvider(WeatherProvider):
    """OpenWeatherMap implementation.

    Uses the `/data/2.5/weather` current-conditions endpoint with metric
    units. Any missing or mistyped field in the payload is a `ParseError`.
    """

    name: ProviderName = "openweather"

    def __init__(
        self,
        *,
        api_key: str,
        http: HttpClient,
        lang: str = "en",
        units: str = "metric",
    ) -> None:
        self.api_key = api_key
        self.http = http
        self.lang = lang
        self.units = units

    def build_path(self, city: str) -> str:
        query = urlencode(
            {
                "q": city,
                "appid": self.api_key,
                "units": self.units,
                "lang": self.lang,
            },
            quote_via=quote,
        )
        return f"{CURRENT_WEATHER_PATH}?{query}"

    async def current(self, city: str) -> WeatherRecord:
        body = await self.http.get_text(self.build_path(city))
        return self.parse(body)

    def parse(self, body: str) -> WeatherRecord:
        try:
            payload = json.loads(body)
        except json.JSONDecodeError as exc:
            raise ParseError(f"Invalid JSON: {exc.msg}") from exc
        except (ValueError, RecursionError) as exc:
            raise ParseError(f"Invalid JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise ParseError("Unexpected OpenWeatherMap response shape")

        main = self._section(payload, "main")
        sys_block = self._section(payload, "sys")
        wind = self._section(payload, "wind")
        conditions = payload.get("weather")
        if not isinstance(conditions, list) or not conditions:
            raise ParseError("Missing field: weather")
        first = conditions[0]
        if not isinstance(first, Mapping):
            raise ParseError("Missing field: weather[0].description")

        name = self._text(payload, "name", "name")
        country = self._text(sys_block, "country", "sys.country")
        description = self._text(
            first, "description", "weather[0].description"
        )
        temperature = self._number(main, "temp", "main.temp")
        humidity = self._number(main, "humidity", "main.humidity")
        wind_speed = self._number(wind, "speed", "wind.speed")

        return WeatherRecord(
            location=f"{name}, {country}",
            temperature_c=_round_half_up(temperature),
            description=description,
            humidity_pct=_round_half_up(humidity),
            wind_speed_mps=wind_speed,
            captured_at=now_utc(),
            source=self.name,
        )

    def _section(
        self, payload: Mapping[str, Any], key: str
    ) -> Mapping[str, Any]:
        value = payload.get(key)
        if not isinstance(value, Mapping):
            raise ParseError(f"Missing field: {key}")
        return value

    def _text(self, block: Mapping[str, Any], key: str, label: str) -> str:
        value = block.get(key)
        if not isinstance(value, str):
            raise ParseError(f"Missing field: {label}")
        return value

    def _number(
        self, block: Mapping[str, Any], key: str, label: str
    ) -> float:
        value = block.get(key)
        # bool is an int subclass but never a valid measurement
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise ParseError(f"Missing field: {label}")
        try:
            number = float(value)
        except OverflowError as exc:
            raise ParseError(f"Invalid value for {label}") from exc
        if not math.isfinite(number):
            raise ParseError(f"Invalid value for {label}")
        return number


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
