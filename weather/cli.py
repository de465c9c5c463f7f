"""Command-line entry point.

Usage:
    weather-fetcher                      run the demonstration
    weather-fetcher get <city>           show one city (alias: weather)
    weather-fetcher multiple <city> ...  show several cities at once
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import logging.config
import sys
from collections.abc import Sequence
from datetime import tzinfo
from typing import Final, TextIO

from .engines.base import WeatherProvider
from .engines.mock import MockProvider
from .engines.registry import build_provider
from .engines.types import FetchFailure
from .presentation import (
    clothing_advice,
    format_brief,
    format_display,
    format_summary,
)
from .services import fetch_by_city, fetch_many
from .settings import load_settings, logging_config
from .timeutils import get_zone

logger = logging.getLogger(__name__)

PROG: Final[str] = "weather-fetcher"
DEMO_CITY: Final[str] = "tokyo"
DEMO_CITIES: Final[tuple[str, ...]] = ("tokyo", "osaka", "kyoto")
SINGLE_COMMANDS: Final[frozenset[str]] = frozenset({"get", "weather"})
MULTIPLE_COMMAND: Final[str] = "multiple"

USAGE_TEXT: Final[str] = "\n".join(
    [
        "Available commands:",
        "  get <city>                 - show the weather for one city",
        "  multiple <city1> <city2> ... - show the weather for several cities",
        "",
        "Environment variables:",
        "  WEATHER_API_KEY - OpenWeatherMap API key (mock data when unset)",
    ]
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        add_help=False,
        description="Fetch current weather for one or more cities.",
    )
    parser.add_argument("command", nargs="?", help="get, weather or multiple")
    parser.add_argument("cities", nargs="*", help="city names")
    return parser


class WeatherCommand:
    """Dispatches parsed arguments and writes results to `out`."""

    def __init__(
        self,
        *,
        provider: WeatherProvider,
        out: TextIO | None = None,
        display_tz: tzinfo | None = None,
    ) -> None:
        self.provider = provider
        self.out = out or sys.stdout
        self.display_tz = display_tz

    def write(self, text: str = "") -> None:
        print(text, file=self.out)

    async def run(self, command: str | None, cities: Sequence[str]) -> None:
        if command is None:
            await self.demo()
            return
        name = command.lower()
        if name in SINGLE_COMMANDS:
            if not cities:
                self.write(f"Usage: {PROG} get <city>")
                return
            await self.single(cities[0])
        elif name == MULTIPLE_COMMAND:
            if not cities:
                self.write(f"Usage: {PROG} multiple <city1> <city2> ...")
                return
            await self.multiple(cities)
        else:
            self.write(USAGE_TEXT)

    async def single(
        self, city: str, provider: WeatherProvider | None = None
    ) -> None:
        result = await fetch_by_city(city, provider or self.provider)
        if isinstance(result, FetchFailure):
            self.write(f"❌ Error: {result.message}")
            return
        self.write(format_display(result.record, self.display_tz))
        self.write(clothing_advice(result.record.temperature_c))

    async def multiple(self, cities: Sequence[str]) -> None:
        results = await fetch_many(cities, self.provider)
        for city, result in zip(cities, results, strict=True):
            self.write(format_brief(city, result))

    async def demo(self) -> None:
        provider = MockProvider()
        self.write("=== Weather Fetcher demo ===\n")
        self.write("⚠️ Demo mode (using mock data)\n")

        self.write("🌍 Weather for a single city:")
        await self.single(DEMO_CITY, provider)

        self.write("\n🌏 Weather for several cities:")
        results = await fetch_many(DEMO_CITIES, provider)
        for city, result in zip(DEMO_CITIES, results, strict=True):
            self.write(format_summary(city, result))

        self.write("\n💡 To use the live API:")
        self.write("1. Get an API key from OpenWeatherMap")
        self.write("2. Export it as the WEATHER_API_KEY environment variable")
        self.write(f"3. Run `{PROG} get <city>`")


def main(argv: Sequence[str] | None = None) -> int:
    args, unknown = build_parser().parse_known_args(argv)
    # stray options fall through to the usage text like any unknown command
    command_name = unknown[0] if unknown else args.command
    try:
        settings = load_settings()
        logging.config.dictConfig(logging_config(settings.log_level))
        display_tz = (
            get_zone(settings.display_tz) if settings.display_tz else None
        )
        command = WeatherCommand(
            provider=build_provider(settings),
            display_tz=display_tz,
        )
        asyncio.run(command.run(command_name, args.cities))
    except Exception as exc:
        logger.exception("weather.cli.failed err=%s", exc)
        print(f"An error occurred: {exc}", file=sys.stderr)
        return 1
    return 0
