"""Human-readable rendering of weather records."""

from __future__ import annotations

from datetime import tzinfo

from .engines.types import FetchFailure, FetchResult, WeatherRecord
from .timeutils import format_local

HOT_ICON = "🌡️"
MILD_ICON = "🌤️"
COLD_ICON = "❄️"


def signed_temperature(temperature_c: int) -> str:
    if temperature_c > 0:
        return f"+{temperature_c}"
    return str(temperature_c)


def temperature_icon(temperature_c: int) -> str:
    if temperature_c > 25:
        return HOT_ICON
    if temperature_c > 15:
        return MILD_ICON
    return COLD_ICON


def format_display(record: WeatherRecord, tz: tzinfo | None = None) -> str:
    """Return the multi-line display block for one record.

    `tz` selects the zone for the fetch time; the system zone is used when
    it is None.
    """

    lines = [
        "",
        f"📍 {record.location}",
        f"{temperature_icon(record.temperature_c)} Temperature: "
        f"{signed_temperature(record.temperature_c)}°C",
        f"☁️ Conditions: {record.description}",
        f"💧 Humidity: {record.humidity_pct}%",
        f"💨 Wind: {record.wind_speed_mps} m/s",
        f"🕒 Fetched at: {format_local(record.captured_at, tz)}",
        "",
    ]
    return "\n".join(lines)


def clothing_advice(temperature_c: int) -> str:
    if temperature_c >= 25:
        return "👕 Dress light: T-shirt and shorts are fine."
    elif temperature_c >= 20:
        return "👔 A long-sleeved shirt should be just right."
    elif temperature_c >= 15:
        return "🧥 Bring a light jacket."
    elif temperature_c >= 10:
        return "🧥 You will need a warm coat."
    else:
        return "🧥❄️ Wear a heavy coat and bundle up against the cold!"


def format_summary(label: str, result: FetchResult) -> str:
    """Demo-style block: upper-cased label with temperature, sky, humidity."""

    if isinstance(result, FetchFailure):
        return f"❌ {label}: {result.message}"
    record = result.record
    return "\n".join(
        [
            "",
            f"📍 {label.upper()}:",
            f"   Temperature: {record.temperature_c}°C",
            f"   Conditions: {record.description}",
            f"   Humidity: {record.humidity_pct}%",
        ]
    )


def format_brief(label: str, result: FetchResult) -> str:
    """Two-line entry used when listing several cities."""

    if isinstance(result, FetchFailure):
        return f"\n📍 {label}:\n   ❌ {result.message}"
    record = result.record
    return (
        f"\n📍 {label}:\n"
        f"   Temperature: {record.temperature_c}°C ({record.description})"
    )
