from __future__ import annotations

# ruff: noqa: S101
from datetime import UTC, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from weather.timeutils import ensure_aware, format_local, get_zone, now_utc


def test_get_zone_rejects_unknown_zone() -> None:
    with pytest.raises(ValueError, match="Invalid timezone: Nowhere/City"):
        get_zone("Nowhere/City")


def test_ensure_aware_attaches_and_converts() -> None:
    naive = datetime(2025, 1, 1, 12, 0)
    attached = ensure_aware(naive, UTC)
    assert attached.tzinfo is UTC

    tokyo = ZoneInfo("Asia/Tokyo")
    converted = ensure_aware(attached, tokyo)
    assert converted.hour == 21
    assert converted == attached


def test_now_utc_is_aware() -> None:
    current = now_utc()
    assert current.utcoffset() == timedelta(0)


def test_format_local_uses_given_zone() -> None:
    moment = datetime(2025, 6, 1, 3, 4, 5, tzinfo=UTC)
    assert format_local(moment, ZoneInfo("UTC")) == "2025-06-01 03:04:05 UTC"
    assert (
        format_local(moment, ZoneInfo("Asia/Tokyo"))
        == "2025-06-01 12:04:05 JST"
    )


def test_format_local_treats_naive_as_utc() -> None:
    offset = timezone(timedelta(hours=2))
    rendered = format_local(datetime(2025, 6, 1, 3, 0), offset)
    assert rendered.startswith("2025-06-01 05:00:00")


def test_format_local_defaults_to_system_zone() -> None:
    rendered = format_local(datetime(2025, 6, 1, 3, 0, tzinfo=UTC))
    assert rendered.startswith("2025-0")
