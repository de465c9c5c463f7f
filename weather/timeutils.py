from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo


def get_zone(tz_str: str) -> ZoneInfo:
    """Return a ZoneInfo instance or raise for invalid input."""

    try:
        return ZoneInfo(tz_str)
    except Exception as exc:
        raise ValueError(f"Invalid timezone: {tz_str}") from exc


def ensure_aware(dt: datetime, tz: tzinfo) -> datetime:
    """Attach or convert timezone information to a datetime."""

    if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
        return dt.replace(tzinfo=tz)
    return dt.astimezone(tz)


def now_utc() -> datetime:
    return datetime.now(timezone.utc)  # noqa: UP017


def format_local(dt: datetime, tz: tzinfo | None = None) -> str:
    """Render a moment for display in `tz`, or the system zone when unset."""

    if tz is None:
        local = ensure_aware(dt, timezone.utc).astimezone()  # noqa: UP017
    else:
        local = ensure_aware(dt, timezone.utc).astimezone(tz)  # noqa: UP017
    return local.strftime("%Y-%m-%d %H:%M:%S %Z").rstrip()
