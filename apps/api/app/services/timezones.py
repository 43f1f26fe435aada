from __future__ import annotations

from datetime import date as Date
from datetime import datetime, time, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

_DEFAULT_TZ_BY_LOCALE: dict[str, str] = {
    "en": "America/New_York",
    "en-us": "America/New_York",
    "en-gb": "Europe/London",
    "ko": "Asia/Seoul",
    "ja": "Asia/Tokyo",
    "zh": "Asia/Shanghai",
    "es": "Europe/Madrid",
}


def to_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def local_day(dt: datetime, tz: tzinfo) -> Date:
    return to_utc(dt).astimezone(tz).date()


def local_midnight(day: Date, tz: tzinfo) -> datetime:
    return datetime.combine(day, time.min, tzinfo=tz)


def elapsed_days(later: datetime, earlier: datetime) -> float:
    # Aware datetimes sharing a tzinfo subtract as wall-clock time; go through
    # UTC so DST days come out as 23h/25h.
    return (to_utc(later) - to_utc(earlier)).total_seconds() / 86400.0


def resolve_user_timezone(
    locale: str | None, timezone_name: str | None, *, default: str = "UTC"
) -> ZoneInfo:
    if timezone_name:
        try:
            return ZoneInfo(timezone_name)
        except (ZoneInfoNotFoundError, ValueError):
            pass
    key = (locale or "").strip().lower()
    fallback = _DEFAULT_TZ_BY_LOCALE.get(key) or _DEFAULT_TZ_BY_LOCALE.get(
        key.split("-", 1)[0]
    )
    try:
        return ZoneInfo(fallback or default)
    except (ZoneInfoNotFoundError, ValueError):
        return ZoneInfo("UTC")
