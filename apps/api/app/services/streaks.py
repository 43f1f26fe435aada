from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import date as Date
from datetime import datetime, timedelta, tzinfo
from typing import Iterable, Protocol

from app.services.timezones import elapsed_days, local_day, local_midnight, to_utc

MAX_DAILIES = 8
GRACE_PERIOD = timedelta(hours=36)
MAX_DAY_GAP = 1.5
NEUTRAL_TIER = 1


class HasTimestamp(Protocol):
    timestamp: datetime


@dataclass(frozen=True)
class DailyBucket:
    day: Date
    dailies: int

    @property
    def capped(self) -> int:
        return min(self.dailies, MAX_DAILIES)


@dataclass(frozen=True)
class StreakSummary:
    dailies_count: int = 0
    day_count: int = 0
    week_count: int = 0
    month_count: int = 0
    year_count: int = 0
    current_tier: int = NEUTRAL_TIER
    last_log_date: datetime | None = None
    streak_start_date: Date | None = None

    @property
    def is_active(self) -> bool:
        return self.day_count > 0


@dataclass(frozen=True)
class _Walk:
    day_count: int
    tier: int
    start: Date


def group_by_local_day(timestamps: Iterable[datetime], tz: tzinfo) -> list[DailyBucket]:
    """Bucket timestamps by the viewer's calendar day, most recent day first."""
    counts = Counter(local_day(ts, tz) for ts in timestamps)
    return [
        DailyBucket(day=day, dailies=counts[day])
        for day in sorted(counts, reverse=True)
    ]


def walk_streak(buckets: list[DailyBucket], tz: tzinfo) -> _Walk:
    head = buckets[0]
    walk = _Walk(day_count=1, tier=head.capped, start=head.day)
    prev_midnight = local_midnight(head.day, tz)
    for bucket in buckets[1:]:
        midnight = local_midnight(bucket.day, tz)
        # Gap is measured against the previous walked day, not the streak head.
        if elapsed_days(prev_midnight, midnight) > MAX_DAY_GAP:
            break
        walk = _Walk(
            day_count=walk.day_count + 1,
            tier=min(walk.tier, bucket.capped),
            start=bucket.day,
        )
        prev_midnight = midnight
    return walk


def compute_streak_summary(
    entries: Iterable[HasTimestamp], *, now: datetime, tz: tzinfo
) -> StreakSummary:
    timestamps = [to_utc(entry.timestamp) for entry in entries]
    if not timestamps:
        return StreakSummary()

    buckets = group_by_local_day(timestamps, tz)
    last_log = max(timestamps)
    if not buckets:
        return StreakSummary()

    now_utc = to_utc(now)
    today = local_day(now_utc, tz)
    most_recent = buckets[0]
    if most_recent.day != today and now_utc - last_log > GRACE_PERIOD:
        return StreakSummary(last_log_date=last_log)

    today_bucket = next((b for b in buckets if b.day == today), most_recent)
    walk = walk_streak(buckets, tz)

    week_count = walk.day_count // 7
    month_count = week_count // 4
    return StreakSummary(
        dailies_count=today_bucket.capped,
        day_count=walk.day_count,
        week_count=week_count,
        month_count=month_count,
        year_count=month_count // 12,
        current_tier=max(walk.tier, NEUTRAL_TIER),
        last_log_date=last_log,
        streak_start_date=walk.start,
    )
