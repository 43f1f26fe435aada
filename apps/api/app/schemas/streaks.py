from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.logs import LogEntry, to_bucketable_instant
from app.services.streaks import StreakSummary


class StreakRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    entries: list[LogEntry] = Field(default_factory=list)
    now: datetime | None = None
    timezone: str | None = Field(default=None, max_length=64)
    locale: str | None = Field(default=None, max_length=16)

    @field_validator("now")
    @classmethod
    def validate_now(cls, value: datetime | None) -> datetime | None:
        if value is None:
            return None
        return to_bucketable_instant(value)


class StreakSummaryResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    dailies_count: int = Field(ge=0, le=8)
    day_count: int = Field(ge=0)
    week_count: int = Field(ge=0)
    month_count: int = Field(ge=0)
    year_count: int = Field(ge=0)
    current_tier: int = Field(ge=1, le=8)
    last_log_date: datetime | None = None
    streak_start_date: date | None = None
    streak_active: bool
    show_week_badge: bool
    show_month_badge: bool
    timezone: str

    @classmethod
    def from_summary(cls, summary: StreakSummary, *, timezone: str) -> "StreakSummaryResponse":
        return cls(
            dailies_count=summary.dailies_count,
            day_count=summary.day_count,
            week_count=summary.week_count,
            month_count=summary.month_count,
            year_count=summary.year_count,
            current_tier=summary.current_tier,
            last_log_date=summary.last_log_date,
            streak_start_date=summary.streak_start_date,
            streak_active=summary.is_active,
            show_week_badge=summary.week_count > 0,
            show_month_badge=summary.month_count > 0,
            timezone=timezone,
        )
