from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_NOTE_LENGTH = 100

AttentionState = Literal["scattered", "focused", "hyperfocused"]

# Widest UTC offset in use is +14h; keep room for a local midnight on either side.
_BUCKETING_MARGIN = timedelta(days=2)


def to_bucketable_instant(value: datetime) -> datetime:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    try:
        utc_value = value.astimezone(timezone.utc)
        in_range = utc_value - _BUCKETING_MARGIN < utc_value + _BUCKETING_MARGIN
    except OverflowError:
        in_range = False
    if not in_range:
        raise ValueError("timestamp is outside the supported date range")
    return value


class LogEntry(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str | None = Field(default=None, max_length=128)
    timestamp: datetime
    energy: int | None = Field(default=None, ge=1, le=5)
    attention: AttentionState | None = None
    note: str | None = Field(default=None, max_length=MAX_NOTE_LENGTH)
    image_url: str | None = Field(default=None, max_length=2048)

    @field_validator("timestamp")
    @classmethod
    def validate_timestamp(cls, value: datetime) -> datetime:
        return to_bucketable_instant(value)
