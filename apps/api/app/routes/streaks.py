from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException

from app.core.config import settings
from app.core.rate_limit import StreakThrottleDep
from app.schemas.streaks import StreakRequest, StreakSummaryResponse
from app.services.streaks import compute_streak_summary
from app.services.timezones import resolve_user_timezone

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/streak", response_model=StreakSummaryResponse)
async def compute_streak(
    body: StreakRequest, _throttle: StreakThrottleDep
) -> StreakSummaryResponse:
    if len(body.entries) > settings.max_entries_per_request:
        raise HTTPException(
            status_code=422,
            detail={
                "message": "Too many log entries in one request.",
                "hint": f"Send at most {settings.max_entries_per_request} entries.",
                "code": "TOO_MANY_ENTRIES",
            },
        )

    tz = resolve_user_timezone(
        body.locale, body.timezone, default=settings.default_timezone
    )
    if body.timezone and body.timezone != tz.key:
        logger.info(
            "unknown timezone %r, bucketing in %s", body.timezone[:64], tz.key
        )

    # The route is the only place that reads the clock.
    now = body.now or datetime.now(timezone.utc)
    summary = compute_streak_summary(body.entries, now=now, tz=tz)
    return StreakSummaryResponse.from_summary(summary, timezone=tz.key)
