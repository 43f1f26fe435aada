from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from app.core.config import settings


@dataclass
class WindowCounter:
    start: float
    count: int


_lock = asyncio.Lock()
_counters: dict[str, WindowCounter] = {}
_MAX_KEYS = 20_000
_WINDOW_SECONDS = 60


async def consume(*, key: str, limit: int, window_seconds: int) -> None:
    """
    In-memory fixed-window rate limiter.

    Per-process only; counters are not shared between workers.
    """
    if limit <= 0:
        return

    now = time.monotonic()
    async with _lock:
        if len(_counters) > _MAX_KEYS:
            _counters.clear()

        c = _counters.get(key)
        if c is None or (now - c.start) >= window_seconds:
            _counters[key] = WindowCounter(start=now, count=1)
            return

        if c.count >= limit:
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail={
                    "message": "Too many requests.",
                    "hint": "Please slow down and try again.",
                    "code": "RATE_LIMITED",
                },
            )

        c.count += 1


def client_key(request: Request) -> str:
    return f"ip:{request.client.host if request.client else 'unknown'}"


async def throttle_streak_requests(request: Request) -> None:
    await consume(
        key=f"streak:{client_key(request)}",
        limit=settings.streak_per_minute_limit,
        window_seconds=_WINDOW_SECONDS,
    )


StreakThrottleDep = Annotated[None, Depends(throttle_streak_requests)]
