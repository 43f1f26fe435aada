from __future__ import annotations

import logging
import traceback
from typing import Any

from app.services.privacy import redact_secrets_text, sanitize_for_log

logger = logging.getLogger(__name__)


async def log_system_error(
    *,
    route: str,
    message: str,
    err: BaseException | None = None,
    meta: dict[str, Any] | None = None,
) -> None:
    # Best-effort logging; never raise.
    try:
        stack = None
        if err is not None:
            raw_stack = "".join(
                traceback.format_exception(type(err), err, err.__traceback__)
            )[:8000]
            stack = redact_secrets_text(raw_stack)

        logger.error(
            "%s route=%s meta=%s%s",
            sanitize_for_log(message),
            sanitize_for_log(route),
            sanitize_for_log(meta or {}),
            f"\n{stack}" if stack else "",
        )
    except Exception:
        return
