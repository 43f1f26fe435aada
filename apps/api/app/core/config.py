from __future__ import annotations

from pathlib import Path
from urllib.parse import urlparse
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import AnyUrl, Field
from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).resolve().parents[2] / ".env"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=(str(ENV_FILE), ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_env: str = Field(default="development", alias="APP_ENV")
    frontend_url: AnyUrl = Field(default="http://localhost:3000", alias="FRONTEND_URL")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Observability
    sentry_dsn: str | None = Field(default=None, alias="SENTRY_DSN")
    sentry_traces_sample_rate: float = Field(
        default=0.0, alias="SENTRY_TRACES_SAMPLE_RATE"
    )

    # Streaks
    # Calendar-day bucketing zone when the request names none (or an unknown one).
    default_timezone: str = Field(default="UTC", alias="DEFAULT_TIMEZONE")
    max_entries_per_request: int = Field(
        default=5000, alias="MAX_ENTRIES_PER_REQUEST"
    )
    streak_per_minute_limit: int = Field(default=120, alias="STREAK_PER_MINUTE_LIMIT")

    @model_validator(mode="after")
    def validate_runtime_constraints(self) -> "Settings":
        env = (self.app_env or "").strip().lower()
        is_prod = env in {"production", "prod"}

        frontend_origin = urlparse(str(self.frontend_url))
        frontend_host = (frontend_origin.hostname or "").lower()
        if is_prod and frontend_host in {"localhost", "127.0.0.1"}:
            raise ValueError(
                "Invalid FRONTEND_URL for production: localhost is not allowed. "
                "Set FRONTEND_URL to your public web domain."
            )

        if self.log_level.strip().upper() not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}")
        try:
            ZoneInfo(self.default_timezone)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(
                f"DEFAULT_TIMEZONE is not a known IANA zone: {self.default_timezone!r}"
            )
        if not (1 <= self.max_entries_per_request <= 50_000):
            raise ValueError("MAX_ENTRIES_PER_REQUEST must be 1..50000")
        if not (0 <= self.streak_per_minute_limit <= 10_000):
            raise ValueError("STREAK_PER_MINUTE_LIMIT must be 0..10000")
        if not (0.0 <= self.sentry_traces_sample_rate <= 1.0):
            raise ValueError("SENTRY_TRACES_SAMPLE_RATE must be 0..1")

        return self

    def is_sentry_configured(self) -> bool:
        return bool(self.sentry_dsn and self.sentry_dsn.strip())


settings = Settings()  # type: ignore[call-arg]  # singleton import via env settings
