# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application settings."""

from datetime import time

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings read from the environment or a local .env file."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str = "sqlite:///./shiftplan.db"
    log_level: str = "INFO"
    session_cookie_name: str = "session"

    # Background carryover update
    carryover_job_enabled: bool = True
    carryover_job_interval_seconds: int = 3600

    # Regular working day used to scale expected hours on short days
    short_day_start: time = time(8, 0)
    short_day_end: time = time(18, 0)

    # Source for imported public holidays
    public_holiday_country: str = "DE"
    public_holiday_subdivision: str | None = None


settings = Settings()
