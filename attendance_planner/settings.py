from functools import lru_cache
from typing import Optional, Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_TIME_SLOTS


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ATTENDANCE_", env_file=".env", extra="ignore")

    page_title: str = "Attendance Eligibility Planner"
    log_level: str = "INFO"
    log_file: Optional[str] = None
    holiday_calendar: str = "gitam-2025-26"
    time_slots: Tuple[str, ...] = Field(default=DEFAULT_TIME_SLOTS)

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log level {value!r}")
        return value

    @field_validator("time_slots")
    @classmethod
    def require_time_slots(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if not value:
            raise ValueError("At least one time slot is required")
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()
