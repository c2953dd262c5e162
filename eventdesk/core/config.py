"""
Application configuration using pydantic-settings.
All config is loaded from environment variables with sensible defaults.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Event Desk"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "WARNING"

    # Presentation
    DATE_FORMAT: str = "%d.%m.%Y %H:%M"

    # Seed data
    SEED_DATA: bool = True
    SEED_EVENT_OFFSETS_DAYS: list[int] = [7, 14, 3]

    @field_validator("SEED_EVENT_OFFSETS_DAYS")
    @classmethod
    def one_offset_per_seed_event(cls, value: list[int]) -> list[int]:
        # One entry per seeded event, in seed order
        if len(value) != 3:
            raise ValueError("SEED_EVENT_OFFSETS_DAYS needs exactly 3 day offsets")
        return value

    model_config = {
        "env_file": ".env",
        "case_sensitive": True,
    }


@lru_cache()
def get_settings() -> Settings:
    return Settings()
