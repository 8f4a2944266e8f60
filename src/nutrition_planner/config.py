"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from nutrition_planner.domain.requirements import SexCategory

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    log_level: str = "INFO"
    unspecified_sex_fallback: str = "female"
    guidance_path: str | None = None
    guidance_ttl_seconds: int = 300
    default_gender: str = "female"
    default_age_years: int = 30
    default_weight_kg: float = 70
    default_height_cm: float = 170
    default_activity_level: str = "moderately_active"
    default_goal: str = "maintenance"

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_sex_fallback(raw: str) -> SexCategory:
    """Parse the profile used for users whose sex is unspecified."""
    value = SexCategory.parse(raw)
    if value is SexCategory.UNSPECIFIED:
        raise ValueError(
            f"UNSPECIFIED_SEX_FALLBACK must be 'male' or 'female', got {raw!r}"
        )
    return value
