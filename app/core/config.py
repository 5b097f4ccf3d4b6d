"""Configuration management for the SkipScore engine."""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file (only if accessible)
try:
    load_dotenv()
except (PermissionError, OSError):
    # In sandboxed environments, .env might not be accessible
    pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Environment
    SKIPSCORE_ENV: str = Field(default="dev", description="Environment: dev, staging, prod, test")

    # Savings estimation
    DEFAULT_HOURLY_RATE: float = Field(
        default=75.0, ge=0, description="Cost of one attendee-hour, used for cost savings"
    )

    # Action plan
    ACTION_PLAN_OPTIONAL_ATTENDEE_THRESHOLD: int = Field(
        default=3,
        ge=0,
        description="SHORTEN plans suggest optional attendees above this attendee count",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance

    Raises:
        ValidationError: If an environment variable has an invalid value
    """
    return Settings()
