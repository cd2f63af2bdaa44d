"""Configuration settings for the AI workout parser."""
import os
from typing import Literal


EnvironmentType = Literal["development", "staging", "production"]


class Settings:
    """Application settings."""

    # Feature flags
    USAGE_METERING_ENABLED: bool = True

    # Environment
    ENVIRONMENT: EnvironmentType = "development"
    LOG_LEVEL: str = "INFO"

    # Storage
    SUPABASE_URL: str | None = None
    SUPABASE_KEY: str | None = None
    WORKOUTS_TABLE: str = "workouts"
    USAGE_TABLE: str = "feature_usage"

    def __init__(self):
        # Environment
        env = os.getenv("ENVIRONMENT", "development").lower()
        if env in ("development", "staging", "production"):
            self.ENVIRONMENT = env  # type: ignore
        else:
            self.ENVIRONMENT = "development"
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

        # Feature flags
        self.USAGE_METERING_ENABLED = os.getenv("USAGE_METERING_ENABLED", "true").lower() == "true"

        # Storage
        self.SUPABASE_URL = os.getenv("SUPABASE_URL")
        self.SUPABASE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY") or os.getenv("SUPABASE_ANON_KEY")
        self.WORKOUTS_TABLE = os.getenv("WORKOUTS_TABLE", "workouts")
        self.USAGE_TABLE = os.getenv("USAGE_TABLE", "feature_usage")


settings = Settings()
