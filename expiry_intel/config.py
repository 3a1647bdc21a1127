"""Configuration management using Pydantic Settings"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

from expiry_intel.domain.models import NumericDateOrder


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database (threshold settings store)
    database_url: str = "sqlite:///./expiry_intel.db"

    # Service
    service_name: str = "expiry-intel"
    log_level: str = "INFO"

    # Extraction
    numeric_date_order: NumericDateOrder = NumericDateOrder.MONTH_FIRST

    # Classification
    default_profile_id: str = "default"
    reminder_days: List[int] = [7, 3, 1]


settings = Settings()
