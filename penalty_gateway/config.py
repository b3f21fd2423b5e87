"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "penalty-gateway"
    log_level: str = "INFO"

    # Penalty defaults
    default_daily_penalty_rate: float = 5.0  # Currency units per day late, per due

    # Display
    due_label_format: str = "%a %b %d %Y"


settings = Settings()
