"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./time_deposits.db"
    auto_create_schema: bool = True
    seed_demo_data: bool = False

    # Service
    service_name: str = "time-deposits"
    log_level: str = "INFO"


settings = Settings()
