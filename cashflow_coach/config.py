"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # External Services
    bank_api_base: str = "http://localhost:8001"

    # Service
    service_name: str = "cashflow-coach"
    log_level: str = "INFO"

    # HTTP Client
    http_timeout_seconds: float = 5.0

    # Affordability
    default_min_buffer: float = 100.0  # cushion used when a request omits min_buffer


settings = Settings()
