"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Local key-value storage (auth token)
    storage_url: str = "sqlite:///./ikigai.db"

    # Payments backend
    payments_api_base: str = "https://ikigai-backend-74qi.onrender.com"
    payments_api_stubbed: bool = True
    stub_submission_delay_seconds: float = 1.5
    virtual_account_number: str = ""

    # Service
    service_name: str = "ikigai-payments"
    log_level: str = "INFO"
    seed_sample_history: bool = True

    # HTTP Client
    http_timeout_seconds: float = 5.0


settings = Settings()
