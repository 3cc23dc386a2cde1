"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Gateway
    base_url: str = "https://payout.1-2-pay.com"

    # Credentials, sent as request headers
    api_key: str = ""
    partner_code: str = ""
    channel: str = ""

    # Service
    service_name: str = "one-two-pay"
    log_level: str = "INFO"

    # HTTP Client
    http_timeout_seconds: float = 30.0


settings = Settings()
