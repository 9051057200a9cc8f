"""Centralised application settings loaded from environment / .env file."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Venue API
    venue_api_base_url: str = (
        "https://consumer-api.development.dev.woltapi.com"
        "/home-assignment-api/v1/venues/"
    )
    http_timeout_seconds: float = 10.0

    # Presentation
    currency_symbol: str = "€"

    # Service
    log_level: str = "INFO"
    rate_limit: str = "100/minute"  # per client address

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
