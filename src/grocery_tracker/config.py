"""Application configuration."""

import os
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from grocery_tracker.services.store import MAX_FOOD_ID

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    host: str = "localhost"
    port: int = 8080
    certfile: str = "cert.pem"
    keyfile: str = "key.pem"
    min_tls_version: Literal["TLSv1_2", "TLSv1_3"] = "TLSv1_3"
    api_credentials: str | None = None
    max_food_id: int = MAX_FOOD_ID
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_credentials(raw: str | None) -> dict[str, str]:
    """Parse ``user:password`` pairs separated by commas."""
    if raw is None:
        return {}
    credentials: dict[str, str] = {}
    for chunk in raw.split(","):
        user, sep, password = chunk.strip().partition(":")
        user = user.strip()
        if not sep or not user:
            continue
        credentials[user] = password
    return credentials
