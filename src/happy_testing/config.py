"""Helper configuration."""

import os
from http import HTTPStatus

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Helper settings loaded from environment variables."""

    api_base_url: str = "http://localhost:3000"
    api_timeout_seconds: float = 30.0
    fixture_email_domain: str = "example.com"
    fixture_password: str = "Test1234!"
    fixture_nationality: str = "México"
    fixture_phone_prefix: str = "+52155"
    # Comma-separated, e.g. "200,204,302"; unset keeps the built-in set.
    logout_ok_statuses: str | None = None
    log_http: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_status_set(raw: str | None) -> frozenset[HTTPStatus] | None:
    """Parse ``"200, 302"`` into HTTP statuses.

    Blank input means no override. Anything that is not a known HTTP status
    raises ``ValueError`` so a typo in the environment fails loudly.
    """
    if raw is None:
        return None
    statuses = frozenset(
        HTTPStatus(int(chunk)) for chunk in raw.split(",") if chunk.strip()
    )
    return statuses or None
