"""Application configuration via pydantic-settings."""

from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Slack
    slack_signing_secret: str = ""
    ignore_bot_messages: bool = False

    # Google Sheets
    google_sheet_id: str = ""
    sheet_range: str = "Sheet1!A:N"
    value_input_option: str = "USER_ENTERED"
    google_service_account_email: str = ""
    google_private_key: str = ""
    google_service_account_file: str = ""

    # Admin endpoints
    admin_secret: str = ""

    # App
    timezone: str = ""  # IANA name for the date/time columns; empty = server local
    environment: str = "development"
    log_level: str = "INFO"
    port: int = 8080

    @field_validator("timezone")
    @classmethod
    def known_timezone(cls, value: str) -> str:
        """Reject zone names the zone database does not know."""
        if value:
            try:
                ZoneInfo(value)
            except (ZoneInfoNotFoundError, ValueError) as exc:
                raise ValueError(f"Unknown timezone: {value}") from exc
        return value


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()
