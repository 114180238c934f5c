"""Google Sheets API client singleton.

Creates a cached Sheets v4 service authenticated with a service account.
Follows the lazy-init pattern used by the Slack client: the service is built
on first use and reused for the life of the process.
"""

from google.oauth2 import service_account
from googleapiclient.discovery import Resource, build

from alert_logger.config import Settings, get_settings
from alert_logger.errors import ConfigurationError

SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
TOKEN_URI = "https://oauth2.googleapis.com/token"

_service: Resource | None = None


def has_credentials(settings: Settings) -> bool:
    """True when either a key file or an inline service account is configured."""
    if settings.google_service_account_file:
        return True
    return bool(settings.google_service_account_email and settings.google_private_key)


def load_credentials(settings: Settings) -> service_account.Credentials:
    """Build service account credentials from settings.

    A key file takes precedence over the inline email/private key pair.
    Private keys stored in env vars often carry literal ``\\n`` sequences;
    these are turned back into newlines.

    Raises ConfigurationError if neither form is configured, or if the key
    cannot be parsed.
    """
    if settings.google_service_account_file:
        try:
            return service_account.Credentials.from_service_account_file(
                settings.google_service_account_file, scopes=SHEETS_SCOPES
            )
        except (OSError, ValueError) as exc:
            raise ConfigurationError(
                f"Invalid service account file {settings.google_service_account_file}: {exc}"
            ) from exc

    if not has_credentials(settings):
        raise ConfigurationError(
            "Google service account credentials are not configured. Set "
            "GOOGLE_SERVICE_ACCOUNT_FILE or GOOGLE_SERVICE_ACCOUNT_EMAIL and GOOGLE_PRIVATE_KEY."
        )

    info = {
        "type": "service_account",
        "client_email": settings.google_service_account_email,
        "private_key": settings.google_private_key.replace("\\n", "\n"),
        "token_uri": TOKEN_URI,
    }
    try:
        return service_account.Credentials.from_service_account_info(info, scopes=SHEETS_SCOPES)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid GOOGLE_PRIVATE_KEY: {exc}") from exc


def get_sheets_service() -> Resource:
    """Return a cached Sheets v4 service instance.

    Builds the service on first call using credentials from settings.
    Subsequent calls return the cached instance.
    """
    global _service
    if _service is None:
        credentials = load_credentials(get_settings())
        _service = build("sheets", "v4", credentials=credentials, cache_discovery=False)
    return _service


def reset_client() -> None:
    """Reset the cached service instance. Used for testing."""
    global _service
    _service = None
