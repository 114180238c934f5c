"""Error types for the alert logger.

Extraction never raises; only the sink boundary produces errors.
"""


class AlertLoggerError(Exception):
    """Base exception for the alert logger."""


class ConfigurationError(AlertLoggerError):
    """Required sink address or credentials are missing."""


class SinkError(AlertLoggerError):
    """Appending a row to the record sink failed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.message} (status {self.status_code})"
        return self.message
