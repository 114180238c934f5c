"""Record sink backed by Google Sheets ``values.append``.

The Google client is synchronous, so each append runs in a worker thread.
Rate limits (429) and server errors (5xx) are retried with tenacity. Other API,
auth, and transport failures, and exhausted retries, surface as SinkError;
credentials that cannot be parsed raise ConfigurationError.
"""

import asyncio
import logging
from typing import Protocol

import httplib2
from google.auth.exceptions import GoogleAuthError
from googleapiclient.errors import HttpError
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from alert_logger.config import get_settings
from alert_logger.errors import ConfigurationError, SinkError
from alert_logger.sheets.client import get_sheets_service, has_credentials
from alert_logger.sheets.models import AppendResult

logger = logging.getLogger(__name__)


class RecordSink(Protocol):
    """Append-only destination for alert rows."""

    def check_configured(self) -> None: ...

    async def append(self, row: list[str]) -> AppendResult: ...


def _is_retryable(error: BaseException) -> bool:
    """Retry on rate limits (429) and server errors (5xx) only."""
    if isinstance(error, HttpError):
        return error.resp.status == 429 or error.resp.status >= 500
    return False


def _error_reason(error: HttpError) -> str:
    """Best human-readable reason from a Google API error."""
    reason = getattr(error, "reason", None)
    if reason:
        return reason
    return str(error)


class SheetsRecordSink:
    """Appends rows to a named range of a spreadsheet."""

    def __init__(
        self,
        spreadsheet_id: str,
        range_name: str,
        value_input_option: str = "USER_ENTERED",
    ):
        self.spreadsheet_id = spreadsheet_id
        self.range_name = range_name
        self.value_input_option = value_input_option

    def check_configured(self) -> None:
        """Raise ConfigurationError if the sheet address or credentials are missing."""
        if not self.spreadsheet_id:
            raise ConfigurationError("GOOGLE_SHEET_ID is not configured")
        if not self.range_name:
            raise ConfigurationError("SHEET_RANGE is not configured")
        if not has_credentials(get_settings()):
            raise ConfigurationError("Google service account credentials are not configured")

    @retry(
        retry=retry_if_exception(_is_retryable),
        wait=wait_exponential_jitter(initial=1, max=10, jitter=1),
        stop=stop_after_attempt(3),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
    def _execute_append(self, row: list[str]) -> dict:
        """Run the blocking append request, retrying on transient errors."""
        service = get_sheets_service()
        request = (
            service.spreadsheets()
            .values()
            .append(
                spreadsheetId=self.spreadsheet_id,
                range=self.range_name,
                valueInputOption=self.value_input_option,
                insertDataOption="INSERT_ROWS",
                body={"values": [row]},
            )
        )
        return request.execute()

    async def append(self, row: list[str]) -> AppendResult:
        """Append one row. Raises SinkError if the write fails.

        Credentials that cannot be loaded raise ConfigurationError instead.

        Args:
            row: Cell values in column order.

        Returns:
            AppendResult with the number of rows written and the updated range.
        """
        try:
            response = await asyncio.to_thread(self._execute_append, row)
        except HttpError as exc:
            logger.error(
                "Sheets append failed for %s (%s): %s",
                self.spreadsheet_id,
                exc.resp.status,
                _error_reason(exc),
            )
            raise SinkError(_error_reason(exc), status_code=exc.resp.status) from exc
        except (GoogleAuthError, httplib2.HttpLib2Error, OSError) as exc:
            logger.error("Sheets append failed for %s: %s", self.spreadsheet_id, exc)
            raise SinkError(str(exc)) from exc

        updates = response.get("updates", {})
        result = AppendResult(
            updated_rows=updates.get("updatedRows", 0),
            updated_range=updates.get("updatedRange", ""),
        )
        logger.info("Appended %d row(s) to %s", result.updated_rows, result.updated_range)
        return result


def get_record_sink() -> SheetsRecordSink:
    """Build the sink from settings. Used as a FastAPI dependency."""
    settings = get_settings()
    return SheetsRecordSink(
        spreadsheet_id=settings.google_sheet_id,
        range_name=settings.sheet_range,
        value_input_option=settings.value_input_option,
    )
