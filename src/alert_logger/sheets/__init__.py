"""Google Sheets output: service account client and row append sink."""

from alert_logger.sheets.client import get_sheets_service, load_credentials, reset_client
from alert_logger.sheets.models import AppendResult
from alert_logger.sheets.service import RecordSink, SheetsRecordSink, get_record_sink

__all__ = [
    "AppendResult",
    "get_record_sink",
    "get_sheets_service",
    "load_credentials",
    "RecordSink",
    "reset_client",
    "SheetsRecordSink",
]
