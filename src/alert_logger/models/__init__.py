"""Data models for the alert logger pipeline."""

from alert_logger.models.alert import SHEET_COLUMNS, AlertRecord, RelevanceDecision
from alert_logger.models.slack import NormalizedMessage, SlackEvent, SlackMessage

__all__ = [
    "AlertRecord",
    "NormalizedMessage",
    "RelevanceDecision",
    "SHEET_COLUMNS",
    "SlackEvent",
    "SlackMessage",
]
