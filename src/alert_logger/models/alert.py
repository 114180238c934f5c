"""Alert record model: one spreadsheet row per relevant Slack message."""

from pydantic import BaseModel

UNKNOWN = "unknown"
NOT_AVAILABLE = "N/A"
UNKNOWN_TITLE = "Unknown Title"
NO_DESCRIPTION = "No description"
UNKNOWN_ALERT_ID = "Unknown Alert ID"

# Column headers in sheet order (A through N)
SHEET_COLUMNS: tuple[str, ...] = (
    "date",
    "time",
    "user",
    "channel",
    "title",
    "description",
    "alertId",
    "sourceUrl",
    "atsCustomerName",
    "atsName",
    "customerId",
    "summary",
    "importantSummary",
    "onCallId",
)


class RelevanceDecision(BaseModel):
    """Outcome of the keyword relevance check."""

    relevant: bool
    matched: list[str] = []


class AlertRecord(BaseModel):
    """Structured fields extracted from an alert message.

    Every field is always present; missing data is represented by its
    sentinel default, never by None.
    """

    date: str  # ISO calendar date of processing
    time: str  # Wall-clock time of processing, HH:MM:SS
    user: str = UNKNOWN
    channel: str = UNKNOWN
    title: str = UNKNOWN_TITLE
    description: str = NO_DESCRIPTION
    alert_id: str = UNKNOWN_ALERT_ID
    source_url: str = NOT_AVAILABLE
    ats_customer_name: str = NOT_AVAILABLE
    ats_name: str = NOT_AVAILABLE
    customer_id: str = NOT_AVAILABLE
    summary: str = NOT_AVAILABLE
    important_summary: str = ""
    on_call_id: str = NOT_AVAILABLE

    def to_row(self) -> list[str]:
        """Serialize to a positional row matching SHEET_COLUMNS."""
        return [
            self.date,
            self.time,
            self.user,
            self.channel,
            self.title,
            self.description,
            self.alert_id,
            self.source_url,
            self.ats_customer_name,
            self.ats_name,
            self.customer_id,
            self.summary,
            self.important_summary,
            self.on_call_id,
        ]
