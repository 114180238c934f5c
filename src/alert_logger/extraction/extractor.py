"""Alert field extraction: raw Slack message text -> AlertRecord.

Pure apart from reading the clock when ``now`` is not supplied.
"""

from datetime import datetime

from alert_logger.extraction.lines import scan_lines
from alert_logger.extraction.patterns import (
    extract_alert_id,
    extract_on_call_id,
    extract_source_url,
    extract_title,
)
from alert_logger.extraction.relevance import check_relevance
from alert_logger.models.alert import UNKNOWN, AlertRecord


def extract_alert_fields(
    text: str,
    user: str | None = None,
    channel: str | None = None,
    now: datetime | None = None,
) -> AlertRecord | None:
    """Build an AlertRecord from message text, or None if the message is not relevant.

    Args:
        text: Normalized message text.
        user: Slack user ID of the poster, "unknown" when missing.
        channel: Slack channel ID, "unknown" when missing.
        now: Processing instant for the date/time columns. Defaults to local now.
    """
    if not check_relevance(text).relevant:
        return None

    now = now or datetime.now().astimezone()
    scanned = scan_lines(text)

    return AlertRecord(
        date=now.date().isoformat(),
        time=now.strftime("%H:%M:%S"),
        user=user or UNKNOWN,
        channel=channel or UNKNOWN,
        title=extract_title(text),
        description=scanned.description,
        alert_id=extract_alert_id(text),
        source_url=extract_source_url(text),
        ats_customer_name=scanned.ats_customer_name,
        ats_name=scanned.ats_name,
        customer_id=scanned.customer_id,
        summary=scanned.summary,
        important_summary="; ".join(scanned.important_points),
        on_call_id=extract_on_call_id(text),
    )
