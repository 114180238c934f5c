"""Alert text extraction: relevance filtering and field parsing.

Public API:
    extract_alert_fields(text, user, channel, now) -> AlertRecord | None
        Single entry point that checks relevance, scans key:value lines and
        description bullets, and applies the per-field link extractors.
"""

from alert_logger.extraction.extractor import extract_alert_fields
from alert_logger.extraction.lines import ScannedLines, scan_lines, split_lines
from alert_logger.extraction.relevance import ALERT_KEYWORDS, check_relevance

__all__ = [
    "ALERT_KEYWORDS",
    "ScannedLines",
    "check_relevance",
    "extract_alert_fields",
    "scan_lines",
    "split_lines",
]
