"""Regex extractors for Slack-formatted alert links.

Each extractor searches the whole raw message and falls back to its own
default, so one malformed section never affects the other fields.
"""

import re

from alert_logger.models.alert import NOT_AVAILABLE, UNKNOWN_ALERT_ID, UNKNOWN_TITLE

# <https://oncall.example.com/alert-groups/IABC123|#4521 [Firing] Title>
ALERT_ID_PATTERN = re.compile(r"alert-groups/([A-Za-z0-9]+)\|")

# <https://grafana.example.com/d/xyz|source>
SOURCE_URL_PATTERN = re.compile(r"<([^<>|]+)\|source>")

# |#4521 [Firing] Title text>*
TITLE_PATTERN = re.compile(r"\|(?:#\d+)?[^\]|>]*\]\s*([^>]*?)\s*>\*")

ON_CALL_ID_PATTERN = re.compile(r"\|#(\d+)")


def extract_alert_id(text: str) -> str:
    """Return the alert group token from an OnCall link."""
    match = ALERT_ID_PATTERN.search(text)
    return match.group(1) if match else UNKNOWN_ALERT_ID


def extract_source_url(text: str) -> str:
    """Return the URL of the first ``<url|source>`` link."""
    match = SOURCE_URL_PATTERN.search(text)
    return match.group(1).strip() if match else NOT_AVAILABLE


def extract_title(text: str) -> str:
    """Return the alert title between the ``[state]`` tag and the closing ``>*``."""
    match = TITLE_PATTERN.search(text)
    if match and match.group(1):
        return match.group(1)
    return UNKNOWN_TITLE


def extract_on_call_id(text: str) -> str:
    """Return the incident number as ``#<digits>``."""
    match = ON_CALL_ID_PATTERN.search(text)
    return f"#{match.group(1)}" if match else NOT_AVAILABLE
