"""Line-oriented ``key: value`` and bullet scanner for alert message bodies."""

import re
from dataclasses import dataclass, field

from alert_logger.models.alert import NO_DESCRIPTION, NOT_AVAILABLE

# Upstream integrations sometimes deliver a literal backslash-n instead of a newline
LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n|\\n")

# Line prefix -> ScannedLines attribute. Matched case-insensitively.
KEY_FIELDS: dict[str, str] = {
    "atsname": "ats_name",
    "atscustomername": "ats_customer_name",
    "customerid": "customer_id",
    "summary": "summary",
}

KEY_LINE_PATTERN = re.compile(
    r"^(atsName|atsCustomerName|customerId|summary|description):",
    re.IGNORECASE,
)


@dataclass
class ScannedLines:
    """Fields collected by a single pass over the message lines."""

    ats_name: str = NOT_AVAILABLE
    ats_customer_name: str = NOT_AVAILABLE
    customer_id: str = NOT_AVAILABLE
    summary: str = NOT_AVAILABLE
    description: str = NO_DESCRIPTION
    important_points: list[str] = field(default_factory=list)


def split_lines(text: str) -> list[str]:
    """Split on any newline form, including an escaped two-character ``\\n``."""
    return LINE_BREAK_PATTERN.split(text)


def scan_lines(text: str) -> ScannedLines:
    """Collect key:value fields and description bullets from message text.

    Each line is trimmed before matching. Repeated keys overwrite earlier
    values. A ``description:`` line starts bullet capture: following lines
    that begin with ``-`` are collected until the first empty line.
    """
    scanned = ScannedLines()
    capturing = False

    for raw_line in split_lines(text):
        line = raw_line.strip()

        match = KEY_LINE_PATTERN.match(line)
        if match:
            key = match.group(1).lower()
            value = line.split(":", 1)[1].strip()
            if key == "description":
                scanned.description = value or NO_DESCRIPTION
                capturing = True
            else:
                setattr(scanned, KEY_FIELDS[key], value or NOT_AVAILABLE)
            continue

        if not capturing:
            continue
        if not line:
            capturing = False
        elif line.startswith("-"):
            scanned.important_points.append(line)

    return scanned
