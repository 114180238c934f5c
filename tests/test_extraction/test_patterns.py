"""Tests for the per-field regex extractors."""

from alert_logger.extraction.patterns import (
    extract_alert_id,
    extract_on_call_id,
    extract_source_url,
    extract_title,
)

ONCALL_HEADER = (
    "*<https://oncall.example.com/alert-groups/IQ7Z2KX|#4521 [Firing] High CPU on db-1>*"
)


def test_alert_id_from_oncall_link():
    """The alert group token is captured from the link."""
    assert extract_alert_id(ONCALL_HEADER) == "IQ7Z2KX"


def test_alert_id_default():
    """Missing alert link falls back to the sentinel."""
    assert extract_alert_id("critical: no link here") == "Unknown Alert ID"


def test_alert_id_requires_pipe():
    """A bare alert-groups URL without a label does not match."""
    assert extract_alert_id("<https://x/alert-groups/ABC>") == "Unknown Alert ID"


def test_source_url():
    """The URL of the <url|source> link is returned."""
    text = "<https://a.example.com|Alert> <https://grafana.example.com/d/abc?x=1|source>"
    assert extract_source_url(text) == "https://grafana.example.com/d/abc?x=1"


def test_source_url_default():
    """No source link falls back to N/A."""
    assert extract_source_url("<https://a.example.com|Alert>") == "N/A"


def test_title_with_incident_number():
    """Title is the text after the [state] tag up to the closing >*."""
    assert extract_title(ONCALL_HEADER) == "High CPU on db-1"


def test_title_without_incident_number():
    """The #<digits> prefix is optional."""
    text = "*<https://oncall.example.com/alert-groups/X1|[Resolved] Queue depth>*"
    assert extract_title(text) == "Queue depth"


def test_title_default():
    """No bracketed state tag falls back to the sentinel."""
    assert extract_title("<https://a.example.com|Alert>*CRITICAL*") == "Unknown Title"


def test_on_call_id():
    """Incident number is rendered with a leading #."""
    assert extract_on_call_id(ONCALL_HEADER) == "#4521"


def test_on_call_id_default():
    """No |#<digits> marker falls back to N/A."""
    assert extract_on_call_id("incident #4521 without pipe") == "N/A"
