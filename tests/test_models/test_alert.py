"""Tests for the AlertRecord model and sheet column order."""

import pytest
from pydantic import ValidationError

from alert_logger.models.alert import SHEET_COLUMNS, AlertRecord, RelevanceDecision


def test_defaults_are_sentinels():
    """Only date and time are required; everything else has a sentinel."""
    record = AlertRecord(date="2026-01-02", time="03:04:05")
    assert record.user == "unknown"
    assert record.channel == "unknown"
    assert record.title == "Unknown Title"
    assert record.description == "No description"
    assert record.alert_id == "Unknown Alert ID"
    assert record.source_url == "N/A"
    assert record.ats_customer_name == "N/A"
    assert record.ats_name == "N/A"
    assert record.customer_id == "N/A"
    assert record.summary == "N/A"
    assert record.important_summary == ""
    assert record.on_call_id == "N/A"


def test_to_row_has_fourteen_columns():
    """Rows are exactly as wide as the sheet header."""
    record = AlertRecord(date="2026-01-02", time="03:04:05")
    assert len(record.to_row()) == len(SHEET_COLUMNS) == 14


def test_to_row_column_order():
    """Row values follow date..onCallId order."""
    record = AlertRecord(
        date="2026-01-02",
        time="03:04:05",
        user="U1",
        channel="C1",
        title="T",
        description="D",
        alert_id="A1",
        source_url="https://src",
        ats_customer_name="Acme",
        ats_name="svc",
        customer_id="cust-9",
        summary="S",
        important_summary="- x; - y",
        on_call_id="#7",
    )
    assert record.to_row() == [
        "2026-01-02",
        "03:04:05",
        "U1",
        "C1",
        "T",
        "D",
        "A1",
        "https://src",
        "Acme",
        "svc",
        "cust-9",
        "S",
        "- x; - y",
        "#7",
    ]


def test_missing_date_raises():
    """Date is required."""
    with pytest.raises(ValidationError):
        AlertRecord(time="03:04:05")


def test_relevance_decision_default_matches():
    """A negative decision carries no matched keywords."""
    assert RelevanceDecision(relevant=False).matched == []
