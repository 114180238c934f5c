"""Slack alert logger: extract alert fields from Slack messages into Google Sheets."""

__version__ = "0.1.0"
