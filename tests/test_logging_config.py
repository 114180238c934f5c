"""Tests for JSON logging configuration."""

import logging

from alert_logger.logging_config import LOGGING_CONFIG, configure_logging


def test_configure_logging_sets_level():
    """The requested level is applied to the root logger."""
    configure_logging("debug")
    assert logging.getLogger().level == logging.DEBUG
    configure_logging("INFO")


def test_configure_logging_unknown_level_falls_back():
    """Unknown level names fall back to INFO."""
    configure_logging("verbose")
    assert logging.getLogger().level == logging.INFO


def test_configure_logging_does_not_mutate_template():
    """The module-level config stays at its default level."""
    configure_logging("ERROR")
    assert LOGGING_CONFIG["root"]["level"] == "INFO"
    configure_logging("INFO")
