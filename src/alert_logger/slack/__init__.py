"""Slack ingress: webhook handling, signature verification, and event normalization."""

from alert_logger.slack.handlers import handle_message_event, handle_slack_event
from alert_logger.slack.normalizer import normalize_event
from alert_logger.slack.router import router

__all__ = [
    "handle_message_event",
    "handle_slack_event",
    "normalize_event",
    "router",
]
