"""Slack event dispatch: filter, extract, and append alert rows."""

import logging
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi.responses import JSONResponse

from alert_logger.config import get_settings
from alert_logger.errors import ConfigurationError, SinkError
from alert_logger.extraction import extract_alert_fields
from alert_logger.models.slack import SlackEvent
from alert_logger.sheets.service import RecordSink
from alert_logger.slack.normalizer import normalize_event

logger = logging.getLogger(__name__)


async def handle_slack_event(payload: dict, sink: RecordSink) -> JSONResponse:
    """Dispatch a Slack event based on its type.

    - url_verification: return the challenge token
    - event_callback: process the contained event
    - anything else: acknowledge with 200
    """
    if payload.get("type") == "url_verification":
        return JSONResponse({"challenge": payload.get("challenge", "")})

    if payload.get("type") == "event_callback":
        event = SlackEvent.model_validate(payload.get("event") or {})
        return await handle_message_event(event, sink)

    return JSONResponse({"ok": True})


async def handle_message_event(event: SlackEvent, sink: RecordSink) -> JSONResponse:
    """Log a relevant message event as one sheet row.

    Returns 200 when the event is skipped or the row was appended, and 500
    with the failure reason when the sink is unconfigured or the append fails.
    """
    if event.type != "message":
        return JSONResponse({"ok": True})

    settings = get_settings()
    try:
        sink.check_configured()
        now = _processing_time(settings.timezone)
    except ConfigurationError as exc:
        logger.error("Cannot log message %s: %s", event.ts, exc)
        return JSONResponse({"ok": False, "error": str(exc)}, status_code=500)

    if settings.ignore_bot_messages and event.is_bot:
        return JSONResponse({"ok": True})

    message = normalize_event(event)
    record = extract_alert_fields(
        message.text,
        user=message.user,
        channel=message.channel,
        now=now,
    )
    if record is None:
        return JSONResponse({"ok": True})

    try:
        await sink.append(record.to_row())
    except (ConfigurationError, SinkError) as exc:
        logger.error(
            "Failed to log alert %s (message %s) from channel %s: %s",
            record.alert_id,
            event.ts,
            record.channel,
            exc,
        )
        return JSONResponse({"ok": False, "error": str(exc)}, status_code=500)

    logger.info(
        "Logged alert %s (%s) from message %s by user %s in channel %s",
        record.alert_id,
        record.on_call_id,
        event.ts,
        record.user,
        record.channel,
    )
    return JSONResponse({"ok": True})


def _processing_time(timezone: str) -> datetime:
    """Current time in the configured zone, or server local time if unset.

    Raises ConfigurationError if the zone is unknown.
    """
    if timezone:
        try:
            return datetime.now(ZoneInfo(timezone))
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ConfigurationError(f"Unknown timezone: {timezone}") from exc
    return datetime.now().astimezone()
