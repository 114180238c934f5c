"""Slack webhook router with signature verification."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from alert_logger.sheets.service import RecordSink, get_record_sink
from alert_logger.slack.handlers import handle_slack_event
from alert_logger.slack.verification import verify_slack_request

router = APIRouter(prefix="", tags=["slack"])


@router.post("/slack/events")
async def slack_events(
    payload: dict = Depends(verify_slack_request),
    sink: RecordSink = Depends(get_record_sink),
) -> JSONResponse:
    """Receive Slack webhook events.

    The sheet append is awaited before responding, so a failed write returns
    500 and Slack's own retry delivers the event again.
    """
    return await handle_slack_event(payload, sink)
