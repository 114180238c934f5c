"""FastAPI application with lifespan, health, and test-row endpoints."""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Request

from alert_logger import __version__
from alert_logger.config import get_settings
from alert_logger.errors import ConfigurationError, SinkError
from alert_logger.extraction import extract_alert_fields
from alert_logger.logging_config import configure_logging
from alert_logger.sheets.service import RecordSink, get_record_sink
from alert_logger.slack.router import router as slack_router

logger = logging.getLogger(__name__)

SAMPLE_ALERT = (
    "*<https://oncall.example.com/alert-groups/ITEST01|#1 [Firing] Test alert from alert-logger>*\n"
    "<https://grafana.example.com/d/test|source>\n"
    "description: connectivity check\n"
    "- row appended by POST /test-row\n"
    "\n"
    "summary: test row, safe to delete"
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: load config and configure logging on startup."""
    settings = get_settings()
    configure_logging(settings.log_level)
    if not settings.slack_signing_secret:
        logger.warning("SLACK_SIGNING_SECRET is not set; Slack signatures will not be verified")
    app.state.settings = settings
    yield


app = FastAPI(
    title="Alert Logger",
    lifespan=lifespan,
)
app.include_router(slack_router)


async def verify_admin(request: Request) -> None:
    """Verify the admin secret header for protected endpoints.

    Compares the X-Admin-Secret header against the configured secret.
    Raises HTTPException 403 if the header is missing, empty, or mismatched.
    """
    settings = get_settings()
    secret = request.headers.get("X-Admin-Secret", "")
    if not settings.admin_secret or secret != settings.admin_secret:
        raise HTTPException(status_code=403, detail="Invalid admin secret")


@app.get("/health")
async def health():
    """Health check endpoint for Cloud Run and local development."""
    return {
        "status": "ok",
        "service": "alert-logger",
        "version": __version__,
    }


@app.post("/test-row")
async def append_test_row(
    _: None = Depends(verify_admin),
    sink: RecordSink = Depends(get_record_sink),
):
    """Append a sample alert row to verify sheet access end to end."""
    record = extract_alert_fields(SAMPLE_ALERT, user="alert-logger", channel="test-row")
    try:
        sink.check_configured()
        result = await sink.append(record.to_row())
    except (ConfigurationError, SinkError) as e:
        logger.error("Test row append failed", extra={"error": str(e)})
        return {"status": "error", "error": str(e)}

    return {"status": "appended", "updated_rows": result.updated_rows}
