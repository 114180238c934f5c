"""Slack Events API message models."""

from pydantic import BaseModel, ConfigDict


class SlackMessage(BaseModel):
    """Nested message object carried by ``message_changed`` events."""

    model_config = ConfigDict(extra="ignore")

    text: str | None = None
    user: str | None = None
    bot_id: str | None = None


class SlackEvent(BaseModel):
    """The inner ``event`` object of a Slack ``event_callback`` payload."""

    model_config = ConfigDict(extra="ignore")

    type: str = ""
    subtype: str | None = None
    text: str | None = None
    user: str | None = None
    channel: str | None = None
    bot_id: str | None = None
    ts: str | None = None
    message: SlackMessage | None = None  # Present on message_changed
    previous_message: SlackMessage | None = None  # Present on message_changed

    @property
    def is_bot(self) -> bool:
        """True when the event (or the edited message) was posted by a bot."""
        if self.bot_id or self.subtype == "bot_message":
            return True
        return bool(self.message and self.message.bot_id)


class NormalizedMessage(BaseModel):
    """Best-available message text plus the identity fields used for logging."""

    text: str = ""
    user: str | None = None
    channel: str | None = None
