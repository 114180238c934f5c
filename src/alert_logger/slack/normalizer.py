"""Reduce a Slack message event to the text and identity used for extraction."""

from alert_logger.models.slack import NormalizedMessage, SlackEvent

MESSAGE_CHANGED = "message_changed"


def normalize_event(event: SlackEvent) -> NormalizedMessage:
    """Pick the best-available text for a message event.

    Edits (subtype ``message_changed``) prefer the new message text, then the
    previous text. Other events use the top-level text. Missing text becomes
    an empty string.
    """
    if event.subtype == MESSAGE_CHANGED:
        current = event.message.text if event.message else None
        previous = event.previous_message.text if event.previous_message else None
        user = event.user or (event.message.user if event.message else None)
        return NormalizedMessage(
            text=current or previous or "",
            user=user,
            channel=event.channel,
        )

    return NormalizedMessage(text=event.text or "", user=event.user, channel=event.channel)
