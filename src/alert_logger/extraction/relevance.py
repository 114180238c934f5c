"""Keyword relevance check for incoming Slack messages."""

from alert_logger.models.alert import RelevanceDecision

# Case-insensitive substring match, not word-boundary ("broadcast" matches "ats")
ALERT_KEYWORDS: tuple[str, ...] = (
    "oncall",
    "on-call",
    "firing",
    "critical",
    "incident",
    "status",
    "4xx",
    "5xx",
    "failed",
    "500",
    "ats",
    "partnership",
    "ats-unified-apis",
    "sqs",
)


def check_relevance(text: str) -> RelevanceDecision:
    """Decide whether a message should be logged.

    Blank text is never relevant. Otherwise the message is relevant if its
    lowercased text contains any keyword; all matching keywords are reported
    in table order.
    """
    if not text or not text.strip():
        return RelevanceDecision(relevant=False)

    lowered = text.lower()
    matched = [keyword for keyword in ALERT_KEYWORDS if keyword in lowered]
    return RelevanceDecision(relevant=bool(matched), matched=matched)
