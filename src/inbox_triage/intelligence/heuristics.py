"""Keyword heuristics for reply tone, intent and addressing."""

from __future__ import annotations

from inbox_triage.core.models import Intent, Tone

PROFESSIONAL_CATEGORIES = frozenset({"Meeting_Ready_Lead", "Power"})
FRIENDLY_CATEGORIES = frozenset({"Interested", "Question"})

# Evaluated in order; the first intent with a matching keyword wins.
_INTENT_KEYWORDS: tuple[tuple[Intent, tuple[str, ...]], ...] = (
    (Intent.ANSWER_QUESTION, ("?",)),
    (Intent.SCHEDULE_MEETING, ("meet", "schedule")),
    (Intent.PROVIDE_UPDATE, ("update", "status")),
    (Intent.URGENT_RESPONSE, ("urgent", "asap")),
)


def select_tone(category: str, importance: int) -> Tone:
    """Pick the reply tone from the category and importance."""
    if category in PROFESSIONAL_CATEGORIES or importance >= 8:
        return Tone.PROFESSIONAL
    if category in FRIENDLY_CATEGORIES:
        return Tone.FRIENDLY
    return Tone.CONCISE


def detect_intent(text: str) -> Intent:
    """Return the reply intent for lowercased subject and body text."""
    for intent, keywords in _INTENT_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return intent
    return Intent.ACKNOWLEDGE


def sender_display_name(sender: str) -> str:
    """Return a name to greet the sender with.

    ``"Jane Doe <jane@example.com>"`` yields ``"Jane Doe"``; a bare address
    yields its local part.
    """
    name = sender.split("<", 1)[0].strip().strip('"').strip()
    if not name and "<" in sender:
        name = sender.split("<", 1)[1].rstrip(">").strip()
    if "@" in name:
        name = name.split("@", 1)[0]
    return name or "there"


def combined_text(subject: str, body: str) -> str:
    """Lowercase subject and body joined for keyword matching."""
    return f"{subject} {body}".lower()


__all__ = [
    "select_tone",
    "detect_intent",
    "sender_display_name",
    "combined_text",
    "PROFESSIONAL_CATEGORIES",
    "FRIENDLY_CATEGORIES",
]
