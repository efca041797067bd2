"""Follow-up actions and review gating for drafted replies."""

from __future__ import annotations

REVIEW_CATEGORIES = frozenset({"Power", "Meeting_Ready_Lead", "Obstacle"})
NO_REPLY_CATEGORIES = frozenset({"Spam", "Newsletter", "No_Longer_Works", "OOO"})
ALWAYS_REPLY_CATEGORIES = frozenset(
    {"Meeting_Ready_Lead", "Power", "Question", "Urgent"}
)
ALWAYS_REPLY_IMPORTANCE = 7
HIGH_IMPORTANCE = 8
REVIEW_IMPORTANCE = 5

# (action, minimum importance) per category; ``0`` means always suggested.
_CATEGORY_ACTIONS: dict[str, tuple[tuple[str, int], ...]] = {
    "Meeting_Ready_Lead": (
        ("Schedule meeting", 0),
        ("Send calendar invite", 0),
        ("Prepare meeting agenda", 8),
    ),
    "Power": (
        ("Research company", 0),
        ("Prepare personalized proposal", 0),
        ("Alert sales manager", 8),
    ),
    "Interested": (
        ("Send product information", 0),
        ("Follow up in 3 days", 0),
    ),
    "Question": (
        ("Provide detailed answer", 0),
        ("Schedule call for complex questions", 7),
    ),
    "Obstacle": (
        ("Escalate to support team", 0),
        ("Follow up after resolution", 0),
    ),
    "Not_Interested": (
        ("Update CRM status", 0),
        ("Schedule follow-up in 3 months", 0),
    ),
}
_DEFAULT_ACTIONS: tuple[tuple[str, int], ...] = (
    ("Review and respond", 0),
    ("Prioritize response", 7),
)


def suggest_actions(category: str, importance: int) -> tuple[str, ...]:
    """Return ordered follow-up actions for a categorised email."""
    rules = _CATEGORY_ACTIONS.get(category, _DEFAULT_ACTIONS)
    return tuple(action for action, threshold in rules if importance >= threshold)


def should_hold_for_review(category: str, importance: int) -> bool:
    """Return ``True`` when a draft must not be sent without a human look."""
    if category in REVIEW_CATEGORIES:
        return True
    return importance >= REVIEW_IMPORTANCE


def should_draft_reply(category: str, importance: int) -> bool:
    """Return ``True`` when an email warrants a reply draft at all."""
    if category in NO_REPLY_CATEGORIES:
        return False
    if importance >= ALWAYS_REPLY_IMPORTANCE:
        return True
    if category in ALWAYS_REPLY_CATEGORIES:
        return True
    return importance >= REVIEW_IMPORTANCE


__all__ = [
    "suggest_actions",
    "should_draft_reply",
    "should_hold_for_review",
    "REVIEW_CATEGORIES",
]
