"""Core domain models used across the application."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Tone(StrEnum):
    """Register used when drafting a reply."""

    PROFESSIONAL = "professional"
    FRIENDLY = "friendly"
    CONCISE = "concise"


class Intent(StrEnum):
    """What a reply needs to accomplish for the sender."""

    ANSWER_QUESTION = "answer_question"
    SCHEDULE_MEETING = "schedule_meeting"
    PROVIDE_UPDATE = "provide_update"
    URGENT_RESPONSE = "urgent_response"
    ACKNOWLEDGE = "acknowledge"


@dataclass(frozen=True, slots=True)
class EmailInput:
    """The textual fields of a single incoming email."""

    subject: str = ""
    body: str = ""
    sender: str = ""

    @classmethod
    def of(
        cls,
        subject: str | None = None,
        body: str | None = None,
        sender: str | None = None,
    ) -> EmailInput:
        """Build an input, treating missing fields as empty strings."""
        return cls(subject=subject or "", body=body or "", sender=sender or "")


@dataclass(frozen=True, slots=True)
class Categorization:
    """Category, importance and summary assigned to an email."""

    category: str
    importance: int
    summary: str
    provider: str = "deterministic"
    used_fallback: bool = False


@dataclass(frozen=True, slots=True)
class ResponseDraft:
    """Reply draft generated for an email."""

    subject: str
    body: str
    tone: Tone
    intent: Intent
    hold_for_review: bool
    suggested_actions: tuple[str, ...]
    provider: str = "deterministic"
    used_fallback: bool = False


@dataclass(frozen=True, slots=True)
class TriageResult:
    """Everything produced for one email in a triage pass."""

    email: EmailInput
    categorization: Categorization
    draft: ResponseDraft | None
    labels: tuple[str, ...]


__all__ = [
    "Tone",
    "Intent",
    "EmailInput",
    "Categorization",
    "ResponseDraft",
    "TriageResult",
]
