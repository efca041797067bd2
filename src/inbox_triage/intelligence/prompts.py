"""Prompt templates for LLM-driven categorisation and replies."""

from __future__ import annotations

from collections.abc import Sequence
from textwrap import dedent

from inbox_triage.core.models import Tone

# Templates are dedented before substitution so multi-line bodies keep
# their own indentation.
_CATEGORIZATION_TEMPLATE = dedent(
    """
    Analyze this email and respond strictly with JSON using this schema:
    {{
      "category": string,   # one of: {categories}
      "importance": number, # 1 (ignorable) to 10 (drop everything)
      "summary": string     # 1-2 sentences describing the email
    }}

    Do not include any additional keys or prose outside the JSON object.

    From: {sender}
    Subject: {subject}

    Email body:
    {body}
    """
).strip()

_REPLY_SYSTEM_TEMPLATE = dedent(
    """
    You are an assistant helping to draft email responses.
    Generate a {tone} response to the email below.
    The email is categorized as "{category}".
    Keep the response relevant, helpful, and appropriate for business
    communication. Return only the body of the reply, with greeting and closing.
    """
).strip()

_REPLY_TEMPLATE = dedent(
    """
    Original email:
    From: {sender}
    Subject: {subject}
    Body:
    {body}

    Generate a response email:
    """
).strip()


def build_categorization_prompt(
    subject: str, body: str, sender: str, *, categories: Sequence[str]
) -> str:
    """Compose a JSON-only categorisation prompt for an email."""
    return _CATEGORIZATION_TEMPLATE.format(
        categories=", ".join([*categories, "Other"]),
        sender=sender or "(unknown sender)",
        subject=subject or "(no subject)",
        body=body,
    )


def build_reply_system_prompt(category: str, tone: Tone) -> str:
    """Compose the system instruction steering reply generation."""
    return _REPLY_SYSTEM_TEMPLATE.format(tone=tone.value, category=category)


def build_reply_prompt(subject: str, body: str, sender: str) -> str:
    """Compose the user prompt carrying the original email."""
    return _REPLY_TEMPLATE.format(
        sender=sender or "(unknown sender)",
        subject=subject or "(no subject)",
        body=body,
    )


__all__ = [
    "build_categorization_prompt",
    "build_reply_system_prompt",
    "build_reply_prompt",
]
