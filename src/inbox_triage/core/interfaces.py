"""Protocol interfaces for decoupling components."""

from __future__ import annotations

from typing import Protocol

from .models import Categorization, ResponseDraft, Tone


class LanguageModelDelegate(Protocol):
    """Optional text-generation backend preferred over keyword rules.

    Both operations raise :class:`inbox_triage.intelligence.llm.LLMError` when
    the backend is unreachable, times out, or replies with something that
    cannot be parsed. Callers treat a failure as if no delegate was present.
    """

    @property
    def provider_id(self) -> str:
        """Identifier describing the backing model/provider."""
        raise NotImplementedError

    def categorize_email(
        self, subject: str, body: str, sender: str
    ) -> Categorization:
        """Return category, importance and summary for an email."""
        raise NotImplementedError

    def generate_reply(
        self,
        subject: str,
        body: str,
        sender: str,
        category: str,
        tone: Tone,
    ) -> str:
        """Return a free-text reply body for an email."""
        raise NotImplementedError


class CategoryService(Protocol):
    """Assigns a category, importance and summary to emails."""

    def categorize(self, subject: str, body: str, sender: str) -> Categorization:
        """Return the categorisation for the supplied email fields."""
        raise NotImplementedError


class ResponseService(Protocol):
    """Drafts replies for categorised emails."""

    def generate_response(
        self,
        subject: str,
        body: str,
        sender: str,
        category: str,
        importance: int,
    ) -> ResponseDraft:
        """Return a reply draft for the supplied email fields."""
        raise NotImplementedError


__all__ = [
    "LanguageModelDelegate",
    "CategoryService",
    "ResponseService",
]
