"""Rule-based categorisation service for emails."""

from __future__ import annotations

import logging
from dataclasses import replace

from inbox_triage.core.interfaces import CategoryService, LanguageModelDelegate
from inbox_triage.core.models import Categorization, EmailInput

from .heuristics import combined_text
from .lexicon import DEFAULT_LEXICON, Lexicon
from .llm import DELEGATE_ERRORS
from .priority import clamp_importance, score_importance
from .summarizer import summarize_body

LOGGER = logging.getLogger(__name__)


def score_categories(text: str, lexicon: Lexicon) -> list[tuple[str, int]]:
    """Score each category as matched-term count times priority.

    Terms are matched as substrings of ``text`` and each term counts once,
    however many times it occurs.
    """
    scores: list[tuple[str, int]] = []
    for entry in lexicon.categories:
        matches = sum(1 for term in entry.terms if term in text)
        scores.append((entry.name, matches * entry.priority))
    return scores


def select_category(scores: list[tuple[str, int]], default: str) -> str:
    """Return the first category holding the strictly highest positive score."""
    selected = default
    highest = 0
    for name, score in scores:
        if score > highest:
            highest = score
            selected = name
    return selected


def categorize_text(
    subject: str, body: str, *, lexicon: Lexicon = DEFAULT_LEXICON
) -> Categorization:
    """Categorise an email with keyword rules only."""
    text = combined_text(subject, body)
    category = select_category(
        score_categories(text, lexicon), lexicon.default_category
    )
    return Categorization(
        category=category,
        importance=score_importance(text, category, lexicon),
        summary=summarize_body(body),
        provider="deterministic",
        used_fallback=True,
    )


class KeywordCategoryService(CategoryService):
    """Assign a category, preferring an LLM delegate when one is supplied."""

    def __init__(
        self,
        delegate: LanguageModelDelegate | None = None,
        *,
        lexicon: Lexicon = DEFAULT_LEXICON,
    ) -> None:
        self._delegate = delegate
        self._lexicon = lexicon

    @property
    def lexicon(self) -> Lexicon:
        return self._lexicon

    def categorize(
        self,
        subject: str | None,
        body: str | None,
        sender: str | None,
    ) -> Categorization:
        """Return the categorisation for an email; never raises on bad text."""
        email = EmailInput.of(subject, body, sender)

        if self._delegate is not None:
            try:
                delegated = self._delegate.categorize_email(
                    email.subject, email.body, email.sender
                )
                return self._normalise(delegated)
            except DELEGATE_ERRORS as exc:
                LOGGER.warning(
                    "LLM categorisation failed for %r, using keyword rules: %s",
                    email.subject,
                    exc,
                )

        result = categorize_text(email.subject, email.body, lexicon=self._lexicon)
        LOGGER.debug(
            "Categorised %r as %s (importance %s)",
            email.subject,
            result.category,
            result.importance,
        )
        return result

    def _normalise(self, result: Categorization) -> Categorization:
        """Clamp delegate output into the same ranges the keyword rules use."""
        try:
            importance = clamp_importance(float(result.importance))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Delegate importance {result.importance!r}") from exc
        category = (result.category or "").strip() or self._lexicon.default_category
        return replace(
            result,
            category=category,
            importance=importance,
            summary=result.summary or "",
        )


__all__ = [
    "KeywordCategoryService",
    "categorize_text",
    "score_categories",
    "select_category",
]
