"""End-to-end triage of single emails and independent batches."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from inbox_triage.core.config import LlmSettings
from inbox_triage.core.interfaces import CategoryService, ResponseService
from inbox_triage.core.models import Categorization, EmailInput, TriageResult

from .category import KeywordCategoryService, categorize_text
from .delegate import resolve_delegate
from .drafter import DraftingService, compose_response
from .follow_up import should_draft_reply
from .heuristics import combined_text
from .lexicon import DEFAULT_LEXICON, Lexicon
from .llm import LLMClient, OllamaClient

LOGGER = logging.getLogger(__name__)

_CONTEXT_LABELS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Needs_Scheduling", ("meeting", "schedule", "calendar")),
    ("Needs_Answer", ("question", "?")),
    ("Finance", ("receipt", "invoice", "payment")),
)


def derive_labels(email: EmailInput, categorization: Categorization) -> tuple[str, ...]:
    """Return mailbox label names suggested by a categorisation."""
    labels = [categorization.category]
    if categorization.importance >= 8:
        labels.append("Priority")
    if categorization.importance <= 3:
        labels.append("Low_Priority")

    text = combined_text(email.subject, email.body)
    for label, keywords in _CONTEXT_LABELS:
        if any(keyword in text for keyword in keywords):
            labels.append(label)
    return tuple(labels)


class EmailTriageService:
    """Categorise an email, draft a reply when warranted, then suggest labels."""

    def __init__(
        self,
        category_service: CategoryService,
        response_service: ResponseService,
        *,
        lexicon: Lexicon = DEFAULT_LEXICON,
    ) -> None:
        self._category_service = category_service
        self._response_service = response_service
        self._lexicon = lexicon

    def triage(self, email: EmailInput) -> TriageResult:
        """Process one email through categorisation and drafting."""
        categorization = self._category_service.categorize(
            email.subject, email.body, email.sender
        )
        draft = None
        if should_draft_reply(categorization.category, categorization.importance):
            draft = self._response_service.generate_response(
                email.subject,
                email.body,
                email.sender,
                categorization.category,
                categorization.importance,
            )
        LOGGER.info(
            "Triaged %r from %s: %s (importance %s, draft=%s)",
            email.subject,
            email.sender or "unknown sender",
            categorization.category,
            categorization.importance,
            "none" if draft is None else draft.provider,
        )
        return TriageResult(
            email=email,
            categorization=categorization,
            draft=draft,
            labels=derive_labels(email, categorization),
        )

    async def triage_batch(self, emails: Sequence[EmailInput]) -> list[TriageResult]:
        """Triage emails concurrently, returning results in input order."""
        loop = asyncio.get_running_loop()
        tasks = [loop.run_in_executor(None, self.triage, email) for email in emails]
        results = await asyncio.gather(*tasks, return_exceptions=True)

        processed: list[TriageResult] = []
        for email, result in zip(emails, results):
            if isinstance(result, BaseException):
                LOGGER.error("Failed to triage %r: %s", email.subject, result)
                processed.append(self._rule_based(email))
            else:
                processed.append(result)
        return processed

    def _rule_based(self, email: EmailInput) -> TriageResult:
        categorization = categorize_text(
            email.subject, email.body, lexicon=self._lexicon
        )
        draft = None
        if should_draft_reply(categorization.category, categorization.importance):
            draft = compose_response(
                email, categorization.category, categorization.importance
            )
        return TriageResult(
            email=email,
            categorization=categorization,
            draft=draft,
            labels=derive_labels(email, categorization),
        )


def build_triage_service(
    settings: LlmSettings,
    *,
    lexicon: Lexicon = DEFAULT_LEXICON,
    client: LLMClient | None = None,
) -> EmailTriageService:
    """Wire services from settings, checking the LLM once at construction."""
    delegate = None
    if settings.enabled:
        delegate = resolve_delegate(client or OllamaClient(settings), lexicon=lexicon)
    return EmailTriageService(
        KeywordCategoryService(delegate, lexicon=lexicon),
        DraftingService(delegate),
        lexicon=lexicon,
    )


__all__ = ["EmailTriageService", "build_triage_service", "derive_labels"]
