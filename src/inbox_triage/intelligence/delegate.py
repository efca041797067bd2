"""Language-model delegate that categorises and drafts via an LLM client."""

from __future__ import annotations

import json
import logging

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from inbox_triage.core.interfaces import LanguageModelDelegate
from inbox_triage.core.models import Categorization, Tone

from .lexicon import DEFAULT_LEXICON, Lexicon
from .llm import LLMClient, LLMError
from .priority import BASELINE_IMPORTANCE, clamp_importance
from .prompts import (
    build_categorization_prompt,
    build_reply_prompt,
    build_reply_system_prompt,
)

LOGGER = logging.getLogger(__name__)

NO_SUMMARY = "No summary available."


class CategorizationPayload(BaseModel):
    """Shape of the JSON object the model is asked to return."""

    model_config = ConfigDict(extra="ignore")

    category: str | None = None
    importance: float = Field(default=BASELINE_IMPORTANCE, allow_inf_nan=False)
    summary: str | None = None

    @field_validator("importance", mode="before")
    @classmethod
    def _reject_booleans(cls, value: object) -> object:
        if isinstance(value, bool):
            raise ValueError("importance must be a number")
        if value is None:
            return BASELINE_IMPORTANCE
        return value


class OllamaDelegate(LanguageModelDelegate):
    """Prompt an LLM client and parse its output into core models."""

    def __init__(self, client: LLMClient, *, lexicon: Lexicon = DEFAULT_LEXICON) -> None:
        self._client = client
        self._lexicon = lexicon

    @property
    def provider_id(self) -> str:
        return self._client.provider_id

    def categorize_email(
        self, subject: str, body: str, sender: str
    ) -> Categorization:
        """Ask the model for a categorisation and validate its JSON reply."""
        prompt = build_categorization_prompt(
            subject, body, sender, categories=self._lexicon.names
        )
        raw_output = self._client.generate(prompt)
        payload = parse_categorization(raw_output)

        category = (payload.category or "").strip() or self._lexicon.default_category
        summary = (payload.summary or "").strip() or NO_SUMMARY
        return Categorization(
            category=category,
            importance=clamp_importance(payload.importance),
            summary=summary,
            provider=self._client.provider_id,
            used_fallback=False,
        )

    def generate_reply(
        self,
        subject: str,
        body: str,
        sender: str,
        category: str,
        tone: Tone,
    ) -> str:
        """Ask the model for a free-text reply body."""
        system = build_reply_system_prompt(category, tone)
        prompt = build_reply_prompt(subject, body, sender)
        reply = self._client.generate(prompt, system=system).strip()
        if not reply:
            raise LLMError("LLM returned an empty reply")
        return reply


def parse_categorization(raw: str) -> CategorizationPayload:
    """Parse model output into a payload, raising :class:`LLMError` on mismatch."""
    text = _strip_code_fences(raw)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise LLMError("Categorization output was not valid JSON") from exc
    if not isinstance(data, dict):
        raise LLMError("Categorization output was not a JSON object")
    try:
        return CategorizationPayload.model_validate(data)
    except ValidationError as exc:
        raise LLMError(f"Categorization output had an unexpected shape: {exc}") from exc


def resolve_delegate(
    client: LLMClient | None, *, lexicon: Lexicon = DEFAULT_LEXICON
) -> OllamaDelegate | None:
    """Return a delegate for ``client`` when it is reachable, else ``None``."""
    if client is None:
        return None
    if not client.is_available():
        LOGGER.warning(
            "LLM provider %s is unreachable; using keyword rules", client.provider_id
        )
        return None
    return OllamaDelegate(client, lexicon=lexicon)


def _strip_code_fences(raw: str) -> str:
    text = raw.strip()
    if text.startswith("```"):
        text = text.strip("`").strip()
        if text.lower().startswith("json"):
            text = text[4:].strip()
    return text


__all__ = [
    "CategorizationPayload",
    "OllamaDelegate",
    "parse_categorization",
    "resolve_delegate",
]
