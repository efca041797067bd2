"""Categorisation, importance scoring, and reply drafting."""

from .category import KeywordCategoryService, categorize_text
from .delegate import OllamaDelegate, resolve_delegate
from .drafter import DraftingService, compose_response
from .lexicon import DEFAULT_LEXICON, CategoryEntry, ImportanceKeywords, Lexicon
from .llm import LLMClient, LLMError, OllamaClient
from .pipeline import EmailTriageService, build_triage_service, derive_labels
from .priority import score_importance
from .summarizer import summarize_body

__all__ = [
    "LLMClient",
    "LLMError",
    "OllamaClient",
    "OllamaDelegate",
    "resolve_delegate",
    "KeywordCategoryService",
    "categorize_text",
    "DraftingService",
    "compose_response",
    "DEFAULT_LEXICON",
    "CategoryEntry",
    "ImportanceKeywords",
    "Lexicon",
    "EmailTriageService",
    "build_triage_service",
    "derive_labels",
    "score_importance",
    "summarize_body",
]
