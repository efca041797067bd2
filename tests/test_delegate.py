"""Tests for the LLM-backed delegate."""

from __future__ import annotations

import pytest

from inbox_triage.core.models import Tone
from inbox_triage.intelligence.delegate import (
    OllamaDelegate,
    parse_categorization,
    resolve_delegate,
)
from inbox_triage.intelligence.llm import LLMError


class StubLLM:
    """Stub LLM client returning predefined payloads."""

    def __init__(self, response: str = "", *, available: bool = True) -> None:
        self.response = response
        self.available = available
        self.prompts: list[tuple[str, str | None]] = []

    @property
    def provider_id(self) -> str:
        return "stub-model"

    def generate(self, prompt: str, *, system: str | None = None) -> str:
        self.prompts.append((prompt, system))
        return self.response

    def is_available(self) -> bool:
        return self.available


def test_categorize_email_parses_json() -> None:
    llm = StubLLM('{"category": "Power", "importance": 9, "summary": "CEO intro"}')

    result = OllamaDelegate(llm).categorize_email("Intro", "Hello", "ceo@x.io")

    assert result.category == "Power"
    assert result.importance == 9
    assert result.summary == "CEO intro"
    assert result.provider == "stub-model"
    assert not result.used_fallback
    prompt, system = llm.prompts[0]
    assert "Meeting_Ready_Lead" in prompt
    assert "Subject: Intro" in prompt
    assert system is None


def test_categorize_email_clamps_and_defaults() -> None:
    llm = StubLLM('```json\n{"importance": 14.2}\n```')

    result = OllamaDelegate(llm).categorize_email("", "", "")

    assert result.category == "Other"
    assert result.importance == 10
    assert result.summary == "No summary available."


@pytest.mark.parametrize(
    "raw",
    [
        "Sure! Here is the category: Power",
        "[1, 2, 3]",
        '{"importance": "very"}',
        '{"importance": true}',
        '{"category": ["Power"]}',
    ],
)
def test_parse_categorization_rejects_bad_shapes(raw: str) -> None:
    with pytest.raises(LLMError):
        parse_categorization(raw)


def test_parse_categorization_accepts_numeric_strings() -> None:
    assert parse_categorization('{"importance": "7"}').importance == 7


def test_generate_reply_sends_tone_and_category() -> None:
    llm = StubLLM("  Dear Ann,\n\nThanks!\n\nBest regards,  ")

    reply = OllamaDelegate(llm).generate_reply(
        "Pricing", "What does it cost?", "Ann", "Question", Tone.FRIENDLY
    )

    assert reply == "Dear Ann,\n\nThanks!\n\nBest regards,"
    prompt, system = llm.prompts[0]
    assert system is not None
    assert "friendly" in system
    assert '"Question"' in system
    assert "What does it cost?" in prompt


def test_generate_reply_rejects_empty_output() -> None:
    with pytest.raises(LLMError):
        OllamaDelegate(StubLLM("   ")).generate_reply(
            "s", "b", "x", "Other", Tone.CONCISE
        )


def test_resolve_delegate_variants() -> None:
    assert resolve_delegate(None) is None
    assert resolve_delegate(StubLLM(available=False)) is None
    assert isinstance(resolve_delegate(StubLLM()), OllamaDelegate)
