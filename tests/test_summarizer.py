"""Tests for body summaries."""

from __future__ import annotations

from inbox_triage.intelligence.summarizer import SUMMARY_LIMIT, summarize_body


def test_short_body_returned_verbatim() -> None:
    body = "Can we talk tomorrow?"

    assert summarize_body(body) == body
    assert summarize_body("") == ""


def test_body_at_limit_returned_verbatim() -> None:
    body = "a" * SUMMARY_LIMIT

    assert summarize_body(body) == body


def test_long_body_uses_first_and_last_sentence() -> None:
    filler = " ".join(["More context here."] * 20)
    body = f"Quick intro. {filler} Please reply soon."

    assert summarize_body(body) == "Quick intro... Please reply soon"


def test_long_body_without_sentences_is_truncated() -> None:
    body = "word " * 100

    summary = summarize_body(body)

    assert summary == body[:SUMMARY_LIMIT] + "..."


def test_long_sentences_fall_back_to_truncation() -> None:
    first = "x" * 200
    last = "y" * 200
    body = f"{first}. middle. {last}"

    assert summarize_body(body) == body[:SUMMARY_LIMIT] + "..."
