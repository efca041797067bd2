"""Tests for the drafting service implementation."""

from __future__ import annotations

import pytest

from inbox_triage.core.models import Categorization, EmailInput, Intent, Tone
from inbox_triage.intelligence.drafter import (
    CLOSINGS,
    DraftingService,
    compose_response,
    reply_subject,
)
from inbox_triage.intelligence.llm import LLMError


class StubDelegate:
    """Delegate stub returning a predetermined reply."""

    provider_id = "stub-llm"

    def __init__(self, reply: str) -> None:
        self.reply = reply
        self.last_call: tuple[str, Tone] | None = None

    def categorize_email(self, subject: str, body: str, sender: str) -> Categorization:
        raise AssertionError("not used")

    def generate_reply(
        self, subject: str, body: str, sender: str, category: str, tone: Tone
    ) -> str:
        self.last_call = (category, tone)
        return self.reply


class FailingDelegate:
    """Delegate stub that always raises an error."""

    provider_id = "failing-llm"

    def categorize_email(self, subject: str, body: str, sender: str) -> Categorization:
        raise LLMError("failure")

    def generate_reply(
        self, subject: str, body: str, sender: str, category: str, tone: Tone
    ) -> str:
        raise LLMError("failure")


def _email(subject: str = "Project", body: str = "", sender: str = "") -> EmailInput:
    return EmailInput(subject=subject, body=body, sender=sender)


def test_generate_response_uses_delegate_output() -> None:
    delegate = StubDelegate("  Thanks, talk soon!  ")
    service = DraftingService(delegate)

    draft = service.generate_response(
        "Intro", "Can we meet?", "Ann <ann@x.io>", "Power", 9
    )

    assert draft.body == "Thanks, talk soon!"
    assert draft.provider == "stub-llm"
    assert not draft.used_fallback
    assert draft.tone is Tone.PROFESSIONAL
    assert delegate.last_call == ("Power", Tone.PROFESSIONAL)
    assert draft.hold_for_review
    assert draft.suggested_actions == (
        "Research company",
        "Prepare personalized proposal",
        "Alert sales manager",
    )


def test_generate_response_falls_back_when_delegate_fails() -> None:
    args = ("Quick question", "What is the pricing?", "Bo <bo@x.io>", "Question", 6)

    with_failing = DraftingService(FailingDelegate()).generate_response(*args)
    without = DraftingService().generate_response(*args)

    assert with_failing == without
    assert with_failing.provider == "deterministic"
    assert with_failing.used_fallback


@pytest.mark.parametrize(
    ("category", "importance", "tone"),
    [
        ("Meeting_Ready_Lead", 3, Tone.PROFESSIONAL),
        ("Power", 1, Tone.PROFESSIONAL),
        ("Spam", 8, Tone.PROFESSIONAL),
        ("Interested", 7, Tone.FRIENDLY),
        ("Question", 2, Tone.FRIENDLY),
        ("Other", 7, Tone.CONCISE),
    ],
)
def test_tone_selection(category: str, importance: int, tone: Tone) -> None:
    draft = compose_response(_email(), category, importance)

    assert draft.tone is tone
    assert draft.body.endswith(CLOSINGS[tone])


@pytest.mark.parametrize(
    ("text", "intent"),
    [
        ("Are you free? Let's meet", Intent.ANSWER_QUESTION),
        ("Let's meet on Monday", Intent.SCHEDULE_MEETING),
        ("Please schedule the demo", Intent.SCHEDULE_MEETING),
        ("Status of the order", Intent.PROVIDE_UPDATE),
        ("This is urgent", Intent.URGENT_RESPONSE),
        ("Thanks for everything", Intent.ACKNOWLEDGE),
    ],
)
def test_intent_detection(text: str, intent: Intent) -> None:
    assert compose_response(_email(body=text), "Other", 5).intent is intent


def test_answer_question_sub_branch() -> None:
    draft = compose_response(_email(body="What does it cost?"), "Question", 5)

    assert "pricing details" in draft.body


def test_schedule_meeting_next_week() -> None:
    draft = compose_response(_email(body="Can we meet next week"), "Other", 5)

    assert draft.intent is Intent.SCHEDULE_MEETING
    assert "Tuesday at 10am" in draft.body


def test_acknowledge_uses_category_template() -> None:
    draft = compose_response(_email(body="Thanks a lot"), "Not_Interested", 2)

    assert "reach out again in the future" in draft.body
    assert not draft.hold_for_review
    assert draft.suggested_actions == (
        "Update CRM status",
        "Schedule follow-up in 3 months",
    )


def test_greeting_uses_display_name() -> None:
    draft = compose_response(
        _email(sender='"Jane Doe" <jane@example.com>'), "Power", 5
    )

    assert draft.body.startswith("Hello Jane Doe,")


def test_greeting_uses_local_part_for_bare_address() -> None:
    draft = compose_response(_email(sender="sam@example.com"), "Other", 2)

    assert draft.body.startswith("Hi sam,")


def test_greeting_without_sender() -> None:
    assert compose_response(_email(), "Other", 2).body.startswith("Hi there,")


def test_reply_subject() -> None:
    assert reply_subject("Pricing") == "Re: Pricing"
    assert reply_subject("RE: Pricing") == "RE: Pricing"
    assert reply_subject("  ") == "Re: your message"


def test_urgent_contract_draft_held_for_review() -> None:
    draft = DraftingService().generate_response(
        "Urgent: contract deadline",
        "We need to sign the partnership contract by Friday, asap",
        "Dana <dana@example.com>",
        "Interested",
        10,
    )

    assert draft.hold_for_review
    assert draft.intent is Intent.URGENT_RESPONSE
    assert draft.tone is Tone.PROFESSIONAL


@pytest.mark.parametrize(
    ("category", "importance", "expected"),
    [
        ("Other", 4, False),
        ("Other", 5, True),
        ("Other", 8, True),
        ("Obstacle", 1, True),
        ("Meeting_Ready_Lead", 2, True),
        ("Spam", 1, False),
    ],
)
def test_hold_for_review(category: str, importance: int, expected: bool) -> None:
    assert compose_response(_email(), category, importance).hold_for_review is expected


@pytest.mark.parametrize("importance", range(1, 11))
def test_body_never_empty(importance: int) -> None:
    draft = DraftingService().generate_response(None, None, None, "Other", importance)

    assert draft.body.strip()
    assert draft.tone in set(Tone)


@pytest.mark.parametrize("reply", ["", "   ", "\n\t "])
def test_blank_delegate_reply_uses_templates(reply: str) -> None:
    args = ("Quick question", "What is the pricing?", "Bo <bo@x.io>", "Question", 6)

    draft = DraftingService(StubDelegate(reply)).generate_response(*args)

    assert draft == DraftingService().generate_response(*args)
    assert draft.body.strip()
    assert draft.provider == "deterministic"
    assert draft.used_fallback


@pytest.mark.parametrize("error", [TimeoutError("slow"), OSError("reset")])
def test_builtin_delegate_errors_use_templates(error: Exception) -> None:
    class RaisingDelegate(FailingDelegate):
        def generate_reply(
            self, subject: str, body: str, sender: str, category: str, tone: Tone
        ) -> str:
            raise error

    draft = DraftingService(RaisingDelegate()).generate_response(
        "Project", "", "", "Other", 5
    )

    assert draft.provider == "deterministic"
    assert draft.used_fallback
