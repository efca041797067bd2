"""Drafting service that produces reply drafts for categorised emails."""

from __future__ import annotations

import logging

from inbox_triage.core.interfaces import LanguageModelDelegate, ResponseService
from inbox_triage.core.models import EmailInput, Intent, ResponseDraft, Tone

from .follow_up import should_hold_for_review, suggest_actions
from .heuristics import combined_text, detect_intent, select_tone, sender_display_name
from .llm import DELEGATE_ERRORS

LOGGER = logging.getLogger(__name__)

GREETINGS: dict[Tone, str] = {
    Tone.PROFESSIONAL: "Hello {name},",
    Tone.FRIENDLY: "Hi {name}!",
    Tone.CONCISE: "Hi {name},",
}
CLOSINGS: dict[Tone, str] = {
    Tone.PROFESSIONAL: "Best regards,",
    Tone.FRIENDLY: "Best wishes,",
    Tone.CONCISE: "Regards,",
}

CATEGORY_TEMPLATES: dict[str, str] = {
    "Meeting_Ready_Lead": (
        "Thank you for your interest in scheduling a meeting. I'm happy to "
        "connect and discuss how we can help.\n\n"
        "How does your calendar look next week? I have availability on Tuesday "
        "and Thursday afternoon, or we could find another time that works for you."
    ),
    "Power": (
        "Thank you for reaching out. I appreciate your interest and would be "
        "happy to provide more information about our solutions.\n\n"
        "Would you be available for a brief call to discuss your specific needs "
        "in more detail?"
    ),
    "Interested": (
        "Thank you for your interest in our products and services. I'd be happy "
        "to provide more information.\n\n"
        "Would you like to schedule a demo or have a quick call to discuss how "
        "we can address your requirements?"
    ),
    "Question": (
        "Thank you for your question. I'm happy to help clarify and will follow "
        "up with the details shortly.\n\n"
        "Please let me know if you have any other questions in the meantime."
    ),
    "Obstacle": (
        "Thank you for bringing this issue to our attention. I understand how "
        "frustrating this must be.\n\n"
        "I'm looking into your concern now and will come back to you with next "
        "steps as soon as possible."
    ),
    "Not_Interested": (
        "Thank you for taking the time to respond to my outreach.\n\n"
        "I understand that this might not be the right time for your "
        "organization. Would it be alright if I reach out again in the future "
        "when your priorities may have changed?"
    ),
}
GENERIC_ACKNOWLEDGEMENT = (
    "Thank you for your email. I have received your message and will respond "
    "more comprehensively shortly."
)


class DraftingService(ResponseService):
    """Generate reply drafts using an LLM delegate with deterministic fallback."""

    def __init__(self, delegate: LanguageModelDelegate | None = None) -> None:
        """Initialise the service with an optional language-model delegate."""
        self._delegate = delegate

    def generate_response(
        self,
        subject: str | None,
        body: str | None,
        sender: str | None,
        category: str,
        importance: int,
    ) -> ResponseDraft:
        """Return a reply draft for the email; never raises on bad text."""
        email = EmailInput.of(subject, body, sender)

        if self._delegate is not None:
            tone = select_tone(category, importance)
            try:
                reply = self._delegate.generate_reply(
                    email.subject, email.body, email.sender, category, tone
                )
            except DELEGATE_ERRORS as exc:
                LOGGER.warning(
                    "LLM drafting failed for %r, using templates: %s",
                    email.subject,
                    exc,
                )
            else:
                if isinstance(reply, str) and reply.strip():
                    return ResponseDraft(
                        subject=reply_subject(email.subject),
                        body=reply.strip(),
                        tone=tone,
                        intent=detect_intent(combined_text(email.subject, email.body)),
                        hold_for_review=should_hold_for_review(category, importance),
                        suggested_actions=suggest_actions(category, importance),
                        provider=self._delegate.provider_id,
                        used_fallback=False,
                    )
                LOGGER.warning(
                    "LLM returned an empty reply for %r, using templates",
                    email.subject,
                )

        return compose_response(email, category, importance)


def compose_response(
    email: EmailInput, category: str, importance: int
) -> ResponseDraft:
    """Build a reply draft from keyword heuristics and templates alone."""
    text = combined_text(email.subject, email.body)
    tone = select_tone(category, importance)
    intent = detect_intent(text)

    greeting = GREETINGS[tone].format(name=sender_display_name(email.sender))
    paragraph = _intent_paragraph(intent, text, category)
    body = "\n\n".join([greeting, paragraph, CLOSINGS[tone]])

    return ResponseDraft(
        subject=reply_subject(email.subject),
        body=body,
        tone=tone,
        intent=intent,
        hold_for_review=should_hold_for_review(category, importance),
        suggested_actions=suggest_actions(category, importance),
        provider="deterministic",
        used_fallback=True,
    )


def reply_subject(subject: str) -> str:
    """Prefix ``Re:`` unless the subject already carries it."""
    stripped = subject.strip()
    if not stripped:
        return "Re: your message"
    if stripped.lower().startswith("re:"):
        return stripped
    return f"Re: {stripped}"


def _intent_paragraph(intent: Intent, text: str, category: str) -> str:
    if intent is Intent.ANSWER_QUESTION:
        return "Thank you for your question. " + _answer_detail(text)
    if intent is Intent.SCHEDULE_MEETING:
        return "I would be happy to schedule a meeting with you. " + _slot_detail(text)
    if intent is Intent.PROVIDE_UPDATE:
        return (
            "Thank you for checking in. I wanted to provide you with an update "
            "on our progress. We are currently on track with the timeline we "
            "discussed, and I will send a more detailed report by the end of "
            "the week."
        )
    if intent is Intent.URGENT_RESPONSE:
        return (
            "I am responding to your urgent message right away and have made it "
            "my top priority. " + _urgent_detail(text)
        )
    return CATEGORY_TEMPLATES.get(category, GENERIC_ACKNOWLEDGEMENT)


def _answer_detail(text: str) -> str:
    if "pricing" in text or "cost" in text:
        return (
            "Our pricing details can be found on our website, or I can schedule "
            "a call to discuss your needs and provide a customized quote."
        )
    if "feature" in text or "product" in text:
        return (
            "I would be happy to provide more details about the product features "
            "or set up a demonstration to show you how it works."
        )
    if "when" in text or "timeline" in text:
        return (
            "The timeline is approximately 2-3 weeks, and I can be more specific "
            "once you share a few more details about your requirements."
        )
    return (
        "I would like to address your question properly. Could we schedule a "
        "brief call to discuss it in more detail?"
    )


def _slot_detail(text: str) -> str:
    if "next week" in text:
        return (
            "I have availability next week on Tuesday at 10am or Thursday at 2pm "
            "(EST). Would either of those times work for you?"
        )
    if "tomorrow" in text or "today" in text:
        return "I have some availability tomorrow. Would 11am or 3pm (EST) work for you?"
    return (
        "I have availability this week on Wednesday at 11am or Friday at 2pm "
        "(EST), and I am open most of next week. Please let me know what works "
        "best for you."
    )


def _urgent_detail(text: str) -> str:
    if "issue" in text or "problem" in text:
        return (
            "I am looking into the issue now and will have more information for "
            "you within the hour."
        )
    return (
        "I am available to discuss this immediately. Please let me know if you "
        "would prefer a phone call or if this email is sufficient."
    )


__all__ = [
    "DraftingService",
    "compose_response",
    "reply_subject",
    "CATEGORY_TEMPLATES",
    "CLOSINGS",
    "GREETINGS",
]
