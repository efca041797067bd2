"""Short excerpts of email bodies for list views."""

from __future__ import annotations

import re

SUMMARY_LIMIT = 250

_SENTENCE_SPLIT = re.compile(r"[.!?]")


def summarize_body(body: str, *, limit: int = SUMMARY_LIMIT) -> str:
    """Return a short excerpt of ``body``.

    Bodies up to ``limit`` characters are returned verbatim. Longer bodies
    with more than two sentences are condensed to ``"first... last"`` when
    that fits; anything else is truncated to ``limit`` characters followed by
    an ellipsis.
    """
    if len(body) <= limit:
        return body

    sentences = [part.strip() for part in _SENTENCE_SPLIT.split(body)]
    sentences = [sentence for sentence in sentences if sentence]
    if len(sentences) > 2:
        first, last = sentences[0], sentences[-1]
        if len(first) + len(last) < limit:
            return f"{first}... {last}"

    return f"{body[:limit]}..."


__all__ = ["summarize_body", "SUMMARY_LIMIT"]
