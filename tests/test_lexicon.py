"""Tests for lexicon construction and validation."""

from __future__ import annotations

import pytest

from inbox_triage.intelligence.lexicon import (
    DEFAULT_LEXICON,
    CategoryEntry,
    Lexicon,
)


def test_terms_are_lowercased() -> None:
    entry = CategoryEntry(name="Deals", terms=("Contract", "", "RFP"), priority=4)

    assert entry.terms == ("contract", "rfp")


@pytest.mark.parametrize("priority", [0, 11, -3])
def test_priority_outside_range_rejected(priority: int) -> None:
    with pytest.raises(ValueError):
        CategoryEntry(name="Bad", terms=("x",), priority=priority)


def test_duplicate_categories_rejected() -> None:
    entry = CategoryEntry(name="Dup", terms=("x",), priority=3)

    with pytest.raises(ValueError):
        Lexicon(categories=(entry, entry))


def test_default_lexicon_shape() -> None:
    assert DEFAULT_LEXICON.names[:2] == ("Meeting_Ready_Lead", "Power")
    assert DEFAULT_LEXICON.default_category == "Other"
    assert DEFAULT_LEXICON.get("Power") is not None
    assert DEFAULT_LEXICON.get("Other") is None
    assert all(1 <= entry.priority <= 10 for entry in DEFAULT_LEXICON.categories)


def test_lexicon_is_immutable() -> None:
    with pytest.raises(AttributeError):
        DEFAULT_LEXICON.default_category = "Misc"  # type: ignore[misc]
