"""Static keyword tables driving rule-based categorisation and scoring."""

from __future__ import annotations

from dataclasses import dataclass, field

OTHER_CATEGORY = "Other"


@dataclass(frozen=True, slots=True)
class CategoryEntry:
    """A category with its trigger terms and priority weight (1-10)."""

    name: str
    terms: tuple[str, ...]
    priority: int

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Category name must not be empty")
        if not 1 <= self.priority <= 10:
            msg = f"Priority for {self.name!r} must be within 1-10, got {self.priority}"
            raise ValueError(msg)
        object.__setattr__(
            self, "terms", tuple(term.lower() for term in self.terms if term)
        )


@dataclass(frozen=True, slots=True)
class ImportanceKeywords:
    """Keyword groups nudging the importance score up or down."""

    urgent: tuple[str, ...] = ()
    high_value: tuple[str, ...] = ()
    low_priority: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Lexicon:
    """Immutable configuration shared by the categoriser and drafter."""

    categories: tuple[CategoryEntry, ...]
    importance: ImportanceKeywords = field(default_factory=ImportanceKeywords)
    default_category: str = OTHER_CATEGORY

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for entry in self.categories:
            if entry.name in seen:
                raise ValueError(f"Duplicate category {entry.name!r} in lexicon")
            seen.add(entry.name)

    def get(self, name: str) -> CategoryEntry | None:
        """Return the entry registered under ``name`` if any."""
        for entry in self.categories:
            if entry.name == name:
                return entry
        return None

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(entry.name for entry in self.categories)


DEFAULT_LEXICON = Lexicon(
    categories=(
        CategoryEntry(
            name="Meeting_Ready_Lead",
            terms=(
                "meeting",
                "schedule",
                "call",
                "discuss",
                "appointment",
                "availability",
                "calendar",
                "sync",
                "connect",
                "zoom",
                "teams",
                "meet",
            ),
            priority=8,
        ),
        CategoryEntry(
            name="Power",
            terms=(
                "decision maker",
                "ceo",
                "chief",
                "director",
                "vp",
                "vice president",
                "head of",
                "budget",
                "authority",
                "approve",
                "leadership",
            ),
            priority=9,
        ),
        CategoryEntry(
            name="Interested",
            terms=(
                "interested",
                "tell me more",
                "learn more",
                "demo",
                "pricing",
                "consider",
                "evaluation",
                "trial",
                "quote",
                "proposal",
                "partnership",
                "contract",
            ),
            priority=7,
        ),
        CategoryEntry(
            name="Obstacle",
            terms=(
                "problem",
                "issue",
                "concern",
                "challenge",
                "difficult",
                "obstacle",
                "not working",
                "error",
                "bug",
                "broken",
                "failed",
            ),
            priority=6,
        ),
        CategoryEntry(
            name="Not_Interested",
            terms=(
                "not interested",
                "unsubscribe",
                "remove",
                "stop",
                "no thanks",
                "pass",
                "decline",
                "not now",
                "not at this time",
            ),
            priority=3,
        ),
        CategoryEntry(
            name="OOO",
            terms=(
                "out of office",
                "vacation",
                "holiday",
                "leave",
                "away",
                "return on",
                "back on",
                "unavailable",
                "absence",
                "auto-reply",
            ),
            priority=2,
        ),
        CategoryEntry(
            name="Question",
            terms=(
                "question",
                "how do",
                "can you",
                "want to know",
                "wondering",
                "clarify",
                "explain",
                "what is",
                "how is",
                "help me understand",
            ),
            priority=5,
        ),
        CategoryEntry(
            name="Newsletter",
            terms=(
                "newsletter",
                "weekly update",
                "monthly update",
                "bulletin",
                "roundup",
                "digest",
            ),
            priority=2,
        ),
        CategoryEntry(
            name="Spam",
            terms=(
                "viagra",
                "lottery",
                "winner",
                "inheritance",
                "prince",
                "bank transfer",
                "urgent help",
                "cryptocurrency",
                "million dollars",
            ),
            priority=1,
        ),
    ),
    importance=ImportanceKeywords(
        urgent=(
            "urgent",
            "asap",
            "immediately",
            "emergency",
            "deadline",
            "critical",
            "important",
            "priority",
            "time-sensitive",
        ),
        high_value=(
            "opportunity",
            "revenue",
            "partnership",
            "contract",
            "deal",
            "sign",
            "purchase",
            "decision",
            "agreement",
            "interested",
        ),
        low_priority=(
            "newsletter",
            "subscription",
            "update",
            "notification",
            "fyi",
            "marketing",
            "announcement",
            "promotion",
            "offer",
        ),
    ),
)


__all__ = [
    "CategoryEntry",
    "ImportanceKeywords",
    "Lexicon",
    "DEFAULT_LEXICON",
    "OTHER_CATEGORY",
]
