"""Keyword Insight Engine input rows and output report."""

from enum import Enum

from models.schemas.base import CamelModel, FrozenCamelModel


class Strength(str, Enum):
    STRONG = "Strong"
    WEAK = "Weak"
    MISSING = "Missing"


class MatchType(str, Enum):
    EXACT = "Exact"
    PARTIAL = "Partial"
    MISSING = "Missing"


class Coverage(str, Enum):
    FULL = "Full"
    PARTIAL = "Partial"
    NONE = "None"


class KeywordCandidate(CamelModel):
    """A keyword with its cluster but no counts yet."""
    word: str
    cluster: str = ""


class KeywordOccurrence(CamelModel):
    """Occurrence counts for one keyword, from the oracle or the term counter."""
    word: str
    cluster: str = ""
    resume_count: int = 0
    jd_count: int = 0


class KeywordEntry(FrozenCamelModel):
    word: str
    cluster: str
    strength: Strength
    match_type: MatchType
    resume_count: int = 0
    jd_count: int = 0


class KeywordInsight(FrozenCamelModel):
    """Per-keyword strengths plus per-cluster coverage.

    Every keyword's cluster is listed in ``clusters`` (sorted, unique) and
    ``coverage`` holds exactly one entry per cluster.
    """
    keywords: list[KeywordEntry] = []
    clusters: list[str] = []
    coverage: dict[str, Coverage] = {}
