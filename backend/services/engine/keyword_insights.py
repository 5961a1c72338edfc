"""Keyword Insight Engine: per-keyword strength and per-cluster coverage.

Strength is a pure function of (resume_count, jd_count):

    jd_count == 0                              -> not reported
    resume_count == 0                          -> Missing
    resume_count < ceil(jd_count / WEAK_RATIO) -> Weak
    otherwise                                  -> Strong

With WEAK_RATIO = 3 a keyword is Weak when the resume mentions it fewer
than a third as often as the job description does: jd_count 3 needs 1
resume mention, 4-6 need 2, 7-9 need 3.

Match type compares raw counts: Missing at zero resume mentions, Exact when
the resume mentions the keyword at least as often as the job description,
otherwise Partial.

Coverage per cluster: Full if all Strong, None if all Missing, else Partial.
"""

import logging
import math

from models.schemas.keyword_insight import (
    Coverage,
    KeywordEntry,
    KeywordInsight,
    KeywordOccurrence,
    MatchType,
    Strength,
)

logger = logging.getLogger(__name__)

WEAK_RATIO = 3
DEFAULT_CLUSTER = "Other"


def weak_threshold(jd_count: int) -> int:
    """Minimum resume mentions for a Strong rating."""
    return math.ceil(jd_count / WEAK_RATIO)


def classify_strength(resume_count: int, jd_count: int) -> Strength | None:
    """Classify one keyword. None means it is not job-relevant (jd_count == 0)."""
    if jd_count <= 0:
        return None
    if resume_count <= 0:
        return Strength.MISSING
    if resume_count < weak_threshold(jd_count):
        return Strength.WEAK
    return Strength.STRONG


def classify_match_type(resume_count: int, jd_count: int) -> MatchType:
    if resume_count <= 0:
        return MatchType.MISSING
    if resume_count >= jd_count:
        return MatchType.EXACT
    return MatchType.PARTIAL


def cluster_coverage(strengths: list[Strength]) -> Coverage:
    if strengths and all(s == Strength.STRONG for s in strengths):
        return Coverage.FULL
    if all(s == Strength.MISSING for s in strengths):
        return Coverage.NONE
    return Coverage.PARTIAL


def build_insight(occurrences: list[KeywordOccurrence]) -> KeywordInsight:
    """Classify occurrence rows and aggregate them into a KeywordInsight.

    Rows keep their input order. A repeated word (case-insensitive) keeps
    its first job-relevant row; a blank cluster becomes "Other".
    """
    keywords: list[KeywordEntry] = []
    seen: set[str] = set()
    for occ in occurrences:
        word = occ.word.strip()
        key = word.casefold()
        if not key or key in seen:
            continue

        resume_count = max(0, occ.resume_count)
        jd_count = max(0, occ.jd_count)
        strength = classify_strength(resume_count, jd_count)
        if strength is None:
            continue
        seen.add(key)

        keywords.append(KeywordEntry(
            word=word,
            cluster=occ.cluster.strip() or DEFAULT_CLUSTER,
            strength=strength,
            match_type=classify_match_type(resume_count, jd_count),
            resume_count=resume_count,
            jd_count=jd_count,
        ))

    by_cluster: dict[str, list[Strength]] = {}
    for kw in keywords:
        by_cluster.setdefault(kw.cluster, []).append(kw.strength)

    clusters = sorted(by_cluster)
    coverage = {c: cluster_coverage(by_cluster[c]) for c in clusters}

    logger.debug(
        "Keyword insight: %d/%d keywords reported across %d clusters",
        len(keywords), len(occurrences), len(clusters),
    )
    return KeywordInsight(keywords=keywords, clusters=clusters, coverage=coverage)
