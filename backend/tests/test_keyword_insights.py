"""Tests for keyword strength classification and cluster coverage."""

import pytest

from models.schemas.keyword_insight import Coverage, KeywordOccurrence, MatchType, Strength
from services.engine.keyword_insights import (
    DEFAULT_CLUSTER,
    build_insight,
    classify_match_type,
    classify_strength,
    cluster_coverage,
    weak_threshold,
)


def _occ(word, resume_count, jd_count, cluster="Tech"):
    return KeywordOccurrence(word=word, cluster=cluster, resume_count=resume_count, jd_count=jd_count)


@pytest.mark.parametrize("jd_count, threshold", [
    (1, 1), (2, 1), (3, 1), (4, 2), (6, 2), (7, 3), (9, 3), (10, 4),
])
def test_weak_threshold(jd_count, threshold):
    assert weak_threshold(jd_count) == threshold


@pytest.mark.parametrize("resume_count, jd_count, expected", [
    (0, 5, Strength.MISSING),
    (4, 3, Strength.STRONG),
    (1, 3, Strength.STRONG),
    (1, 4, Strength.WEAK),
    (2, 4, Strength.STRONG),
    (2, 7, Strength.WEAK),
    (3, 7, Strength.STRONG),
    (1, 1, Strength.STRONG),
    (0, 1, Strength.MISSING),
    (5, 0, None),
    (0, 0, None),
])
def test_classify_strength(resume_count, jd_count, expected):
    assert classify_strength(resume_count, jd_count) == expected


@pytest.mark.parametrize("resume_count, jd_count, expected", [
    (0, 5, MatchType.MISSING),
    (0, 0, MatchType.MISSING),
    (3, 3, MatchType.EXACT),
    (4, 3, MatchType.EXACT),
    (2, 0, MatchType.EXACT),
    (2, 3, MatchType.PARTIAL),
    (1, 7, MatchType.PARTIAL),
])
def test_classify_match_type(resume_count, jd_count, expected):
    assert classify_match_type(resume_count, jd_count) == expected


def test_match_type_reported_with_strength():
    insight = build_insight([_occ("AWS", 1, 2), _occ("Go", 2, 2), _occ("Rust", 0, 1)])
    assert [(kw.word, kw.strength, kw.match_type) for kw in insight.keywords] == [
        ("AWS", Strength.STRONG, MatchType.PARTIAL),
        ("Go", Strength.STRONG, MatchType.EXACT),
        ("Rust", Strength.MISSING, MatchType.MISSING),
    ]


def test_cluster_coverage():
    assert cluster_coverage([Strength.STRONG, Strength.STRONG]) == Coverage.FULL
    assert cluster_coverage([Strength.MISSING, Strength.MISSING]) == Coverage.NONE
    assert cluster_coverage([Strength.STRONG, Strength.MISSING]) == Coverage.PARTIAL
    assert cluster_coverage([Strength.WEAK]) == Coverage.PARTIAL
    assert cluster_coverage([Strength.WEAK, Strength.MISSING]) == Coverage.PARTIAL


def test_missing_and_strong_keywords():
    insight = build_insight([_occ("Kubernetes", 0, 5), _occ("Python", 4, 3)])
    strengths = {kw.word: kw.strength for kw in insight.keywords}
    assert strengths == {"Kubernetes": Strength.MISSING, "Python": Strength.STRONG}


def test_mixed_cluster_is_partial():
    insight = build_insight([
        _occ("AWS", 3, 3, "DevOps"),
        _occ("Terraform", 0, 2, "DevOps"),
    ])
    assert insight.clusters == ["DevOps"]
    assert insight.coverage == {"DevOps": Coverage.PARTIAL}


def test_keywords_absent_from_job_are_excluded():
    insight = build_insight([_occ("Haskell", 3, 0, "Languages"), _occ("Go", 2, 2, "Languages")])
    assert [kw.word for kw in insight.keywords] == ["Go"]
    assert insight.coverage == {"Languages": Coverage.FULL}


def test_cluster_with_only_excluded_keywords_is_not_listed():
    insight = build_insight([_occ("Haskell", 3, 0, "Languages"), _occ("AWS", 0, 2, "Cloud")])
    assert insight.clusters == ["Cloud"]
    assert insight.coverage == {"Cloud": Coverage.NONE}


def test_clusters_sorted_and_coverage_complete():
    insight = build_insight([
        _occ("React", 2, 2, "Frontend"),
        _occ("AWS", 0, 4, "Cloud"),
        _occ("Teamwork", 1, 1, "Soft Skills"),
        _occ("CSS", 0, 1, "Frontend"),
    ])
    assert insight.clusters == ["Cloud", "Frontend", "Soft Skills"]
    assert set(insight.coverage) == set(insight.clusters)
    assert {kw.cluster for kw in insight.keywords} == set(insight.clusters)
    assert insight.coverage["Frontend"] == Coverage.PARTIAL


def test_blank_cluster_defaults():
    insight = build_insight([_occ("Python", 1, 1, cluster="  ")])
    assert insight.keywords[0].cluster == DEFAULT_CLUSTER
    assert insight.clusters == [DEFAULT_CLUSTER]


def test_repeated_word_keeps_first_row():
    insight = build_insight([_occ("Python", 0, 3), _occ("python", 5, 3)])
    assert len(insight.keywords) == 1
    assert insight.keywords[0].strength == Strength.MISSING


def test_repeated_word_skips_rows_absent_from_job():
    insight = build_insight([_occ("python", 0, 0), _occ("Python", 2, 3)])
    assert [kw.word for kw in insight.keywords] == ["Python"]
    assert insight.keywords[0].strength == Strength.STRONG


def test_empty_input():
    insight = build_insight([])
    assert insight.keywords == []
    assert insight.clusters == []
    assert insight.coverage == {}


def test_same_input_same_output():
    rows = [_occ("AWS", 1, 4, "Cloud"), _occ("Go", 2, 2, "Languages")]
    assert build_insight(rows) == build_insight(list(rows))


def test_serializes_enum_values():
    data = build_insight([_occ("AWS", 0, 2, "Cloud")]).model_dump(by_alias=True, mode="json")
    assert data["keywords"][0] == {
        "word": "AWS", "cluster": "Cloud", "strength": "Missing", "matchType": "Missing",
        "resumeCount": 0, "jdCount": 2,
    }
    assert data["coverage"] == {"Cloud": "None"}
