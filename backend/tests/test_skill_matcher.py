"""Tests for exact, case-insensitive skill matching."""

import pytest

from models.schemas.job_description import JobDescription
from models.schemas.resume import Resume, SkillSet
from services.engine.skill_matcher import compute_skill_score, job_skills, match_skills


def _resume(technical=(), soft=()):
    return Resume(skills=SkillSet(technical=list(technical), soft=list(soft)))


def _job(required=(), preferred=()):
    return JobDescription(required_skills=list(required), preferred_skills=list(preferred))


def test_match_partitions_required_and_preferred():
    result = match_skills(
        _resume(["React", "Node.js"]),
        _job(["React", "AWS"], ["Docker"]),
    )
    assert result.matched_skills == ["React"]
    assert result.missing_skills == ["AWS", "Docker"]
    assert result.job_skill_count == 3
    assert result.skill_score == 33


def test_job_without_skills_scores_zero():
    result = match_skills(_resume(["React"]), _job())
    assert result.matched_skills == []
    assert result.missing_skills == []
    assert result.job_skill_count == 0
    assert result.skill_score == 0


def test_matching_ignores_case_and_whitespace():
    result = match_skills(_resume(["python ", "DOCKER"]), _job(["Python"], ["docker"]))
    assert result.matched_skills == ["Python", "docker"]
    assert result.skill_score == 100


def test_soft_skills_count_as_resume_skills():
    result = match_skills(_resume(soft=["Communication"]), _job(["communication", "SQL"]))
    assert result.matched_skills == ["communication"]
    assert result.skill_score == 50


def test_no_synonym_expansion():
    result = match_skills(_resume(["JS", "k8s"]), _job(["JavaScript", "Kubernetes"]))
    assert result.matched_skills == []
    assert result.skill_score == 0


def test_skill_listed_as_required_and_preferred_counts_once():
    job = _job(["AWS", "Go"], ["aws", "Rust"])
    assert job_skills(job) == ["AWS", "Go", "Rust"]
    result = match_skills(_resume(["AWS"]), job)
    assert result.matched_skills == ["AWS"]
    assert result.missing_skills == ["Go", "Rust"]
    assert result.skill_score == 33


def test_matched_and_missing_are_disjoint_and_cover_job_skills():
    job = _job(["A", "B", "C", "D"], ["E", "b"])
    result = match_skills(_resume(["a", "c", "z"]), job)
    matched = {s.casefold() for s in result.matched_skills}
    missing = {s.casefold() for s in result.missing_skills}
    assert matched.isdisjoint(missing)
    assert matched | missing == {s.casefold() for s in job_skills(job)}
    assert result.skill_score == round(100 * len(matched) / result.job_skill_count)


def test_compute_skill_score_bounds():
    assert compute_skill_score(0, 0) == 0
    assert compute_skill_score(0, 5) == 0
    assert compute_skill_score(5, 5) == 100
    assert compute_skill_score(2, 3) == 67


@pytest.mark.parametrize("technical, soft, required, preferred", [
    (["React"], [], ["REACT", "react"], ["React"]),
    (["aws", "GO"], ["Teamwork"], ["AWS", "Go", "Rust"], ["go", "teamwork", "SQL"]),
    ([], [], ["A", "b", "B"], ["a", "C"]),
    (["Python", "python ", "SQL"], ["Python"], [], ["sql", "Spark", " spark"]),
    (["X", "Y", "Z"], [], ["x", "y", "z"], []),
    (["Node.js"], [], [" node.js ", "Node.JS", "Deno"], ["NODE.JS"]),
])
def test_partition_holds_for_mixed_lists(technical, soft, required, preferred):
    job = _job(required, preferred)
    result = match_skills(_resume(technical, soft), job)
    matched = [s.casefold() for s in result.matched_skills]
    missing = [s.casefold() for s in result.missing_skills]
    combined = [s.strip().casefold() for s in job_skills(job)]
    assert len(matched) == len(set(matched))
    assert len(missing) == len(set(missing))
    assert set(matched).isdisjoint(missing)
    assert sorted(matched + missing) == sorted(combined)
    assert result.job_skill_count == len(combined)
    expected = round(100 * len(matched) / len(combined)) if combined else 0
    assert result.skill_score == expected
