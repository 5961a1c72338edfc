"""Skill Matcher: exact, case-insensitive comparison of resume vs job skills.

matched + missing always partition the job's combined skill set. No
synonym or semantic expansion happens here.
"""

import logging

from models.schemas.job_description import JobDescription
from models.schemas.resume import Resume
from models.schemas.skill_match import SkillMatchResult

logger = logging.getLogger(__name__)


def _skill_key(skill: str) -> str:
    return skill.strip().casefold()


def job_skills(job: JobDescription) -> list[str]:
    """required ∪ preferred, deduplicated case-insensitively, in first-appearance order."""
    seen: set[str] = set()
    combined = []
    for skill in job.required_skills + job.preferred_skills:
        key = _skill_key(skill)
        if key and key not in seen:
            seen.add(key)
            combined.append(skill.strip())
    return combined


def resume_skill_keys(resume: Resume) -> set[str]:
    """technical ∪ soft as case-folded keys."""
    return {
        _skill_key(s)
        for s in resume.skills.technical + resume.skills.soft
        if _skill_key(s)
    }


def compute_skill_score(n_matched: int, n_total: int) -> int:
    """Percentage of job skills covered. A job listing no skills scores 0, not 100."""
    if n_total <= 0:
        return 0
    return max(0, min(100, round(100 * n_matched / n_total)))


def match_skills(resume: Resume, job: JobDescription) -> SkillMatchResult:
    combined = job_skills(job)
    have = resume_skill_keys(resume)

    matched: list[str] = []
    missing: list[str] = []
    for skill in combined:
        if _skill_key(skill) in have:
            matched.append(skill)
        else:
            missing.append(skill)

    score = compute_skill_score(len(matched), len(combined))
    logger.debug(
        "Skill match: %d/%d job skills matched (score %d)",
        len(matched), len(combined), score,
    )
    return SkillMatchResult(
        matched_skills=matched,
        missing_skills=missing,
        job_skill_count=len(combined),
        skill_score=score,
    )
