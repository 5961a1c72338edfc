"""Category Scorer: per-category scores from skill coverage and the oracle's overall judgment.

    Skills       skill_score                      (only if the job lists skills)
    Experience   overall + years adjustment       (only if overall is defined)
    Education    overall + degree adjustment      (only if overall is defined)
    Overall Fit  overall                          (only if overall is defined)

The Experience and Education adjustments are deterministic and bounded to
±MAX_ADJUSTMENT points. With no parseable signal the adjustment is 0.
"""

import logging
from datetime import date

from models.schemas.job_description import JobDescription
from models.schemas.match_result import Category, CategoryScore
from models.schemas.resume import Resume
from models.schemas.skill_match import SkillMatchResult
from services import document_signals

logger = logging.getLogger(__name__)

MAX_ADJUSTMENT = 10
POINTS_PER_YEAR = 2  # per year of tenure above/below the stated requirement
POINTS_PER_LEVEL = 5  # per degree level above/below the stated requirement


def clamp_score(value: float) -> int:
    return max(0, min(100, round(value)))


def _bounded(value: float) -> int:
    return max(-MAX_ADJUSTMENT, min(MAX_ADJUSTMENT, round(value)))


def experience_adjustment(resume_years: float | None, required_years: float) -> int:
    """Points added to the overall score for tenure vs the job's required years."""
    if required_years <= 0 or resume_years is None:
        return 0
    return _bounded(POINTS_PER_YEAR * (resume_years - required_years))


def education_adjustment(resume_level: int | None, required_level: int) -> int:
    """Points added to the overall score for highest degree vs the job's required degree."""
    if required_level <= 0 or resume_level is None:
        return 0
    return _bounded(POINTS_PER_LEVEL * (resume_level - required_level))


def score_categories(
    skill_match: SkillMatchResult,
    overall_percentage: int | None,
    resume: Resume,
    job: JobDescription,
    as_of: date | None = None,
) -> list[CategoryScore]:
    """Emit one CategoryScore per category whose inputs are present."""
    scores: list[CategoryScore] = []

    if skill_match.job_skill_count > 0:
        scores.append(CategoryScore(
            category=Category.SKILLS,
            score=clamp_score(skill_match.skill_score),
        ))

    if overall_percentage is None:
        return scores

    overall = clamp_score(overall_percentage)
    text = document_signals.job_text(job)

    resume_years = document_signals.experience_years(resume, as_of=as_of)
    required_years = document_signals.extract_required_years(text)
    exp_adj = experience_adjustment(resume_years, required_years)

    resume_level = document_signals.highest_education_level(resume)
    required_level = document_signals.required_education_level(text)
    edu_adj = education_adjustment(resume_level, required_level)

    logger.debug(
        "Category signals: years %s vs %s (%+d), degree %s vs %s (%+d)",
        resume_years, required_years, exp_adj,
        resume_level, required_level, edu_adj,
    )

    scores.append(CategoryScore(category=Category.EXPERIENCE, score=clamp_score(overall + exp_adj)))
    scores.append(CategoryScore(category=Category.EDUCATION, score=clamp_score(overall + edu_adj)))
    scores.append(CategoryScore(category=Category.OVERALL_FIT, score=overall))
    return scores
