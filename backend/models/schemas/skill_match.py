"""Skill Matcher output."""

from models.schemas.base import FrozenCamelModel


class SkillMatchResult(FrozenCamelModel):
    """Partition of the job's combined skill set into matched and missing.

    Both lists keep the job's spelling and follow required-then-preferred
    order of first appearance.
    """
    matched_skills: list[str] = []
    missing_skills: list[str] = []
    job_skill_count: int = 0  # size of the deduplicated required ∪ preferred set
    skill_score: int = 0  # 0-100; 0 when the job lists no skills
