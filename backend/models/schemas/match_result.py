"""Match Aggregator output returned by the compare operation."""

from enum import Enum

from models.schemas.base import FrozenCamelModel


class Category(str, Enum):
    SKILLS = "Skills"
    EXPERIENCE = "Experience"
    EDUCATION = "Education"
    OVERALL_FIT = "Overall Fit"


class CategoryScore(FrozenCamelModel):
    category: Category
    score: int  # 0-100


class MatchResult(FrozenCamelModel):
    """Normalized compatibility result.

    Categories whose inputs were absent are left out of ``category_scores``
    rather than emitted with a placeholder. ``matched_skills`` and
    ``missing_skills`` are unique and disjoint.
    """
    overall_score: int = 0
    category_scores: list[CategoryScore] = []
    matched_skills: list[str] = []
    missing_skills: list[str] = []
    strengths: list[str] = []
    improvement_areas: list[str] = []
    summary: str = ""

    def score_for(self, category: Category) -> int | None:
        for entry in self.category_scores:
            if entry.category == category:
                return entry.score
        return None
