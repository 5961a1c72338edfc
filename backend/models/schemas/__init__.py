"""Pydantic contracts passed between the match engine stages."""

from models.schemas.feedback import Feedback
from models.schemas.job_description import JobDescription
from models.schemas.judgment import OracleJudgment
from models.schemas.keyword_insight import (
    Coverage,
    KeywordCandidate,
    KeywordEntry,
    KeywordInsight,
    KeywordOccurrence,
    MatchType,
    Strength,
)
from models.schemas.match_result import Category, CategoryScore, MatchResult
from models.schemas.resume import EducationEntry, ExperienceEntry, Resume, SkillSet
from models.schemas.skill_match import SkillMatchResult

__all__ = [
    "Category",
    "CategoryScore",
    "Coverage",
    "EducationEntry",
    "ExperienceEntry",
    "Feedback",
    "JobDescription",
    "KeywordCandidate",
    "KeywordEntry",
    "KeywordInsight",
    "KeywordOccurrence",
    "MatchResult",
    "MatchType",
    "OracleJudgment",
    "Resume",
    "SkillMatchResult",
    "SkillSet",
    "Strength",
]
