"""Match Aggregator: structural assembly of the final MatchResult."""

from models.schemas.judgment import OracleJudgment
from models.schemas.match_result import Category, CategoryScore, MatchResult
from models.schemas.skill_match import SkillMatchResult
from services.engine.normalizer import unique_casefold


def _clean(items: list[str]) -> list[str]:
    return [s.strip() for s in items if s and s.strip()]


def aggregate(
    category_scores: list[CategoryScore],
    skill_match: SkillMatchResult,
    judgment: OracleJudgment | None = None,
) -> MatchResult:
    """Build a MatchResult whose invariants hold even for partial input.

    overall_score is the Overall Fit score, or 0 when that category is absent.
    """
    judgment = judgment or OracleJudgment()

    # One entry per category; the first wins if upstream ever duplicates one
    by_category: dict[Category, CategoryScore] = {}
    for entry in category_scores:
        by_category.setdefault(entry.category, CategoryScore(
            category=entry.category,
            score=max(0, min(100, entry.score)),
        ))

    overall_fit = by_category.get(Category.OVERALL_FIT)
    overall_score = overall_fit.score if overall_fit else 0

    matched = unique_casefold(skill_match.matched_skills)
    matched_keys = {s.casefold() for s in matched}
    missing = [
        s for s in unique_casefold(skill_match.missing_skills)
        if s.casefold() not in matched_keys
    ]

    return MatchResult(
        overall_score=overall_score,
        category_scores=list(by_category.values()),
        matched_skills=matched,
        missing_skills=missing,
        strengths=_clean(judgment.strengths),
        improvement_areas=_clean(judgment.improvement_areas),
        summary=judgment.summary.strip(),
    )
