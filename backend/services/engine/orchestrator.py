"""Orchestrator: wires the engine stages to the oracle.

Flow (compare):
    resume + job payloads
      ├─ normalizer              → Resume, JobDescription
      ├─ oracle (if no judgment) → OracleJudgment
      ├─ skill_matcher           → SkillMatchResult
      ├─ category_scorer         → [CategoryScore]
      └─ match_aggregator        → MatchResult

Flow (analyze_keywords):
    resume + job payloads
      ├─ normalizer
      ├─ occurrences given?   use them
      │  keywords given?      keyword_counter
      │  otherwise            oracle keywords + clusters → keyword_counter
      └─ keyword_insights     → KeywordInsight

Every function takes the oracle as an explicit argument; nothing here
reads identity, session or any other request-global state.
"""

import logging
from datetime import date
from typing import Any

from pydantic import ValidationError

from models.schemas.feedback import Feedback
from models.schemas.job_description import JobDescription
from models.schemas.judgment import OracleJudgment
from models.schemas.keyword_insight import KeywordInsight, KeywordOccurrence
from models.schemas.match_result import MatchResult
from models.schemas.resume import Resume
from services import keyword_counter, prompt_builder
from services.engine import category_scorer, keyword_insights, match_aggregator, skill_matcher
from services.engine.normalizer import (
    as_str_list,
    normalize_candidates,
    normalize_job_description,
    normalize_judgment,
    normalize_occurrences,
    normalize_resume,
    require_keys,
)
from services.errors import InvalidInput, MalformedOracleResponse
from services.oracle_client import Oracle

logger = logging.getLogger(__name__)


def _require_text(text: str, what: str) -> str:
    if not isinstance(text, str) or not text.strip():
        raise InvalidInput(f"{what} text is empty")
    return text


def _coerce_match(payload: Any) -> MatchResult | None:
    if payload is None or isinstance(payload, MatchResult):
        return payload
    try:
        return MatchResult.model_validate(payload)
    except ValidationError as e:
        raise InvalidInput(f"Match result is invalid: {e.error_count()} error(s)") from e


async def request_judgment(resume: Resume, job: JobDescription, oracle: Oracle) -> OracleJudgment:
    """Ask the oracle for a holistic judgment and validate it before use."""
    payload = await oracle.generate_json(prompt_builder.build_comparison_prompt(resume, job))
    require_keys(payload, prompt_builder.JUDGMENT_KEYS, "comparison")
    judgment = normalize_judgment(payload)
    if judgment.overall_percentage is None:
        raise MalformedOracleResponse("Oracle comparison response has no numeric overallPercentage")
    return judgment


def score_match(
    resume: Resume,
    job: JobDescription,
    judgment: OracleJudgment,
    as_of: date | None = None,
) -> MatchResult:
    """Pure part of compare: skill matching, category scoring, aggregation."""
    skills = skill_matcher.match_skills(resume, job)
    categories = category_scorer.score_categories(
        skills, judgment.overall_percentage, resume, job, as_of=as_of
    )
    return match_aggregator.aggregate(categories, skills, judgment)


async def compare(
    resume_payload: Any,
    job_payload: Any,
    oracle: Oracle,
    judgment_payload: Any = None,
    as_of: date | None = None,
) -> MatchResult:
    resume = normalize_resume(resume_payload)
    job = normalize_job_description(job_payload)

    if judgment_payload is not None:
        judgment = normalize_judgment(judgment_payload)
    else:
        judgment = await request_judgment(resume, job, oracle)

    result = score_match(resume, job, judgment, as_of=as_of)
    logger.info(
        "Compare: overall %d, %d matched / %d missing skills",
        result.overall_score, len(result.matched_skills), len(result.missing_skills),
    )
    return result


async def _oracle_occurrences(
    resume: Resume, job: JobDescription, oracle: Oracle
) -> list[KeywordOccurrence]:
    payload = await oracle.generate_json(prompt_builder.build_keyword_prompt(job))
    require_keys(payload, prompt_builder.KEYWORD_KEYS, "keyword")
    clusters = payload["clusters"]
    if not isinstance(clusters, (dict, list)):
        raise MalformedOracleResponse("Oracle keyword response has no cluster mapping")
    candidates = normalize_candidates(clusters)
    return keyword_counter.count_occurrences(resume, job, candidates)


async def analyze_keywords(
    resume_payload: Any,
    job_payload: Any,
    oracle: Oracle,
    occurrences: Any = None,
    keywords: Any = None,
) -> KeywordInsight:
    resume = normalize_resume(resume_payload)
    job = normalize_job_description(job_payload)

    if occurrences is not None:
        if not isinstance(occurrences, list):
            raise InvalidInput("keywordOccurrences must be a JSON array")
        rows = normalize_occurrences(occurrences)
    elif keywords is not None:
        if not isinstance(keywords, list):
            raise InvalidInput("keywords must be a JSON array")
        rows = keyword_counter.count_occurrences(resume, job, normalize_candidates(keywords))
    else:
        rows = await _oracle_occurrences(resume, job, oracle)

    insight = keyword_insights.build_insight(rows)
    logger.info(
        "Keyword analysis: %d keywords in %d clusters",
        len(insight.keywords), len(insight.clusters),
    )
    return insight


async def parse_resume(text: str, oracle: Oracle) -> Resume:
    text = _require_text(text, "Resume")
    payload = await oracle.generate_json(prompt_builder.build_resume_parsing_prompt(text))
    require_keys(payload, prompt_builder.RESUME_KEYS, "resume parsing")
    return normalize_resume(payload).model_copy(update={"raw_text": text})


async def parse_job(text: str, oracle: Oracle) -> JobDescription:
    text = _require_text(text, "Job description")
    payload = await oracle.generate_json(prompt_builder.build_job_parsing_prompt(text))
    require_keys(payload, prompt_builder.JOB_KEYS, "job parsing")
    return normalize_job_description(payload).model_copy(update={"raw_text": text})


async def generate_cover_letter(
    resume_payload: Any,
    job_payload: Any,
    oracle: Oracle,
    match_payload: Any = None,
    custom_instructions: str = "",
) -> str:
    resume = normalize_resume(resume_payload)
    job = normalize_job_description(job_payload)
    match = _coerce_match(match_payload)
    prompt = prompt_builder.build_cover_letter_prompt(resume, job, match, custom_instructions)
    return await oracle.generate_text(prompt)


async def analyze_feedback(
    resume_payload: Any,
    oracle: Oracle,
    job_payload: Any = None,
    match_payload: Any = None,
) -> Feedback:
    resume = normalize_resume(resume_payload)
    job = normalize_job_description(job_payload) if job_payload is not None else None
    match = _coerce_match(match_payload)

    payload = await oracle.generate_json(prompt_builder.build_feedback_prompt(resume, job, match))
    require_keys(payload, prompt_builder.FEEDBACK_KEYS, "feedback")
    return Feedback(
        strengths=as_str_list(payload.get("strengths")),
        weaknesses=as_str_list(payload.get("weaknesses")),
        tips=as_str_list(payload.get("tips")),
    )
