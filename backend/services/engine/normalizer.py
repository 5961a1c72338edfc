"""Document Normalizer: untrusted oracle JSON -> canonical entities.

Never raises on missing or mistyped fields; missing arrays become empty
lists and missing strings become "". The only rejection is a payload that
is not a JSON object at all.
"""

import logging
import math
import re
from typing import Any

from models.schemas.job_description import JobDescription
from models.schemas.judgment import OracleJudgment
from models.schemas.keyword_insight import KeywordCandidate, KeywordOccurrence
from models.schemas.resume import EducationEntry, ExperienceEntry, Resume, SkillSet
from services.errors import InvalidInput, MalformedOracleResponse

logger = logging.getLogger(__name__)

_LIST_SPLIT_RE = re.compile(r"[,;\n]")
_PERCENT_RE = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*%?\s*$")


# ---------------------------------------------------------------------------
# Field coercion helpers
# ---------------------------------------------------------------------------

def _field(payload: dict, *names: str) -> Any:
    """Return the first present, non-None value among alternative key spellings."""
    for name in names:
        value = payload.get(name)
        if value is not None:
            return value
    return None


def _as_str(value: Any) -> str:
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, bool) or value is None:
        return ""
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def as_str_list(value: Any) -> list[str]:
    """Coerce a list-ish value to a list of non-blank strings.

    A bare string is treated as a comma/semicolon/newline separated list,
    which is how LLMs occasionally answer for array fields.
    """
    if value is None:
        return []
    if isinstance(value, str):
        items = _LIST_SPLIT_RE.split(value)
    elif isinstance(value, (list, tuple)):
        items = value
    else:
        items = [value]
    result = []
    for item in items:
        text = _as_str(item)
        if text:
            result.append(text)
    return result


def _as_dict_list(value: Any) -> list[dict]:
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, dict)]


def _optional_str(value: Any) -> str | None:
    text = _as_str(value)
    return text or None


def unique_casefold(items: list[str]) -> list[str]:
    """Drop case-insensitive duplicates, keeping the first spelling and order."""
    seen: set[str] = set()
    result = []
    for item in items:
        key = item.strip().casefold()
        if key and key not in seen:
            seen.add(key)
            result.append(item.strip())
    return result


def coerce_percentage(value: Any) -> int | None:
    """Parse an oracle percentage (85, 85.4, "85%") into an int in [0, 100].

    Returns None for anything that is not a finite number.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        match = _PERCENT_RE.match(value)
        if not match:
            return None
        number = float(match.group(1))
    else:
        return None
    if not math.isfinite(number):
        return None
    return max(0, min(100, round(number)))


def coerce_count(value: Any) -> int:
    """Parse an occurrence count; anything unusable or negative becomes 0."""
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str) and value.strip().lstrip("-").isdigit():
        number = float(value.strip())
    else:
        return 0
    if not math.isfinite(number):
        return 0
    return max(0, int(number))


def _require_object(payload: Any, what: str) -> dict:
    if not isinstance(payload, dict):
        raise InvalidInput(
            f"{what} must be a JSON object, got {type(payload).__name__}"
        )
    return payload


# ---------------------------------------------------------------------------
# Oracle response validation
# ---------------------------------------------------------------------------

def require_keys(payload: Any, keys: tuple[str, ...], what: str) -> dict:
    """Check that an oracle response is an object with the expected top-level keys.

    Each entry in ``keys`` may list alternatives separated by "|", e.g.
    "overallPercentage|matchPercentage".
    """
    if not isinstance(payload, dict):
        raise MalformedOracleResponse(
            f"Oracle {what} response is not a JSON object"
        )
    missing = [
        key for key in keys
        if not any(alt in payload for alt in key.split("|"))
    ]
    if missing:
        raise MalformedOracleResponse(
            f"Oracle {what} response is missing keys: {', '.join(missing)}"
        )
    return payload


# ---------------------------------------------------------------------------
# Entity normalizers
# ---------------------------------------------------------------------------

def _normalize_skills(value: Any) -> SkillSet:
    if isinstance(value, dict):
        technical = as_str_list(_field(value, "technical", "hard", "technicalSkills"))
        soft = as_str_list(_field(value, "soft", "softSkills"))
    else:
        # A flat list is what the resume-parsing prompt returns
        technical = as_str_list(value)
        soft = []
    return SkillSet(technical=unique_casefold(technical), soft=unique_casefold(soft))


def _normalize_experience(item: dict) -> ExperienceEntry:
    return ExperienceEntry(
        title=_as_str(_field(item, "title", "position", "role")),
        company=_as_str(_field(item, "company", "employer")),
        location=_as_str(item.get("location")),
        start_date=_as_str(_field(item, "startDate", "start_date")),
        end_date=_optional_str(_field(item, "endDate", "end_date")),
        description=_as_str(item.get("description")),
    )


def _normalize_education(item: dict) -> EducationEntry:
    return EducationEntry(
        institution=_as_str(_field(item, "institution", "school", "name")),
        degree=_as_str(item.get("degree")),
        field=_as_str(_field(item, "field", "fieldOfStudy", "field_of_study", "major")),
        start_date=_as_str(_field(item, "startDate", "start_date")),
        end_date=_optional_str(_field(item, "endDate", "end_date")),
        gpa=_as_str(item.get("gpa")),
    )


def normalize_resume(payload: Any) -> Resume:
    """Coerce raw extraction output into a Resume with every field defaulted."""
    data = _require_object(payload, "Resume")
    personal = data.get("personalInfo") or data.get("personal_info")
    if not isinstance(personal, dict):
        personal = {}

    def personal_field(name: str) -> str:
        return _as_str(_field(personal, name)) or _as_str(_field(data, name))

    raw_text = _field(data, "rawText", "raw_text")
    return Resume(
        name=personal_field("name"),
        email=personal_field("email"),
        phone=personal_field("phone"),
        location=personal_field("location"),
        skills=_normalize_skills(data.get("skills")),
        experience=[_normalize_experience(e) for e in _as_dict_list(data.get("experience"))],
        education=[_normalize_education(e) for e in _as_dict_list(data.get("education"))],
        raw_text=raw_text if isinstance(raw_text, str) else None,
    )


def normalize_job_description(payload: Any) -> JobDescription:
    """Coerce raw extraction output into a JobDescription with every field defaulted."""
    data = _require_object(payload, "Job description")
    raw_text = _field(data, "rawText", "raw_text")
    return JobDescription(
        title=_as_str(data.get("title")),
        company=_as_str(data.get("company")),
        location=_as_str(data.get("location")),
        description=_as_str(data.get("description")),
        required_skills=unique_casefold(
            as_str_list(_field(data, "requiredSkills", "required_skills"))
        ),
        preferred_skills=unique_casefold(
            as_str_list(_field(data, "preferredSkills", "preferred_skills"))
        ),
        responsibilities=as_str_list(data.get("responsibilities")),
        benefits=as_str_list(data.get("benefits")),
        raw_text=raw_text if isinstance(raw_text, str) else None,
    )


def normalize_judgment(payload: Any) -> OracleJudgment:
    """Coerce an oracle judgment; a missing or non-numeric score stays None."""
    data = _require_object(payload, "Oracle judgment")
    overall_raw = _field(data, "overallPercentage", "overall_percentage", "matchPercentage")
    overall = coerce_percentage(overall_raw)
    if overall_raw is not None and overall is None:
        logger.warning("Ignoring non-numeric overall percentage: %r", overall_raw)
    return OracleJudgment(
        overall_percentage=overall,
        strengths=as_str_list(data.get("strengths")),
        improvement_areas=as_str_list(
            _field(data, "improvementAreas", "improvement_areas", "weaknesses")
        ),
        summary=_as_str(data.get("summary")),
    )


def normalize_candidates(rows: Any) -> list[KeywordCandidate]:
    """Keyword rows without counts; rows lacking a word are dropped."""
    if isinstance(rows, dict):
        # {"DevOps": ["AWS", "Docker"], ...}: cluster name -> member keywords
        candidates = []
        for cluster, words in rows.items():
            for word in as_str_list(words):
                candidates.append(KeywordCandidate(word=word, cluster=_as_str(cluster)))
        return candidates
    candidates = []
    for item in _as_dict_list(rows):
        word = _as_str(_field(item, "word", "keyword"))
        if word:
            candidates.append(KeywordCandidate(word=word, cluster=_as_str(item.get("cluster"))))
    return candidates


def normalize_occurrences(rows: Any) -> list[KeywordOccurrence]:
    """Keyword rows with counts; counts are coerced to non-negative ints."""
    occurrences = []
    for item in _as_dict_list(rows):
        word = _as_str(_field(item, "word", "keyword"))
        if not word:
            continue
        occurrences.append(KeywordOccurrence(
            word=word,
            cluster=_as_str(item.get("cluster")),
            resume_count=coerce_count(_field(item, "resumeCount", "resume_count")),
            jd_count=coerce_count(_field(item, "jdCount", "jd_count")),
        ))
    return occurrences
