"""Deterministic facts parsed from structured documents.

These feed the Category Scorer's bounded adjustments:
    - years of tenure summed from dated experience entries
    - required years stated in a job description ("5+ years of experience")
    - degree levels from education entries and job requirements
"""

import logging
import re
from datetime import date

from models.schemas.job_description import JobDescription
from models.schemas.resume import Resume

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Experience duration
# ---------------------------------------------------------------------------

# "5+ years of experience", "3 years experience in Python" or "3-5 years of experience";
# group 1 is the lower end of a range
EXP_YEARS_RE = re.compile(
    r"(\d+)(?:\s*(?:-|\u2013|to)\s*\d+)?\+?\s*(?:years?|yrs?)\s*(?:of\s+)?(?:\w+\s+){0,3}?(?:experience|exp\b)",
    re.IGNORECASE,
)

_MONTH_MAP = {
    "jan": 1, "january": 1, "feb": 2, "february": 2, "mar": 3, "march": 3,
    "apr": 4, "april": 4, "may": 5, "jun": 6, "june": 6,
    "jul": 7, "july": 7, "aug": 8, "august": 8, "sep": 9, "sept": 9,
    "september": 9, "oct": 10, "october": 10, "nov": 11, "november": 11,
    "dec": 12, "december": 12,
}

_ONGOING = ("present", "current", "now", "ongoing", "today")

# "2020-03", "03/2020", "2020/03"
_YEAR_MONTH_RE = re.compile(r"^(\d{4})[-/.](\d{1,2})(?:[-/.]\d{1,2})?$")
_MONTH_YEAR_RE = re.compile(r"^(\d{1,2})[-/.](\d{4})$")


def parse_date(date_str: str | None, as_of: date) -> tuple[int, int] | None:
    """Parse a resume date into (year, month).

    Accepts "Jan 2019", "January 2019", "2019", "2019-01", "01/2019" and
    "Present"/"Current" (resolved to ``as_of``). Returns None when the
    string is empty or unrecognised.
    """
    if date_str is None:
        return None
    date_str = date_str.strip().rstrip(".").replace(",", " ")
    if not date_str:
        return None
    if date_str.lower() in _ONGOING:
        return as_of.year, as_of.month

    # "Month Year"
    parts = date_str.split()
    if len(parts) == 2:
        month_str = parts[0].lower().rstrip(".")
        if month_str in _MONTH_MAP and parts[1].isdigit():
            return int(parts[1]), _MONTH_MAP[month_str]

    m = _YEAR_MONTH_RE.match(date_str)
    if m and 1 <= int(m.group(2)) <= 12:
        return int(m.group(1)), int(m.group(2))
    m = _MONTH_YEAR_RE.match(date_str)
    if m and 1 <= int(m.group(1)) <= 12:
        return int(m.group(2)), int(m.group(1))

    # Bare year
    if date_str.isdigit():
        year = int(date_str)
        if 1970 <= year <= 2100:
            return year, 1

    return None


def experience_years(resume: Resume, as_of: date | None = None) -> float | None:
    """Sum the durations of dated experience entries, in years.

    A missing end date counts as ongoing. Entries without a parseable start
    date, or with an end before the start, contribute nothing. Returns None
    when the resume lists roles but none of them is dated (tenure unknown),
    and 0.0 when it lists no roles at all.
    """
    if not resume.experience:
        return 0.0
    as_of = as_of or date.today()
    total_months = 0
    dated = 0
    for entry in resume.experience:
        start = parse_date(entry.start_date, as_of)
        if start is None:
            continue
        end = parse_date(entry.end_date, as_of) if entry.end_date else (as_of.year, as_of.month)
        if end is None:
            continue
        dated += 1
        months = (end[0] - start[0]) * 12 + (end[1] - start[1])
        if 0 < months < 600:  # Sanity: < 50 years
            total_months += months
    if dated == 0:
        return None
    return round(total_months / 12, 1)


def job_text(job: JobDescription) -> str:
    """All free text of a job description, for pattern searches."""
    parts = [job.title, job.description, *job.responsibilities]
    if job.raw_text:
        parts.append(job.raw_text)
    return "\n".join(p for p in parts if p)


def extract_required_years(text: str) -> float:
    """Extract required years of experience from job text. 0.0 if none stated.

    The first figure stated is the requirement; later ones are usually
    "preferred" extras. A range counts as its lower end.
    """
    for match in EXP_YEARS_RE.finditer(text):
        years = float(match.group(1))
        if 0 < years < 60:
            return years
    return 0.0


# ---------------------------------------------------------------------------
# Education level detection
# ---------------------------------------------------------------------------

EDUCATION_ORDINAL = {"": 0, "associate": 1, "bachelors": 2, "masters": 3, "phd": 4}

DEGREE_PATTERNS: dict[str, list[str]] = {
    "phd": [
        r"ph\.?d", r"doctorate", r"doctoral", r"doctor of philosophy",
    ],
    "masters": [
        r"m\.?s\.?", r"m\.?sc\.?", r"m\.?e\.?", r"m\.?tech", r"mba",
        r"m\.?a\.?(?:\s|$)", r"master(?:'?s)?",
    ],
    "bachelors": [
        r"b\.?s\.?", r"b\.?sc\.?", r"b\.?e\.?", r"b\.?tech", r"b\.?a\.?(?:\s|$)",
        r"bachelor(?:'?s)?", r"b\.?eng",
    ],
    "associate": [
        r"a\.?s\.?", r"a\.?a\.?(?:\s|$)", r"associate(?:'?s)?",
    ],
}

# Job postings only count spelled-out degree words in a degree context; "MS", "BA",
# "Scrum Master" or "master branch" are ignored.
REQUIREMENT_PATTERNS: dict[str, list[str]] = {
    "phd": [r"ph\.d", r"phd", r"doctorate", r"doctoral"],
    "masters": [
        r"master['\u2019]s",
        r"masters\s+(?:degree|in)",
        r"master\s+of\s+(?:science|arts|engineering|business|fine arts)",
        r"mba",
    ],
    "bachelors": [r"bachelor(?:'?s)?"],
    "associate": [r"associate(?:'?s)? degree"],
}


def _compile(patterns: dict[str, list[str]]) -> dict[str, re.Pattern]:
    return {
        level: re.compile(rf"\b(?:{'|'.join(alts)})\b", re.IGNORECASE)
        for level, alts in patterns.items()
    }


_DEGREE_COMPILED = _compile(DEGREE_PATTERNS)
_REQUIREMENT_COMPILED = _compile(REQUIREMENT_PATTERNS)

# Order matters: check highest first
_DEGREE_PRIORITY = ["phd", "masters", "bachelors", "associate"]


def degree_level(degree: str) -> str:
    """Classify a degree string. Returns 'phd', 'masters', 'bachelors', 'associate' or ''."""
    for level in _DEGREE_PRIORITY:
        if _DEGREE_COMPILED[level].search(degree):
            return level
    return ""


def highest_education_level(resume: Resume) -> int | None:
    """Ordinal of the highest degree across education entries.

    0 when the resume lists no education; None when it lists entries but no
    degree string is recognisable (level unknown).
    """
    if not resume.education:
        return 0
    levels = [
        EDUCATION_ORDINAL[level]
        for level in (degree_level(e.degree) for e in resume.education)
        if level
    ]
    return max(levels) if levels else None


def required_education_level(text: str) -> int:
    """Ordinal of the minimum degree a job asks for (0 if none named).

    "Bachelor's or Master's degree" requires a bachelors, so the lowest
    level mentioned wins.
    """
    found = [
        EDUCATION_ORDINAL[level]
        for level, pattern in _REQUIREMENT_COMPILED.items()
        if pattern.search(text)
    ]
    return min(found) if found else 0
