"""Case-insensitive keyword counting over resume and job text.

Used when keywords arrive without occurrence counts. A keyword also
counts as the prefix of a longer token ("React" counts "ReactJS") but
never in the middle of one ("SQL" does not count inside "MySQL").
"""

import logging
import re
from functools import lru_cache

from models.schemas.job_description import JobDescription
from models.schemas.keyword_insight import KeywordCandidate, KeywordOccurrence
from models.schemas.resume import Resume

logger = logging.getLogger(__name__)


@lru_cache(maxsize=512)
def _keyword_pattern(keyword: str) -> re.Pattern:
    # (?<!\w) anchors terms that start or end with symbols (".NET", "C++")
    return re.compile(rf"(?<!\w){re.escape(keyword)}\w*", re.IGNORECASE)


def count_keyword(text: str, keyword: str) -> int:
    keyword = keyword.strip()
    if not keyword or not text:
        return 0
    return len(_keyword_pattern(keyword).findall(text))


def resume_text(resume: Resume) -> str:
    """rawText when present, otherwise the structured fields joined together."""
    if resume.raw_text and resume.raw_text.strip():
        return resume.raw_text
    parts = [*resume.skills.technical, *resume.skills.soft]
    for exp in resume.experience:
        parts.extend([exp.title, exp.company, exp.description])
    for edu in resume.education:
        parts.extend([edu.degree, edu.field, edu.institution])
    return "\n".join(p for p in parts if p)


def job_description_text(job: JobDescription) -> str:
    """rawText when present, otherwise the structured fields joined together."""
    if job.raw_text and job.raw_text.strip():
        return job.raw_text
    parts = [
        job.title,
        job.description,
        *job.required_skills,
        *job.preferred_skills,
        *job.responsibilities,
    ]
    return "\n".join(p for p in parts if p)


def count_occurrences(
    resume: Resume,
    job: JobDescription,
    candidates: list[KeywordCandidate],
) -> list[KeywordOccurrence]:
    """Attach resume/job occurrence counts to each candidate keyword."""
    r_text = resume_text(resume)
    j_text = job_description_text(job)
    occurrences = [
        KeywordOccurrence(
            word=c.word,
            cluster=c.cluster,
            resume_count=count_keyword(r_text, c.word),
            jd_count=count_keyword(j_text, c.word),
        )
        for c in candidates
    ]
    logger.debug("Counted %d keywords over %d/%d chars", len(occurrences), len(r_text), len(j_text))
    return occurrences
