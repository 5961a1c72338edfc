"""Canonical job description entity produced by the Document Normalizer."""

from models.schemas.base import CamelModel


class JobDescription(CamelModel):
    """Structured job posting. Same skill invariant as Resume."""
    title: str = ""
    company: str = ""
    location: str = ""
    description: str = ""
    required_skills: list[str] = []
    preferred_skills: list[str] = []
    responsibilities: list[str] = []
    benefits: list[str] = []
    raw_text: str | None = None
