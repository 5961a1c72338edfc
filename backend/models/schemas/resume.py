"""Canonical resume entity produced by the Document Normalizer."""

from models.schemas.base import CamelModel


class SkillSet(CamelModel):
    technical: list[str] = []
    soft: list[str] = []


class ExperienceEntry(CamelModel):
    """A single work experience entry."""
    title: str = ""
    company: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str | None = None  # None while the role is ongoing or undated
    description: str = ""


class EducationEntry(CamelModel):
    """A single education entry."""
    institution: str = ""
    degree: str = ""  # free text, e.g. "B.S.", "Master of Science"
    field: str = ""
    start_date: str = ""
    end_date: str | None = None
    gpa: str = ""


class Resume(CamelModel):
    """Structured resume.

    Skill lists hold trimmed strings, unique under case-folding. The first
    spelling seen is kept for display; comparisons always case-fold.
    """
    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    skills: SkillSet = SkillSet()
    experience: list[ExperienceEntry] = []
    education: list[EducationEntry] = []
    raw_text: str | None = None
