from typing import Any

from pydantic import Field

from config import settings
from models.schemas.base import CamelModel

# Documents are Any: the normalizer rejects non-objects with a 400, not a 422.


class CompareRequest(CamelModel):
    resume: Any = Field(..., description="Resume JSON object (raw extraction output or structured)")
    job: Any = Field(..., description="Job description JSON object")
    oracle_judgment: Any = Field(
        None,
        description="Pre-computed {overallPercentage, strengths, improvementAreas, summary}; "
                    "the oracle is asked when omitted",
    )


class KeywordAnalysisRequest(CamelModel):
    resume: Any = Field(..., description="Resume JSON object")
    job: Any = Field(..., description="Job description JSON object")
    keyword_occurrences: Any = Field(
        None, description="[{word, cluster, resumeCount, jdCount}] supplied by the caller"
    )
    keywords: Any = Field(
        None, description="[{word, cluster}] to be counted over the documents' text"
    )


class ParseTextRequest(CamelModel):
    text: str = Field(..., max_length=settings.max_text_length, description="Plain text document content")


class CoverLetterRequest(CamelModel):
    resume: Any = Field(..., description="Resume JSON object")
    job: Any = Field(..., description="Job description JSON object")
    match: Any = Field(None, description="MatchResult from a previous compare call")
    custom_instructions: str = Field("", max_length=2000)


class FeedbackRequest(CamelModel):
    resume: Any = Field(..., description="Resume JSON object")
    job: Any = Field(None, description="Optional job description to tailor the feedback")
    match: Any = Field(None, description="MatchResult from a previous compare call")
