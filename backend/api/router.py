from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_oracle
from config import settings
from models.requests import (
    CompareRequest,
    CoverLetterRequest,
    FeedbackRequest,
    KeywordAnalysisRequest,
    ParseTextRequest,
)
from models.responses import CoverLetterResponse, ErrorResponse, HealthResponse
from models.schemas.feedback import Feedback
from models.schemas.job_description import JobDescription
from models.schemas.keyword_insight import KeywordInsight
from models.schemas.match_result import MatchResult
from models.schemas.resume import Resume
from services.engine import orchestrator
from services.errors import MatchEngineError
from services.oracle_client import Oracle

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid input document"},
    502: {"model": ErrorResponse, "description": "Oracle answered with malformed JSON"},
    503: {"model": ErrorResponse, "description": "Oracle unavailable"},
}


def _http_error(error: MatchEngineError) -> HTTPException:
    return HTTPException(status_code=error.status_code, detail=error.to_payload())


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok", oracle_configured=bool(settings.gemini_api_key))


@router.post("/match/compare", response_model=MatchResult, responses=_ERROR_RESPONSES)
@limiter.limit(settings.rate_limit)
async def compare(
    request: Request,
    body: CompareRequest,
    oracle: Oracle = Depends(get_oracle),
):
    try:
        return await orchestrator.compare(
            body.resume, body.job, oracle, judgment_payload=body.oracle_judgment
        )
    except MatchEngineError as e:
        raise _http_error(e) from e


@router.post("/keywords/analyze", response_model=KeywordInsight, responses=_ERROR_RESPONSES)
@limiter.limit(settings.rate_limit)
async def analyze_keywords(
    request: Request,
    body: KeywordAnalysisRequest,
    oracle: Oracle = Depends(get_oracle),
):
    try:
        return await orchestrator.analyze_keywords(
            body.resume,
            body.job,
            oracle,
            occurrences=body.keyword_occurrences,
            keywords=body.keywords,
        )
    except MatchEngineError as e:
        raise _http_error(e) from e


@router.post("/resumes/parse", response_model=Resume, responses=_ERROR_RESPONSES)
@limiter.limit(settings.rate_limit)
async def parse_resume(
    request: Request,
    body: ParseTextRequest,
    oracle: Oracle = Depends(get_oracle),
):
    try:
        return await orchestrator.parse_resume(body.text, oracle)
    except MatchEngineError as e:
        raise _http_error(e) from e


@router.post("/jobs/parse", response_model=JobDescription, responses=_ERROR_RESPONSES)
@limiter.limit(settings.rate_limit)
async def parse_job(
    request: Request,
    body: ParseTextRequest,
    oracle: Oracle = Depends(get_oracle),
):
    try:
        return await orchestrator.parse_job(body.text, oracle)
    except MatchEngineError as e:
        raise _http_error(e) from e


@router.post("/match/letter/generate", response_model=CoverLetterResponse, responses=_ERROR_RESPONSES)
@limiter.limit(settings.rate_limit)
async def generate_cover_letter(
    request: Request,
    body: CoverLetterRequest,
    oracle: Oracle = Depends(get_oracle),
):
    try:
        letter = await orchestrator.generate_cover_letter(
            body.resume,
            body.job,
            oracle,
            match_payload=body.match,
            custom_instructions=body.custom_instructions,
        )
    except MatchEngineError as e:
        raise _http_error(e) from e
    return CoverLetterResponse(cover_letter=letter)


@router.post("/match/feedback/analyze", response_model=Feedback, responses=_ERROR_RESPONSES)
@limiter.limit(settings.rate_limit)
async def analyze_feedback(
    request: Request,
    body: FeedbackRequest,
    oracle: Oracle = Depends(get_oracle),
):
    try:
        return await orchestrator.analyze_feedback(
            body.resume, oracle, job_payload=body.job, match_payload=body.match
        )
    except MatchEngineError as e:
        raise _http_error(e) from e
