from models.schemas.base import CamelModel


class HealthResponse(CamelModel):
    status: str = "ok"
    oracle_configured: bool = False


class CoverLetterResponse(CamelModel):
    cover_letter: str = ""


class ErrorDetail(CamelModel):
    error: str  # invalid_input | oracle_unavailable | malformed_oracle_response
    message: str


class ErrorResponse(CamelModel):
    """Body of every 4xx/5xx raised by the engine routes."""
    detail: ErrorDetail
