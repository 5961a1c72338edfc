"""Error taxonomy for the match engine.

Missing optional fields are never an error: they are absorbed by defaulting
in the normalizer. Only structurally invalid payloads and oracle failures
are raised.
"""


class MatchEngineError(Exception):
    """Base class for all engine errors."""

    code: str = "match_engine_error"
    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_payload(self) -> dict[str, str]:
        return {"error": self.code, "message": self.message}


class InvalidInput(MatchEngineError):
    """Caller supplied a document that is not a JSON object."""

    code = "invalid_input"
    status_code = 400


class OracleUnavailable(MatchEngineError):
    """The extraction/scoring oracle is not configured, failed, or timed out."""

    code = "oracle_unavailable"
    status_code = 503


class MalformedOracleResponse(OracleUnavailable):
    """The oracle answered, but not with a JSON object carrying the expected keys."""

    code = "malformed_oracle_response"
    status_code = 502
