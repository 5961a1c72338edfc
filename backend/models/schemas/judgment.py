"""Holistic compatibility judgment supplied by the oracle."""

from models.schemas.base import CamelModel


class OracleJudgment(CamelModel):
    overall_percentage: int | None = None  # 0-100; None means the oracle gave no score
    strengths: list[str] = []
    improvement_areas: list[str] = []
    summary: str = ""
