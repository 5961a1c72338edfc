"""Resume feedback produced by the oracle feedback flow."""

from models.schemas.base import FrozenCamelModel


class Feedback(FrozenCamelModel):
    strengths: list[str] = []
    weaknesses: list[str] = []
    tips: list[str] = []
