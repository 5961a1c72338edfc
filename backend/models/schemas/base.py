"""Shared Pydantic base: snake_case attributes, camelCase JSON."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenCamelModel(BaseModel):
    """Result entities: created fresh per request, never mutated afterwards."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)
