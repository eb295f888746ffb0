"""Shared pydantic base models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Resource columns accept whatever scalar the client sends; the store keeps it as given.
LooseNumber = int | float | str | None
LooseText = str | int | float | None


class CamelModel(BaseModel):
    """Base model that speaks camelCase on the wire and snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class CreatedResponse(CamelModel):
    """Returned by every create endpoint."""

    success: bool = True
    id: int
