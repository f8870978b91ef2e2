from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Blank entries are allowed here and dropped by the use cases
SubBreedName = Annotated[str, StringConstraints(max_length=255)]


def _required_name(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("Name cannot be empty or whitespace-only")
    return value


class BreedCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    sub_breeds: list[SubBreedName] | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return _required_name(value)


class BreedUpdate(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    sub_breeds: list[SubBreedName] | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return _required_name(value)


class SubBreedCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return _required_name(value)


class SubBreedResponse(CamelModel):
    id: str
    name: str
    breed_id: str
    created_at: datetime
    updated_at: datetime


class BreedResponse(CamelModel):
    id: str
    name: str
    description: str | None
    created_at: datetime
    updated_at: datetime
    sub_breeds: list[SubBreedResponse]


class BreedListResponse(CamelModel):
    breeds: list[BreedResponse]
    total: int


class StatsResponse(CamelModel):
    total_breeds: int
    total_sub_breeds: int
