"""Shared schema building blocks."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")


class CamelModel(BaseModel):
    """Base model exchanging camelCase keys with clients."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(BaseModel, Generic[DataT]):
    """Envelope wrapping every successful response."""

    ok: bool = True
    data: DataT | None = None
    message: str | None = None


class ErrorResponse(BaseModel):
    """Envelope returned for every failed request."""

    ok: bool = False
    error: str
    errors: list[str] | None = None
    details: str | None = None


__all__ = ["ApiResponse", "CamelModel", "ErrorResponse"]
