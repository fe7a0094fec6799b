"""
Pydantic schemas for Movie API.
"""

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _finite(v: Any) -> float | None:
    if isinstance(v, bool) or not isinstance(v, (int, float, str)):
        return None
    try:
        number = float(v)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


class MovieIn(BaseModel):
    """Request body for creating or replacing a movie."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    release_year: int = Field(..., alias="releaseYear", ge=1900)
    rating: float = Field(..., ge=0, le=10)
    is_featured: bool = Field(False, alias="isFeatured")

    @field_validator("is_featured", mode="before")
    @classmethod
    def default_featured(cls, v: Any) -> Any:
        """An explicit null means not featured."""
        return False if v is None else v


class MovieResponse(BaseModel):
    """
    Response model for a single movie.

    Stored documents may predate validation (e.g. ``isFeatured: null`` left by
    an update without the field), so every field except ``id`` is optional.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str | None = None
    category: str | None = None
    release_year: int | None = Field(None, alias="releaseYear")
    rating: float | None = None
    is_featured: bool = Field(False, alias="isFeatured")

    @field_validator("is_featured", mode="before")
    @classmethod
    def coerce_featured(cls, v: Any) -> bool:
        """Missing or null means not featured; other values collapse to a boolean."""
        if v is None:
            return False
        if isinstance(v, str):
            return v.strip().lower() in ("true", "1", "yes", "on")
        return bool(v)

    @field_validator("title", "category", mode="before")
    @classmethod
    def text_or_none(cls, v: Any) -> Any:
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator("rating", mode="before")
    @classmethod
    def rating_or_none(cls, v: Any) -> float | None:
        """Values that are not finite numbers are reported as null."""
        return _finite(v)

    @field_validator("release_year", mode="before")
    @classmethod
    def year_or_none(cls, v: Any) -> int | None:
        year = _finite(v)
        if year is None or not year.is_integer():
            return None
        return int(year)

    @classmethod
    def from_document(cls, doc: dict) -> "MovieResponse":
        """Build a response from a stored document, exposing ``_id`` as ``id``."""
        data = {k: v for k, v in doc.items() if k not in ("_id", "id")}
        return cls(id=str(doc["_id"]), **data)


class MovieCreated(BaseModel):
    """Response after a successful insert."""

    message: str
    id: str


class Message(BaseModel):
    """Plain confirmation or error message."""

    message: str
