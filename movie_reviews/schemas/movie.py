"""Movie schemas."""
import uuid
from datetime import datetime

from pydantic import Field

from .common import BaseSchema


class MovieCreate(BaseSchema):
    """Movie creation schema. Updates replace all four fields too."""

    title: str = Field(..., min_length=1, description="Movie title")
    director: str = Field(..., min_length=1, description="Director")
    release_year: int = Field(..., gt=0, description="Release year")
    genre: str = Field(..., min_length=1, description="Genre")


class MovieUpdate(MovieCreate):
    """Movie update schema."""


class MovieResponse(BaseSchema):
    """Movie response schema."""

    id: uuid.UUID = Field(..., description="Movie ID")
    title: str
    director: str
    release_year: int
    genre: str
    created_at: datetime
    updated_at: datetime
