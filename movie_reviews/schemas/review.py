"""Review schemas."""
import uuid
from datetime import datetime
from typing import Optional

from pydantic import Field

from .auth import UserResponse
from .common import BaseSchema
from .movie import MovieResponse


class ReviewCreate(BaseSchema):
    """Review creation schema.

    The identifiers are kept as strings here so that a malformed one is
    reported by the store as an invalid identifier.
    """

    movie_id: str = Field(..., min_length=1, description="Reviewed movie ID")
    user_id: str = Field(..., min_length=1, description="Author user ID")
    rating: float = Field(..., gt=0, description="Rating")
    comment: str = Field(..., min_length=1, description="Review text")


class ReviewUpdate(BaseSchema):
    """Review update schema."""

    rating: float = Field(..., gt=0, description="Rating")
    comment: str = Field(..., min_length=1, description="Review text")


class ReviewResponse(BaseSchema):
    """Review response schema."""

    id: uuid.UUID = Field(..., description="Review ID")
    movie_id: uuid.UUID
    user_id: uuid.UUID
    rating: float
    comment: str
    created_at: datetime
    updated_at: datetime


class ReviewDetailResponse(ReviewResponse):
    """Review with its movie and author resolved.

    ``movie`` or ``user`` is null when the referenced record no longer
    exists.
    """

    movie: Optional[MovieResponse] = None
    user: Optional[UserResponse] = None

    @classmethod
    def from_populated(cls, populated) -> "ReviewDetailResponse":
        """Build from a store ``PopulatedReview``."""
        review, movie, user = populated
        return cls(
            **ReviewResponse.model_validate(review).model_dump(),
            movie=MovieResponse.model_validate(movie) if movie else None,
            user=UserResponse.model_validate(user) if user else None,
        )
