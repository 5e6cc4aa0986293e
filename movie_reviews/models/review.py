"""Review model."""
import uuid

from sqlalchemy import Float, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Review(Base):
    """Review of a movie by a user.

    ``movie_id`` and ``user_id`` are plain indexed references: the database
    carries no foreign key, so removing a movie's reviews is the job of
    :class:`~movie_reviews.services.integrity.ReferentialIntegrityManager`.
    """

    __tablename__ = "reviews"

    movie_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    rating: Mapped[float] = mapped_column(Float, nullable=False)
    comment: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Review(movie_id={self.movie_id}, rating={self.rating})>"
