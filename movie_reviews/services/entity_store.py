"""Persistence for movies and reviews."""
import functools
import uuid
from typing import List, NamedTuple, Optional, Union

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import InvalidIdentifierError, StoreError
from ..models.movie import Movie
from ..models.review import Review
from ..models.user import User
from ..schemas.movie import MovieCreate, MovieUpdate
from ..schemas.review import ReviewCreate, ReviewUpdate


class PopulatedReview(NamedTuple):
    """A review with its referenced movie and author, if they still exist."""

    review: Review
    movie: Optional[Movie]
    user: Optional[User]


def parse_identifier(raw: Union[str, uuid.UUID], entity: str) -> uuid.UUID:
    """Parse a store identifier or raise ``InvalidIdentifierError``."""
    if isinstance(raw, uuid.UUID):
        return raw
    try:
        return uuid.UUID(str(raw))
    except ValueError:
        raise InvalidIdentifierError(
            f"Invalid {entity} ID", details={"id": str(raw)}
        ) from None


def store_operation(func):
    """Roll back and re-raise SQLAlchemy failures as ``StoreError``."""

    @functools.wraps(func)
    async def wrapper(self, *args, **kwargs):
        try:
            return await func(self, *args, **kwargs)
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise StoreError(
                "Server error", details={"operation": func.__name__}
            ) from e

    return wrapper


class EntityStore:
    """Movie and review store.

    Every write commits on its own, so a multi-step operation built on
    top of these methods is not atomic.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    # Movies

    @store_operation
    async def create_movie(self, movie_create: MovieCreate) -> Movie:
        movie = Movie(
            title=movie_create.title,
            director=movie_create.director,
            release_year=movie_create.release_year,
            genre=movie_create.genre,
        )
        self.db.add(movie)
        await self.db.commit()
        await self.db.refresh(movie)
        return movie

    @store_operation
    async def get_movie(self, movie_id: str) -> Optional[Movie]:
        movie_uuid = parse_identifier(movie_id, "movie")
        return await self.db.get(Movie, movie_uuid)

    @store_operation
    async def list_movies(self) -> List[Movie]:
        result = await self.db.execute(select(Movie).order_by(Movie.created_at))
        return list(result.scalars().all())

    @store_operation
    async def update_movie(
        self,
        movie_id: str,
        movie_update: MovieUpdate
    ) -> Optional[Movie]:
        movie_uuid = parse_identifier(movie_id, "movie")
        movie = await self.db.get(Movie, movie_uuid)
        if movie is None:
            return None

        movie.title = movie_update.title
        movie.director = movie_update.director
        movie.release_year = movie_update.release_year
        movie.genre = movie_update.genre

        await self.db.commit()
        await self.db.refresh(movie)
        return movie

    @store_operation
    async def delete_movie(self, movie_id: str) -> bool:
        """Delete a movie; ``False`` if it did not exist."""
        movie_uuid = parse_identifier(movie_id, "movie")
        result = await self.db.execute(delete(Movie).where(Movie.id == movie_uuid))
        await self.db.commit()
        return result.rowcount > 0

    # Reviews

    @store_operation
    async def create_review(self, review_create: ReviewCreate) -> Review:
        review = Review(
            movie_id=parse_identifier(review_create.movie_id, "movie"),
            user_id=parse_identifier(review_create.user_id, "user"),
            rating=review_create.rating,
            comment=review_create.comment,
        )
        self.db.add(review)
        await self.db.commit()
        await self.db.refresh(review)
        return review

    @store_operation
    async def get_review(self, review_id: str) -> Optional[Review]:
        review_uuid = parse_identifier(review_id, "review")
        return await self.db.get(Review, review_uuid)

    @store_operation
    async def get_review_detail(self, review_id: str) -> Optional[PopulatedReview]:
        review_uuid = parse_identifier(review_id, "review")
        result = await self.db.execute(
            self._populated_query().where(Review.id == review_uuid)
        )
        row = result.first()
        return PopulatedReview(*row) if row else None

    @store_operation
    async def list_reviews(self) -> List[PopulatedReview]:
        result = await self.db.execute(self._populated_query())
        return [PopulatedReview(*row) for row in result.all()]

    @store_operation
    async def list_reviews_for_movie(self, movie_id: str) -> List[PopulatedReview]:
        movie_uuid = parse_identifier(movie_id, "movie")
        result = await self.db.execute(
            self._populated_query().where(Review.movie_id == movie_uuid)
        )
        return [PopulatedReview(*row) for row in result.all()]

    @store_operation
    async def update_review(
        self,
        review_id: str,
        review_update: ReviewUpdate
    ) -> Optional[Review]:
        review_uuid = parse_identifier(review_id, "review")
        review = await self.db.get(Review, review_uuid)
        if review is None:
            return None

        review.rating = review_update.rating
        review.comment = review_update.comment

        await self.db.commit()
        await self.db.refresh(review)
        return review

    @store_operation
    async def delete_review(self, review_id: str) -> bool:
        """Delete a review; ``False`` if it did not exist."""
        review_uuid = parse_identifier(review_id, "review")
        result = await self.db.execute(delete(Review).where(Review.id == review_uuid))
        await self.db.commit()
        return result.rowcount > 0

    @store_operation
    async def delete_reviews_for_movie(self, movie_id: str) -> int:
        """Delete every review of a movie and return how many went."""
        movie_uuid = parse_identifier(movie_id, "movie")
        result = await self.db.execute(
            delete(Review).where(Review.movie_id == movie_uuid)
        )
        await self.db.commit()
        return result.rowcount

    @staticmethod
    def _populated_query():
        return (
            select(Review, Movie, User)
            .outerjoin(Movie, Movie.id == Review.movie_id)
            .outerjoin(User, User.id == Review.user_id)
            .order_by(Review.created_at)
        )
