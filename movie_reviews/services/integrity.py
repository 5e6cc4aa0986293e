"""Referential integrity between movies and their reviews."""
from dataclasses import dataclass

from ..core.exceptions import NotFoundError, StoreError
from ..core.logging import BusinessLogger
from .entity_store import EntityStore


@dataclass
class DeletionResult:
    """Outcome of a movie cascade delete."""

    movie_id: str
    movie_deleted: bool
    reviews_deleted: int


class ReferentialIntegrityManager:
    """Keeps reviews from outliving the movie they reference."""

    def __init__(self, store: EntityStore):
        self.store = store

    async def delete_movie_cascade(self, movie_id: str) -> DeletionResult:
        """Delete a movie and then every review that references it.

        The two deletes commit separately. The review cascade runs even
        when the movie was already gone, and only then is the missing
        movie reported as ``NotFoundError``. If the cascade fails after
        the movie was removed, the remaining reviews are orphaned and the
        ``StoreError`` propagates.
        """
        movie_deleted = await self.store.delete_movie(movie_id)

        try:
            reviews_deleted = await self.store.delete_reviews_for_movie(movie_id)
        except StoreError as e:
            if movie_deleted:
                BusinessLogger.log_cascade_failed(movie_id, e.message)
            raise

        BusinessLogger.log_movie_deleted(
            movie_id=movie_id,
            movie_found=movie_deleted,
            reviews_deleted=reviews_deleted,
        )

        if not movie_deleted:
            raise NotFoundError(
                "Movie not found",
                details={"reviews_deleted": reviews_deleted}
            )

        return DeletionResult(
            movie_id=movie_id,
            movie_deleted=movie_deleted,
            reviews_deleted=reviews_deleted,
        )
