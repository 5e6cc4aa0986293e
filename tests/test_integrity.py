"""Tests for the movie cascade delete."""
import uuid

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select

from movie_reviews.core.exceptions import InvalidIdentifierError, NotFoundError, StoreError
from movie_reviews.models.movie import Movie
from movie_reviews.models.review import Review
from movie_reviews.schemas.movie import MovieCreate
from movie_reviews.schemas.review import ReviewCreate
from movie_reviews.services.integrity import ReferentialIntegrityManager


async def _count(session, model):
    return await session.scalar(select(func.count()).select_from(model))


async def test_cascade_removes_movie_and_reviews(entity_store, movie, movie_reviews):
    manager = ReferentialIntegrityManager(entity_store)

    result = await manager.delete_movie_cascade(str(movie.id))

    assert result.movie_deleted is True
    assert result.reviews_deleted == len(movie_reviews)
    assert await entity_store.get_movie(str(movie.id)) is None
    for review in movie_reviews:
        assert await entity_store.get_review(str(review.id)) is None


async def test_cascade_leaves_other_movies_reviews(
    entity_store, async_session, movie, movie_reviews, test_user
):
    other = await entity_store.create_movie(
        MovieCreate(title="Heat", director="Michael Mann", release_year=1995, genre="Crime")
    )
    kept = await entity_store.create_review(
        ReviewCreate(movie_id=str(other.id), user_id=str(test_user.id), rating=5, comment="Yes")
    )

    await ReferentialIntegrityManager(entity_store).delete_movie_cascade(str(movie.id))

    assert await entity_store.get_review(str(kept.id)) is not None
    assert await _count(async_session, Movie) == 1
    assert await _count(async_session, Review) == 1


async def test_cascade_unknown_movie(entity_store, async_session, movie, movie_reviews):
    manager = ReferentialIntegrityManager(entity_store)

    with pytest.raises(NotFoundError) as exc_info:
        await manager.delete_movie_cascade(str(uuid.uuid4()))

    assert exc_info.value.details == {"reviews_deleted": 0}
    assert await _count(async_session, Movie) == 1
    assert await _count(async_session, Review) == len(movie_reviews)


async def test_cascade_runs_before_not_found_is_reported(
    entity_store, async_session, test_user
):
    missing_movie_id = str(uuid.uuid4())
    await entity_store.create_review(
        ReviewCreate(movie_id=missing_movie_id, user_id=str(test_user.id), rating=2, comment="?")
    )

    with pytest.raises(NotFoundError) as exc_info:
        await ReferentialIntegrityManager(entity_store).delete_movie_cascade(missing_movie_id)

    assert exc_info.value.details == {"reviews_deleted": 1}
    assert await _count(async_session, Review) == 0


async def test_cascade_invalid_identifier(entity_store, async_session, movie, movie_reviews):
    with pytest.raises(InvalidIdentifierError):
        await ReferentialIntegrityManager(entity_store).delete_movie_cascade("not-an-id")

    assert await _count(async_session, Movie) == 1
    assert await _count(async_session, Review) == len(movie_reviews)


async def test_failed_cascade_leaves_orphaned_reviews(
    entity_store, async_session, movie, movie_reviews, monkeypatch
):
    async def broken(movie_id):
        raise StoreError()

    monkeypatch.setattr(entity_store, "delete_reviews_for_movie", broken)

    with pytest.raises(StoreError):
        await ReferentialIntegrityManager(entity_store).delete_movie_cascade(str(movie.id))

    assert await _count(async_session, Movie) == 0
    assert await _count(async_session, Review) == len(movie_reviews)


async def test_delete_movie_endpoint(client: AsyncClient, auth_headers, movie, movie_reviews):
    response = await client.delete(f"/movies/{movie.id}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"message": "Movie and associated reviews deleted successfully"}
    for review in movie_reviews:
        lookup = await client.get(f"/reviews/{review.id}", headers=auth_headers)
        assert lookup.status_code == 404


async def test_delete_movie_endpoint_not_found(client: AsyncClient, auth_headers):
    response = await client.delete(f"/movies/{uuid.uuid4()}", headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["error"] == "Movie not found"


async def test_delete_movie_endpoint_invalid_id(client: AsyncClient, auth_headers):
    response = await client.delete("/movies/abc", headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid movie ID"


async def test_delete_movie_endpoint_store_failure(
    client: AsyncClient, auth_headers, movie, monkeypatch
):
    from movie_reviews.services.entity_store import EntityStore

    async def broken(self, movie_id):
        raise StoreError()

    monkeypatch.setattr(EntityStore, "delete_reviews_for_movie", broken)

    response = await client.delete(f"/movies/{movie.id}", headers=auth_headers)

    assert response.status_code == 500
    assert response.json()["error_code"] == "STORE_ERROR"
