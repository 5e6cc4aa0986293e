"""Movie routes."""
from typing import List

from fastapi import APIRouter, Depends, status

from ...core.exceptions import NotFoundError
from ...core.security import get_current_claims
from ...schemas.common import ErrorResponse, MessageResponse
from ...schemas.movie import MovieCreate, MovieResponse, MovieUpdate
from ...schemas.review import ReviewDetailResponse
from ...services.entity_store import EntityStore
from ...services.integrity import ReferentialIntegrityManager
from ..dependencies import get_entity_store, get_integrity_manager

router = APIRouter(
    prefix="/movies",
    tags=["Movies"],
    dependencies=[Depends(get_current_claims)],
    responses={401: {"model": ErrorResponse}}
)


@router.post("", response_model=MovieResponse, status_code=status.HTTP_201_CREATED)
async def create_movie(
    movie_create: MovieCreate,
    store: EntityStore = Depends(get_entity_store)
):
    """Create a movie."""
    return await store.create_movie(movie_create)


@router.get("", response_model=List[MovieResponse])
async def list_movies(store: EntityStore = Depends(get_entity_store)):
    """List all movies."""
    return await store.list_movies()


@router.get("/{movie_id}", response_model=MovieResponse)
async def get_movie(
    movie_id: str,
    store: EntityStore = Depends(get_entity_store)
):
    """Get a movie by ID."""
    movie = await store.get_movie(movie_id)
    if movie is None:
        raise NotFoundError("Movie not found")

    return movie


@router.put("/{movie_id}", response_model=MovieResponse)
async def update_movie(
    movie_id: str,
    movie_update: MovieUpdate,
    store: EntityStore = Depends(get_entity_store)
):
    """Replace a movie's details."""
    movie = await store.update_movie(movie_id, movie_update)
    if movie is None:
        raise NotFoundError("Movie not found")

    return movie


@router.get("/{movie_id}/reviews", response_model=List[ReviewDetailResponse])
async def list_movie_reviews(
    movie_id: str,
    store: EntityStore = Depends(get_entity_store)
):
    """List a movie's reviews with their authors."""
    reviews = await store.list_reviews_for_movie(movie_id)
    if not reviews:
        raise NotFoundError("No reviews found for this movie")

    return [ReviewDetailResponse.from_populated(review) for review in reviews]


@router.delete("/{movie_id}", response_model=MessageResponse)
async def delete_movie(
    movie_id: str,
    integrity: ReferentialIntegrityManager = Depends(get_integrity_manager)
):
    """Delete a movie together with its reviews."""
    await integrity.delete_movie_cascade(movie_id)

    return MessageResponse(message="Movie and associated reviews deleted successfully")
