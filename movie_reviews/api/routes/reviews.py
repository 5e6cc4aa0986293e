"""Review routes."""
from typing import List

from fastapi import APIRouter, Depends, status

from ...core.exceptions import NotFoundError
from ...core.security import get_current_claims
from ...schemas.common import ErrorResponse, MessageResponse
from ...schemas.review import (
    ReviewCreate, ReviewDetailResponse, ReviewResponse, ReviewUpdate
)
from ...services.entity_store import EntityStore
from ..dependencies import get_entity_store

router = APIRouter(
    prefix="/reviews",
    tags=["Reviews"],
    dependencies=[Depends(get_current_claims)],
    responses={401: {"model": ErrorResponse}}
)


@router.post("", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
async def create_review(
    review_create: ReviewCreate,
    store: EntityStore = Depends(get_entity_store)
):
    """Create a review."""
    return await store.create_review(review_create)


@router.get("", response_model=List[ReviewDetailResponse])
async def list_reviews(store: EntityStore = Depends(get_entity_store)):
    """List all reviews with their movie and author."""
    reviews = await store.list_reviews()
    return [ReviewDetailResponse.from_populated(review) for review in reviews]


@router.get("/{review_id}", response_model=ReviewDetailResponse)
async def get_review(
    review_id: str,
    store: EntityStore = Depends(get_entity_store)
):
    """Get a review with its movie and author."""
    review = await store.get_review_detail(review_id)
    if review is None:
        raise NotFoundError("Review not found")

    return ReviewDetailResponse.from_populated(review)


@router.put("/{review_id}", response_model=ReviewResponse)
async def update_review(
    review_id: str,
    review_update: ReviewUpdate,
    store: EntityStore = Depends(get_entity_store)
):
    """Update a review's rating and comment."""
    review = await store.update_review(review_id, review_update)
    if review is None:
        raise NotFoundError("Review not found")

    return review


@router.delete("/{review_id}", response_model=MessageResponse)
async def delete_review(
    review_id: str,
    store: EntityStore = Depends(get_entity_store)
):
    """Delete a review."""
    if not await store.delete_review(review_id):
        raise NotFoundError("Review not found")

    return MessageResponse(message="Review deleted successfully")
