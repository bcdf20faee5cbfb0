"""Public profile and follow endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from authentiwrite.api.v1.dependencies import StoreDep, TokenDep
from authentiwrite.schemas.analytics import AnalyticsSummary, UserProfileEnvelope
from authentiwrite.schemas.common import StatusResponse
from authentiwrite.schemas.user import UserProfile
from authentiwrite.schemas.writing import WritingResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

RECENT_WRITINGS_LIMIT = 5


@router.get("/{user_id}", response_model=UserProfileEnvelope)
async def get_user_profile(user_id: str, store: StoreDep) -> UserProfileEnvelope:
    """Return a public profile; government ID and email are never included."""
    user = store.get_user_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    analytics = store.get_analytics(user_id)
    writings = [w for w in store.get_writings_by_author(user_id) if w.is_public]

    return UserProfileEnvelope(
        user=UserProfile(
            id=user.id,
            name=user.name,
            bio=user.bio,
            avatar=user.avatar,
            verified=user.verified,
            followers=len(user.followers),
            following=len(user.following),
        ),
        analytics=AnalyticsSummary.model_validate(analytics) if analytics else None,
        recent_writings=[
            WritingResponse.model_validate(w) for w in writings[:RECENT_WRITINGS_LIMIT]
        ],
    )


@router.post("/{user_id}/follow", response_model=StatusResponse)
async def follow_user(user_id: str, payload: TokenDep, store: StoreDep) -> StatusResponse:
    """Follow another writer."""
    if not store.follow_user(payload.user_id, user_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Unable to follow user",
        )
    logger.info("User %s followed %s", payload.user_id, user_id)
    return StatusResponse()


@router.delete("/{user_id}/follow", response_model=StatusResponse)
async def unfollow_user(user_id: str, payload: TokenDep, store: StoreDep) -> StatusResponse:
    """Stop following a writer."""
    if not store.unfollow_user(payload.user_id, user_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Unable to unfollow user",
        )
    return StatusResponse()
