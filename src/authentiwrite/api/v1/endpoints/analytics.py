# src/authentiwrite/api/v1/endpoints/analytics.py
"""Engagement analytics for the authenticated writer."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from authentiwrite.api.v1.dependencies import StoreDep, TokenDep
from authentiwrite.schemas.analytics import AnalyticsEnvelope, AnalyticsResponse
from authentiwrite.services.presenters import to_top_writing

router = APIRouter(prefix="/analytics", tags=["analytics"])

TOP_WRITINGS_LIMIT = 5


@router.get("", response_model=AnalyticsEnvelope)
async def get_analytics(payload: TokenDep, store: StoreDep) -> AnalyticsEnvelope:
    """Return the caller's analytics and their most viewed public writings."""
    analytics = store.get_analytics(payload.user_id)
    if analytics is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Analytics not found")

    top = [to_top_writing(w) for w in store.get_top_writings(payload.user_id, TOP_WRITINGS_LIMIT)]
    return AnalyticsEnvelope(
        analytics=AnalyticsResponse.model_validate(analytics).model_copy(
            update={"top_writings": top}
        ),
    )
