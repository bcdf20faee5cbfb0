# src/authentiwrite/api/v1/endpoints/feed.py
"""Feed endpoints for trending and following timelines."""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Query

from authentiwrite.api.v1.dependencies import CredentialsDep, StoreDep, get_token_payload
from authentiwrite.core.settings import settings
from authentiwrite.schemas.writing import WritingListEnvelope
from authentiwrite.services.presenters import to_writing_with_author

router = APIRouter(prefix="/feed", tags=["feed"])


@router.get("", response_model=WritingListEnvelope)
async def get_feed(
    store: StoreDep,
    credentials: CredentialsDep,
    feed_type: Literal["trending", "following"] = Query("trending", alias="type"),
) -> WritingListEnvelope:
    """Return the trending feed, or the caller's following feed.

    The following feed requires a bearer token.
    """
    if feed_type == "following":
        payload = get_token_payload(credentials)
        writings = store.get_following_feed(payload.user_id, settings.following_feed_limit)
    else:
        writings = store.get_trending_writings(settings.trending_feed_limit)

    return WritingListEnvelope(
        writings=[to_writing_with_author(store, w) for w in writings],
    )
