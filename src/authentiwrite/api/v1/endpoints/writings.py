# src/authentiwrite/api/v1/endpoints/writings.py
"""Writing-related endpoints for the AuthentiWrite API."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, status

from authentiwrite.api.v1.dependencies import (
    CredentialsDep,
    OptionalTokenDep,
    StoreDep,
    TokenDep,
)
from authentiwrite.core.security import verify_token
from authentiwrite.models import Writing
from authentiwrite.schemas.common import StatusResponse
from authentiwrite.schemas.writing import (
    CommentCreate,
    CommentEnvelope,
    ShareResponse,
    VoteCreate,
    VoteResponse,
    WritingCreate,
    WritingDetailEnvelope,
    WritingEnvelope,
    WritingListEnvelope,
    WritingResponse,
    WritingUpdate,
    WritingWithAuthor,
)
from authentiwrite.services.presenters import to_author_card, to_comment_out
from authentiwrite.services.store import Store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/writings", tags=["writings"])


def _get_writing_or_404(store: Store, writing_id: str) -> Writing:
    writing = store.get_writing_by_id(writing_id)
    if writing is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Writing not found")
    return writing


def _get_owned_writing(store: Store, writing_id: str, user_id: str) -> Writing:
    writing = _get_writing_or_404(store, writing_id)
    if writing.author_id != user_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Unauthorized")
    return writing


@router.post("", response_model=WritingEnvelope, status_code=status.HTTP_200_OK)
async def create_writing(
    writing_data: WritingCreate,
    payload: TokenDep,
    store: StoreDep,
) -> WritingEnvelope:
    """Publish a new writing (or save a private draft) for the caller."""
    writing = store.create_writing(
        author_id=payload.user_id,
        title=writing_data.title,
        content=writing_data.content,
        template=writing_data.template,
        is_public=writing_data.is_public,
        background=writing_data.background,
        font_family=writing_data.font_family,
        color_grade=writing_data.color_grade,
        images=writing_data.images,
        links=writing_data.links,
    )
    logger.info("User %s created writing %s", payload.user_id, writing.id)
    return WritingEnvelope(writing=WritingResponse.model_validate(writing))


@router.get("", response_model=WritingListEnvelope)
async def list_writings(
    store: StoreDep,
    payload: OptionalTokenDep,
    author_id: str | None = Query(None, alias="authorId", description="Filter by author"),
) -> WritingListEnvelope:
    """List public writings, or one author's writings.

    Authors see their own private drafts; everyone else only sees public
    writings.
    """
    if author_id is None:
        writings = store.get_public_writings()
    else:
        writings = store.get_writings_by_author(author_id)
        if payload is None or payload.user_id != author_id:
            writings = [w for w in writings if w.is_public]

    return WritingListEnvelope(
        writings=[WritingWithAuthor.model_validate(w) for w in writings],
    )


@router.get("/{writing_id}", response_model=WritingDetailEnvelope)
async def get_writing(
    writing_id: str,
    store: StoreDep,
    credentials: CredentialsDep,
) -> WritingDetailEnvelope:
    """Get a writing with its author and comments.

    Public reads count as a view. Private writings are visible to their
    author only.

    Raises:
        HTTPException: 404 if unknown, 401 without a token and 403 for a
            foreign or invalid token on a private writing
    """
    writing = _get_writing_or_404(store, writing_id)

    if not writing.is_public:
        if credentials is None:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
        payload = verify_token(credentials.credentials)
        if payload is None or payload.user_id != writing.author_id:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Unauthorized")
    else:
        store.increment_views(writing_id)

    comments = store.get_comments_by_writing(writing_id)
    return WritingDetailEnvelope(
        writing=WritingResponse.model_validate(writing),
        author=to_author_card(store, writing.author_id),
        comments=[to_comment_out(store, c) for c in comments],
    )


@router.put("/{writing_id}", response_model=WritingEnvelope)
async def update_writing(
    writing_id: str,
    update_data: WritingUpdate,
    payload: TokenDep,
    store: StoreDep,
) -> WritingEnvelope:
    """Apply a partial update to one of the caller's writings."""
    _get_owned_writing(store, writing_id, payload.user_id)

    updated = store.update_writing(writing_id, **update_data.model_dump(exclude_unset=True))
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Writing not found")
    return WritingEnvelope(writing=WritingResponse.model_validate(updated))


@router.delete("/{writing_id}", response_model=StatusResponse)
async def delete_writing(
    writing_id: str,
    payload: TokenDep,
    store: StoreDep,
) -> StatusResponse:
    """Delete one of the caller's writings."""
    _get_owned_writing(store, writing_id, payload.user_id)

    store.delete_writing(writing_id)
    logger.info("User %s deleted writing %s", payload.user_id, writing_id)
    return StatusResponse(message="Writing deleted successfully")


@router.post("/{writing_id}/vote", response_model=VoteResponse)
async def vote_writing(
    writing_id: str,
    vote_data: VoteCreate,
    payload: TokenDep,
    store: StoreDep,
) -> VoteResponse:
    """Up- or down-vote a writing, replacing the caller's previous vote."""
    if not store.vote_writing(writing_id, payload.user_id, vote_data.vote_type):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Writing not found")

    writing = store.get_writing_by_id(writing_id)
    return VoteResponse(
        upvotes=len(writing.upvotes) if writing else 0,
        downvotes=len(writing.downvotes) if writing else 0,
    )


@router.post("/{writing_id}/comment", response_model=CommentEnvelope)
async def comment_on_writing(
    writing_id: str,
    comment_data: CommentCreate,
    payload: TokenDep,
    store: StoreDep,
) -> CommentEnvelope:
    """Add a comment to a writing."""
    content = comment_data.content.strip()
    if not content:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Comment content is required",
        )
    _get_writing_or_404(store, writing_id)

    comment = store.create_comment(
        writing_id=writing_id,
        author_id=payload.user_id,
        content=content,
    )
    return CommentEnvelope(comment=to_comment_out(store, comment))


@router.post("/{writing_id}/share", response_model=ShareResponse)
async def share_writing(writing_id: str, store: StoreDep) -> ShareResponse:
    """Record a share of a writing."""
    writing = _get_writing_or_404(store, writing_id)

    store.increment_shares(writing_id)
    return ShareResponse(shares=writing.shares)
