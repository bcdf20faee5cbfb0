"""Convert store records into API schemas, redacting private fields."""
from __future__ import annotations

from authentiwrite.models import Comment, Writing
from authentiwrite.schemas.analytics import TopWriting
from authentiwrite.schemas.user import AuthorCard, CommenterCard
from authentiwrite.schemas.writing import CommentResponse, WritingWithAuthor
from authentiwrite.services.store import Store


def to_author_card(store: Store, user_id: str) -> AuthorCard | None:
    """Return the public card for ``user_id`` or None if the user is gone."""
    user = store.get_user_by_id(user_id)
    if user is None:
        return None
    return AuthorCard.model_validate(user)


def to_writing_with_author(store: Store, writing: Writing) -> WritingWithAuthor:
    """Attach the author's card to a writing."""
    return WritingWithAuthor.model_validate(writing).model_copy(
        update={"author": to_author_card(store, writing.author_id)}
    )


def to_comment_out(store: Store, comment: Comment) -> CommentResponse:
    """Attach the commenter's card to a comment."""
    user = store.get_user_by_id(comment.author_id)
    return CommentResponse.model_validate(comment).model_copy(
        update={"author": CommenterCard.model_validate(user) if user is not None else None}
    )


def to_top_writing(writing: Writing) -> TopWriting:
    return TopWriting(
        id=writing.id,
        title=writing.title,
        views=writing.views,
        upvotes=len(writing.upvotes),
        shares=writing.shares,
    )
