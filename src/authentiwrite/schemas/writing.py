"""Writing, vote and comment schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field, field_validator

from authentiwrite.models import VoteType, WritingTemplate

from .common import ApiModel, RecordModel
from .user import AuthorCard, CommenterCard


class WritingCreate(ApiModel):
    """Schema for creating a new writing."""

    title: str = Field(..., min_length=1, max_length=300)
    content: str = Field(..., min_length=1)
    template: WritingTemplate = "blank"
    is_public: bool = False
    background: str | None = None
    font_family: str | None = None
    color_grade: str | None = None
    images: list[str] | None = None
    links: list[str] | None = None


class WritingUpdate(ApiModel):
    """Partial update of a writing; only supplied fields are merged."""

    title: str | None = Field(None, min_length=1, max_length=300)
    content: str | None = Field(None, min_length=1)
    template: WritingTemplate | None = None
    is_public: bool | None = None
    background: str | None = None
    font_family: str | None = None
    color_grade: str | None = None
    images: list[str] | None = None
    links: list[str] | None = None

    @field_validator("title", "content", "template", "is_public")
    @classmethod
    def _reject_null(cls, v: object) -> object:
        # These may be omitted but never cleared.
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class WritingResponse(RecordModel):
    """Writing as exposed through the API."""

    id: str
    author_id: str
    title: str
    content: str
    template: WritingTemplate
    is_public: bool
    timestamp: datetime
    last_modified: datetime
    background: str | None = None
    font_family: str | None = None
    color_grade: str | None = None
    images: list[str] | None = None
    links: list[str] | None = None
    views: int
    upvotes: list[str]
    downvotes: list[str]
    shares: int
    legal_hash: str


class WritingWithAuthor(WritingResponse):
    """Writing decorated with its author's card."""

    author: AuthorCard | None = None


class CommentCreate(ApiModel):
    """Schema for posting a comment."""

    content: str = Field(..., max_length=5000)


class CommentResponse(RecordModel):
    """Comment decorated with its author's card."""

    id: str
    writing_id: str
    author_id: str
    content: str
    timestamp: datetime
    author: CommenterCard | None = None


class VoteCreate(ApiModel):
    """Schema for casting a vote."""

    vote_type: VoteType = Field(..., description="'up' or 'down'")


class VoteResponse(ApiModel):
    """Vote tallies after a vote is recorded."""

    success: bool = True
    upvotes: int
    downvotes: int


class ShareResponse(ApiModel):
    """Share count after a share is recorded."""

    success: bool = True
    shares: int


class WritingEnvelope(ApiModel):
    success: bool = True
    writing: WritingResponse


class WritingListEnvelope(ApiModel):
    success: bool = True
    writings: list[WritingWithAuthor]


class WritingDetailEnvelope(ApiModel):
    """Writing with author and comment thread."""

    success: bool = True
    writing: WritingResponse
    author: AuthorCard | None = None
    comments: list[CommentResponse]


class CommentEnvelope(ApiModel):
    success: bool = True
    comment: CommentResponse
