"""Writing records and their vote bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Final, Literal, get_args

WritingTemplate = Literal["blank", "report", "article", "note"]
VoteType = Literal["up", "down"]

WRITING_TEMPLATES: Final[tuple[str, ...]] = get_args(WritingTemplate)


@dataclass
class Writing:
    """A published or draft piece of content owned by ``author_id``.

    ``legal_hash`` fingerprints the content as it was at creation time and is
    left untouched by later edits.
    """

    id: str
    author_id: str
    title: str
    content: str
    template: WritingTemplate
    is_public: bool
    timestamp: datetime
    last_modified: datetime
    legal_hash: str
    background: str | None = None
    font_family: str | None = None
    color_grade: str | None = None
    images: list[str] | None = None
    links: list[str] | None = None
    views: int = 0
    # A voter id lives in at most one of the two sets.
    upvotes: set[str] = field(default_factory=set)
    downvotes: set[str] = field(default_factory=set)
    shares: int = 0

    @property
    def trending_score(self) -> int:
        """Return views + 10 per upvote + 5 per share."""
        return self.views + len(self.upvotes) * 10 + self.shares * 5
