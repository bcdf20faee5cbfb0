"""In-memory entity records for the AuthentiWrite store."""

from .analytics import Analytics
from .comment import Comment
from .user import User
from .writing import WRITING_TEMPLATES, VoteType, Writing, WritingTemplate

__all__ = [
    "Analytics",
    "Comment",
    "User",
    "Writing", "WritingTemplate", "WRITING_TEMPLATES", "VoteType",
]
