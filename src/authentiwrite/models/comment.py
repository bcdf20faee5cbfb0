"""Comments attached to writings."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Comment:
    """Reply to a writing. Comments are never edited or deleted."""

    id: str
    writing_id: str
    author_id: str
    content: str
    timestamp: datetime
