"""User identity records."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class User:
    """Registered writer keyed by an opaque id.

    ``gov_id`` and ``email`` are unique across users; the store keeps
    secondary indexes for both. Follow relationships are stored on both
    sides as sets of user ids.
    """

    id: str
    gov_id: str
    email: str
    name: str
    verified: bool
    created_at: datetime
    bio: str | None = None
    avatar: str | None = None
    followers: set[str] = field(default_factory=set)
    following: set[str] = field(default_factory=set)
