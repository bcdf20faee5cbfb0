"""Per-user engagement aggregates."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Analytics:
    """Derived counters maintained by the store alongside each user."""

    user_id: str
    total_views: int = 0
    total_upvotes: int = 0
    total_shares: int = 0
    total_earnings: float = 0.0
    writings_count: int = 0
    followers_count: int = 0
