"""Analytics and profile summary schemas."""

from __future__ import annotations

from .common import ApiModel, RecordModel
from .user import UserProfile
from .writing import WritingResponse


class TopWriting(RecordModel):
    """Engagement summary of one writing."""

    id: str
    title: str
    views: int
    upvotes: int
    shares: int


class AnalyticsResponse(RecordModel):
    """Full analytics record with the owner's top writings."""

    user_id: str
    total_views: int
    total_upvotes: int
    total_shares: int
    total_earnings: float
    writings_count: int
    followers_count: int
    top_writings: list[TopWriting] = []


class AnalyticsEnvelope(ApiModel):
    success: bool = True
    analytics: AnalyticsResponse


class AnalyticsSummary(RecordModel):
    """Subset of analytics visible on public profiles."""

    total_views: int
    total_upvotes: int
    writings_count: int


class UserProfileEnvelope(ApiModel):
    """Public profile page payload."""

    success: bool = True
    user: UserProfile
    analytics: AnalyticsSummary | None = None
    recent_writings: list[WritingResponse]
