# src/authentiwrite/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    analytics_router,
    auth_router,
    feed_router,
    users_router,
    writings_router,
)

__all__ = [
    "auth_router",
    "writings_router",
    "feed_router",
    "analytics_router",
    "users_router",
]
