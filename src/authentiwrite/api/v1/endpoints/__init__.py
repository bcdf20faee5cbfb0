# src/authentiwrite/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .analytics import router as analytics_router
from .auth import router as auth_router
from .feed import router as feed_router
from .users import router as users_router
from .writings import router as writings_router

__all__ = [
    "auth_router",
    "writings_router",
    "feed_router",
    "analytics_router",
    "users_router",
]
