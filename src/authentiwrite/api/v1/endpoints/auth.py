# src/authentiwrite/api/v1/endpoints/auth.py
"""Authentication endpoints for the AuthentiWrite API."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from authentiwrite.api.v1.dependencies import CurrentUserDep, StoreDep
from authentiwrite.core.security import create_access_token, validate_email, validate_gov_id
from authentiwrite.schemas.user import (
    AuthResponse,
    LoginRequest,
    MeResponse,
    RegisterRequest,
    UserPrivate,
    UserPrivateProfile,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/register", response_model=AuthResponse)
async def register(payload: RegisterRequest, store: StoreDep) -> AuthResponse:
    """Register a writer by government ID and email.

    Raises:
        HTTPException: 400 on malformed identifiers, 409 if the government ID
            or email is already registered
    """
    if not validate_gov_id(payload.gov_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid government ID format. Use format: GOV123456",
        )
    if not validate_email(payload.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid email format",
        )

    if store.get_user_by_gov_id(payload.gov_id) is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="User with this government ID already exists",
        )
    if store.get_user_by_email(payload.email) is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="User with this email already exists",
        )

    # Accounts are auto-verified until an identity provider is wired in.
    user = store.create_user(
        gov_id=payload.gov_id,
        email=payload.email,
        name=payload.name,
        verified=True,
    )
    logger.info("Registered user %s", user.id)

    return AuthResponse(
        token=create_access_token(user.id, user.email),
        user=UserPrivate.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
async def login(payload: LoginRequest, store: StoreDep) -> AuthResponse:
    """Exchange a government ID and matching email for an access token."""
    if not validate_gov_id(payload.gov_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid government ID format",
        )

    user = store.get_user_by_gov_id(payload.gov_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found. Please register first.",
        )
    if user.email != payload.email:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Email does not match government ID",
        )

    return AuthResponse(
        token=create_access_token(user.id, user.email),
        user=UserPrivate.model_validate(user),
    )


@router.get("/me", response_model=MeResponse)
async def read_me(current_user: CurrentUserDep) -> MeResponse:
    """Return the authenticated user's own profile."""
    return MeResponse(
        user=UserPrivateProfile(
            id=current_user.id,
            name=current_user.name,
            email=current_user.email,
            bio=current_user.bio,
            avatar=current_user.avatar,
            verified=current_user.verified,
            followers=len(current_user.followers),
            following=len(current_user.following),
        )
    )
