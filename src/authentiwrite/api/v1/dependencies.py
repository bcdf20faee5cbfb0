"""Shared API dependencies for the store and authentication."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from authentiwrite.core.security import TokenPayload, verify_token
from authentiwrite.models import User
from authentiwrite.services.store import Store

# HTTP Bearer scheme; missing credentials are reported by the dependencies below
bearer_scheme = HTTPBearer(auto_error=False)

CredentialsDep = Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)]


def get_store(request: Request) -> Store:
    """Return the store attached to the running application."""
    store: Store | None = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Store not initialized")
    return store


# Type alias for store dependency
StoreDep = Annotated[Store, Depends(get_store)]


def get_token_payload(credentials: CredentialsDep) -> TokenPayload:
    """Verify the bearer token.

    Raises:
        HTTPException: If no token was sent or it fails verification
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token provided",
        )
    payload = verify_token(credentials.credentials)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )
    return payload


def get_optional_token_payload(credentials: CredentialsDep) -> TokenPayload | None:
    """Return token claims when a valid token was sent, otherwise None."""
    if credentials is None:
        return None
    return verify_token(credentials.credentials)


TokenDep = Annotated[TokenPayload, Depends(get_token_payload)]
OptionalTokenDep = Annotated[TokenPayload | None, Depends(get_optional_token_payload)]


def get_current_user(payload: TokenDep, store: StoreDep) -> User:
    """Get the user the bearer token was issued to.

    Raises:
        HTTPException: If the token is invalid or the user no longer exists
    """
    user = store.get_user_by_id(payload.user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return user


# Type alias for current user dependency
CurrentUserDep = Annotated[User, Depends(get_current_user)]
