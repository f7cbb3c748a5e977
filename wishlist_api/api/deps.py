"""FastAPI dependency injection functions."""

from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from wishlist_api.api.middleware.auth import AuthError, AuthErrorCode, decode_jwt
from wishlist_api.schemas.auth import UserContext
from wishlist_api.services.profile_service import ProfileService
from wishlist_api.services.wishlist_service import WishlistService


async def get_current_user(
    authorization: Annotated[str, Header(description="Bearer token")] = "",
) -> UserContext:
    """Extract and validate the current user from the Authorization header.

    Every resource route depends on this, so an invalid token fails the
    request with 401 before any handler code runs.

    Args:
        authorization: The Authorization header value (Bearer token).

    Returns:
        UserContext: The authenticated user's context.

    Raises:
        HTTPException: 401 if token is missing, invalid, or expired.
    """
    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization header required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    # Extract the token from "Bearer <token>" format
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authorization header format. Expected: Bearer <token>",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = parts[1]

    try:
        payload = decode_jwt(token)
        return payload.to_user_context()

    except AuthError as e:
        if e.code == AuthErrorCode.TOKEN_EXPIRED:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Token has expired",
                headers={"WWW-Authenticate": "Bearer"},
            ) from e

        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        ) from e


def get_profile_service() -> ProfileService:
    """Provide the profile service for a request."""
    return ProfileService()


def get_wishlist_service() -> WishlistService:
    """Provide the wishlist service for a request."""
    return WishlistService()


CurrentUser = Annotated[UserContext, Depends(get_current_user)]
Profiles = Annotated[ProfileService, Depends(get_profile_service)]
Wishlists = Annotated[WishlistService, Depends(get_wishlist_service)]
