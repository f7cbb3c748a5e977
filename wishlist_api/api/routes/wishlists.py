"""Wishlist API routes."""

from uuid import UUID

from fastapi import APIRouter, status

from wishlist_api.api.deps import CurrentUser, Wishlists
from wishlist_api.schemas.wishlist import (
    WishlistCreateRequest,
    WishlistEnvelope,
    WishlistListEnvelope,
    WishlistResponse,
    WishlistUpdateRequest,
)
from wishlist_api.services.guards import handle_404, require_ownership

router = APIRouter(prefix="/wishlists", tags=["wishlists"])


@router.get(
    "",
    response_model=WishlistListEnvelope,
    summary="List my wishlists",
    description="Returns every wishlist owned by the authenticated user.",
)
async def list_wishlists(user: CurrentUser, service: Wishlists) -> WishlistListEnvelope:
    """List the authenticated user's wishlists.

    Args:
        user: The authenticated user context.
        service: Wishlist service.

    Returns:
        WishlistListEnvelope: The user's wishlists.
    """
    records = await service.list_for_owner(user.user_id)
    return WishlistListEnvelope(wishlists=[WishlistResponse.from_record(r) for r in records])


@router.get(
    "/{wishlist_id}",
    response_model=WishlistEnvelope,
    summary="Get a wishlist",
    description="Returns a single wishlist by ID. Any authenticated user may read it.",
)
async def show_wishlist(wishlist_id: UUID, user: CurrentUser, service: Wishlists) -> WishlistEnvelope:
    """Get a wishlist by ID.

    Raises:
        NotFoundError: 404 if the wishlist does not exist.
    """
    record = handle_404(await service.get(wishlist_id), "Wishlist not found")
    return WishlistEnvelope(wishlist=WishlistResponse.from_record(record))


@router.post(
    "",
    response_model=WishlistEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create a wishlist",
    description=(
        "Creates a wishlist owned by the authenticated user. If the user already "
        "has a wishlist with the same name, that wishlist is overwritten instead."
    ),
)
async def create_wishlist(
    data: WishlistCreateRequest,
    user: CurrentUser,
    service: Wishlists,
) -> WishlistEnvelope:
    """Create a wishlist, or overwrite the caller's wishlist of the same name.

    Responds 201 in both cases.

    Args:
        data: Wishlist creation data.
        user: The authenticated user context.
        service: Wishlist service.

    Returns:
        WishlistEnvelope: The created or updated wishlist.
    """
    record = await service.create_or_update(user.user_id, data.wishlist.model_dump())
    return WishlistEnvelope(wishlist=WishlistResponse.from_record(record))


@router.patch(
    "/{wishlist_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update a wishlist",
    description="Partially updates a wishlist. Only the owner may update it; blank fields are ignored.",
)
async def update_wishlist(
    wishlist_id: UUID,
    data: WishlistUpdateRequest,
    user: CurrentUser,
    service: Wishlists,
) -> None:
    """Update a wishlist owned by the caller.

    Raises:
        NotFoundError: 404 if the wishlist does not exist.
        OwnershipError: 401 if the caller is not the owner.
    """
    record = handle_404(await service.get(wishlist_id), "Wishlist not found")
    require_ownership(user.user_id, record)
    await service.update(record, data.wishlist.model_dump(exclude_unset=True, exclude_none=True))


@router.delete(
    "/{wishlist_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a wishlist",
    description="Deletes a wishlist. Only the owner may delete it.",
)
async def delete_wishlist(wishlist_id: UUID, user: CurrentUser, service: Wishlists) -> None:
    """Delete a wishlist owned by the caller.

    Raises:
        NotFoundError: 404 if the wishlist does not exist.
        OwnershipError: 401 if the caller is not the owner.
    """
    record = handle_404(await service.get(wishlist_id), "Wishlist not found")
    require_ownership(user.user_id, record)
    await service.delete(record["id"])
