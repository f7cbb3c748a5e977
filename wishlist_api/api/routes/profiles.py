"""Profile API routes."""

from uuid import UUID

from fastapi import APIRouter, status

from wishlist_api.api.deps import CurrentUser, Profiles
from wishlist_api.schemas.profile import (
    ProfileCreateRequest,
    ProfileEnvelope,
    ProfileListEnvelope,
    ProfileResponse,
    ProfileUpdateRequest,
)
from wishlist_api.services.guards import handle_404, require_ownership

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get(
    "",
    response_model=ProfileListEnvelope,
    summary="List my profiles",
    description="Returns every profile owned by the authenticated user.",
)
async def list_profiles(user: CurrentUser, service: Profiles) -> ProfileListEnvelope:
    """List the authenticated user's profiles.

    Args:
        user: The authenticated user context.
        service: Profile service.

    Returns:
        ProfileListEnvelope: The user's profiles.
    """
    records = await service.list_for_owner(user.user_id)
    return ProfileListEnvelope(profiles=[ProfileResponse.from_record(r) for r in records])


@router.get(
    "/{profile_id}",
    response_model=ProfileEnvelope,
    summary="Get a profile",
    description="Returns a single profile by ID. Any authenticated user may read it.",
)
async def show_profile(profile_id: UUID, user: CurrentUser, service: Profiles) -> ProfileEnvelope:
    """Get a profile by ID.

    Raises:
        NotFoundError: 404 if the profile does not exist.
    """
    record = handle_404(await service.get(profile_id), "Profile not found")
    return ProfileEnvelope(profile=ProfileResponse.from_record(record))


@router.post(
    "",
    response_model=ProfileEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create a profile",
    description=(
        "Creates a profile owned by the authenticated user. If the user already "
        "has a profile with the same name, that profile is overwritten instead."
    ),
)
async def create_profile(
    data: ProfileCreateRequest,
    user: CurrentUser,
    service: Profiles,
) -> ProfileEnvelope:
    """Create a profile, or update the caller's profile of the same name.

    Both outcomes respond 201.

    Args:
        data: Profile creation data.
        user: The authenticated user context.
        service: Profile service.

    Returns:
        ProfileEnvelope: The created or updated profile.
    """
    record = await service.create_or_update(user.user_id, data.profile.model_dump())
    return ProfileEnvelope(profile=ProfileResponse.from_record(record))


@router.patch(
    "/{profile_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update a profile",
    description="Partially updates a profile. Only the owner may update it; blank fields are ignored.",
)
async def update_profile(
    profile_id: UUID,
    data: ProfileUpdateRequest,
    user: CurrentUser,
    service: Profiles,
) -> None:
    """Update a profile owned by the caller.

    Raises:
        NotFoundError: 404 if the profile does not exist.
        OwnershipError: 401 if the caller is not the owner.
    """
    record = handle_404(await service.get(profile_id), "Profile not found")
    require_ownership(user.user_id, record)
    await service.update(record, data.profile.model_dump(exclude_unset=True, exclude_none=True))


@router.delete(
    "/{profile_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a profile",
    description="Deletes a profile. Only the owner may delete it.",
)
async def delete_profile(profile_id: UUID, user: CurrentUser, service: Profiles) -> None:
    """Delete a profile owned by the caller.

    Raises:
        NotFoundError: 404 if the profile does not exist.
        OwnershipError: 401 if the caller is not the owner.
    """
    record = handle_404(await service.get(profile_id), "Profile not found")
    require_ownership(user.user_id, record)
    await service.delete(record["id"])
