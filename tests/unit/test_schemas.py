"""Unit tests for resource request/response schemas."""

import pytest
from pydantic import ValidationError

from wishlist_api.schemas.profile import ProfileCreateRequest, ProfileResponse, ProfileUpdateRequest
from wishlist_api.schemas.wishlist import WishlistCreateRequest, WishlistResponse, WishlistUpdateRequest

ROW = {
    "id": "770e8400-e29b-41d4-a716-446655440000",
    "name": "Bday",
    "item": "Bike",
    "price": "100",
    "location": "Store",
    "owner": "550e8400-e29b-41d4-a716-446655440000",
    "created_at": "2024-01-01T00:00:00+00:00",
    "updated_at": "2024-01-02T00:00:00+00:00",
}


class TestUpdateRequests:
    """Update bodies are cleaned before validation."""

    def test_blank_fields_are_dropped(self) -> None:
        body = WishlistUpdateRequest.model_validate({"wishlist": {"name": "", "item": "Bike"}})

        assert body.wishlist.model_dump(exclude_unset=True, exclude_none=True) == {"item": "Bike"}

    def test_owner_is_stripped(self) -> None:
        body = ProfileUpdateRequest.model_validate(
            {"profile": {"owner": "660e8400-e29b-41d4-a716-446655440000", "dob": "1990-05-05"}}
        )

        assert body.profile.model_dump(exclude_unset=True) == {"dob": "1990-05-05"}

    def test_missing_envelope_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            WishlistUpdateRequest.model_validate({"item": "Bike"})


class TestCreateRequests:
    """Create bodies require every declared field."""

    def test_missing_field_is_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            WishlistCreateRequest.model_validate({"wishlist": {"name": "Bday", "item": "Bike"}})

        missing = {error["loc"][-1] for error in exc_info.value.errors()}
        assert missing == {"price", "location"}

    def test_blank_required_field_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ProfileCreateRequest.model_validate({"profile": {"name": "", "dob": "2000-01-01"}})

    def test_client_owner_is_ignored(self) -> None:
        body = ProfileCreateRequest.model_validate(
            {"profile": {"name": "Me", "dob": "2000-01-01", "owner": "someone-else"}}
        )

        assert body.profile.model_dump() == {"name": "Me", "dob": "2000-01-01"}


class TestResponses:
    """Stored rows are serialized with the public field names."""

    def test_wishlist_serializes_with_aliases(self) -> None:
        data = WishlistResponse.from_record(ROW).model_dump(mode="json", by_alias=True)

        assert data["_id"] == ROW["id"]
        assert data["owner"] == ROW["owner"]
        assert set(data) == {"_id", "name", "item", "price", "location", "owner", "createdAt", "updatedAt"}

    def test_profile_accepts_aliased_input(self) -> None:
        profile = ProfileResponse.model_validate(
            {
                "_id": ROW["id"],
                "name": "Me",
                "dob": "2000-01-01",
                "owner": ROW["owner"],
                "createdAt": ROW["created_at"],
                "updatedAt": ROW["updated_at"],
            }
        )

        assert str(profile.id) == ROW["id"]
