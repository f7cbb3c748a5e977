"""Wishlist Pydantic schemas for API request/response models."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

from wishlist_api.models.wishlist import Wishlist
from wishlist_api.services.guards import remove_blank_fields


class WishlistBase(BaseModel):
    """Wishlist fields shared by create and response schemas."""

    name: str = Field(min_length=1, description="Wishlist name, unique per owner")
    item: str = Field(min_length=1, description="Wished-for item")
    price: str = Field(min_length=1, description="Price as entered by the user")
    location: str = Field(min_length=1, description="Where the item can be bought")


class WishlistCreate(WishlistBase):
    """Schema for creating a wishlist; owner comes from the token."""

    model_config = ConfigDict(extra="ignore")


class WishlistUpdate(BaseModel):
    """Schema for updating a wishlist.

    All fields are optional for partial updates.
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    item: str | None = None
    price: str | None = None
    location: str | None = None


class WishlistCreateRequest(BaseModel):
    """Request body for POST /wishlists."""

    wishlist: WishlistCreate


class WishlistUpdateRequest(BaseModel):
    """Request body for PATCH /wishlists/{id}."""

    wishlist: WishlistUpdate

    @model_validator(mode="before")
    @classmethod
    def strip_blank_and_owner(cls, data: Any) -> Any:
        """Drop blank values and any client-supplied owner before validation."""
        data = remove_blank_fields(data)
        if isinstance(data, dict) and isinstance(data.get("wishlist"), dict):
            data["wishlist"].pop("owner", None)
        return data


class WishlistResponse(WishlistBase):
    """A stored wishlist as returned to clients."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID = Field(alias="_id", description="Wishlist unique identifier")
    owner: UUID = Field(description="Auth user id of the owner")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @classmethod
    def from_record(cls, record: Wishlist) -> "WishlistResponse":
        """Map a wishlists table row to the response shape."""
        return cls.model_validate(dict(record))


class WishlistEnvelope(BaseModel):
    """Single wishlist wrapped under its resource key."""

    wishlist: WishlistResponse


class WishlistListEnvelope(BaseModel):
    """All of the requester's wishlists."""

    wishlists: list[WishlistResponse]
