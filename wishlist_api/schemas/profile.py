"""Profile Pydantic schemas for API request/response models."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

from wishlist_api.models.profile import Profile
from wishlist_api.services.guards import remove_blank_fields


class ProfileCreate(BaseModel):
    """Fields required to create a profile.

    ``owner`` is never read from the client; the route sets it from the token.
    """

    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1, description="Profile name, unique per owner")
    dob: str = Field(min_length=1, description="Date of birth")


class ProfileUpdate(BaseModel):
    """Schema for updating a profile.

    All fields are optional for partial updates.
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = Field(default=None, description="New profile name")
    dob: str | None = Field(default=None, description="New date of birth")


class ProfileCreateRequest(BaseModel):
    """Request body for POST /profiles."""

    profile: ProfileCreate


class ProfileUpdateRequest(BaseModel):
    """Request body for PATCH /profiles/{id}."""

    profile: ProfileUpdate

    @model_validator(mode="before")
    @classmethod
    def strip_blank_and_owner(cls, data: Any) -> Any:
        """Drop blank values and any client-supplied owner before validation."""
        data = remove_blank_fields(data)
        if isinstance(data, dict) and isinstance(data.get("profile"), dict):
            data["profile"].pop("owner", None)
        return data


class ProfileResponse(BaseModel):
    """A stored profile as returned to clients."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID = Field(alias="_id", description="Profile unique identifier")
    name: str
    dob: str
    owner: UUID = Field(description="Auth user id of the owner")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @classmethod
    def from_record(cls, record: Profile) -> "ProfileResponse":
        """Map a profiles table row to the response shape."""
        return cls.model_validate(dict(record))


class ProfileEnvelope(BaseModel):
    """Single profile wrapped under its resource key."""

    profile: ProfileResponse


class ProfileListEnvelope(BaseModel):
    """All of the requester's profiles."""

    profiles: list[ProfileResponse]
