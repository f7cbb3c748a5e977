"""Profile model type definitions for database operations."""

from datetime import datetime
from typing import TypedDict
from uuid import UUID


class Profile(TypedDict):
    """Profile table row representation.

    Maps directly to the profiles table. ``owner`` holds the auth user id
    of the caller that created the row.
    """

    id: UUID
    name: str
    dob: str
    owner: UUID
    created_at: datetime
    updated_at: datetime
