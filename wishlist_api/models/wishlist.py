"""Wishlist model type definitions for database operations."""

from datetime import datetime
from typing import TypedDict
from uuid import UUID


class Wishlist(TypedDict):
    """Wishlist table row representation."""

    id: UUID
    name: str
    item: str
    price: str
    location: str
    owner: UUID
    created_at: datetime
    updated_at: datetime
