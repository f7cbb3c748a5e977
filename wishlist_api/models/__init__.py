"""Database model type definitions."""

from wishlist_api.models.profile import Profile
from wishlist_api.models.wishlist import Wishlist

__all__ = [
    "Profile",
    "Wishlist",
]
