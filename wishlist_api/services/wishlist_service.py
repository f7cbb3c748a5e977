"""Wishlist business logic service."""

from supabase import Client

from wishlist_api.core.config import get_settings
from wishlist_api.services.owned_resource_service import OwnedResourceService


class WishlistService(OwnedResourceService):
    """Service for managing user-owned wishlists."""

    resource_name = "wishlist"

    def __init__(self, client: Client | None = None) -> None:
        super().__init__(get_settings().wishlists_table, client)
