"""Profile business logic service."""

from supabase import Client

from wishlist_api.core.config import get_settings
from wishlist_api.services.owned_resource_service import OwnedResourceService


class ProfileService(OwnedResourceService):
    """Service for managing user-owned profiles."""

    resource_name = "profile"

    def __init__(self, client: Client | None = None) -> None:
        super().__init__(get_settings().profiles_table, client)
