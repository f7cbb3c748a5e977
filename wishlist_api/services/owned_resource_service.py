"""Shared persistence logic for resources scoped to an owning user."""

import logging
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from postgrest.exceptions import APIError as PostgrestAPIError
from supabase import Client

from wishlist_api.api.middleware.error_handler import NotFoundError, ValidationError
from wishlist_api.core.supabase import get_supabase_client

logger = logging.getLogger(__name__)

# Postgres error codes that mean the row itself was rejected
_INVALID_ROW_CODES = {
    "23502",  # not_null_violation
    "22P02",  # invalid_text_representation
    "23514",  # check_violation
}


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class OwnedResourceService:
    """CRUD against one table whose rows carry an ``owner`` column.

    Subclasses only pick the table; the create/update semantics are
    identical for every resource kind.
    """

    resource_name = "resource"

    def __init__(self, table: str, client: Client | None = None) -> None:
        """Initialize the service with a Supabase client.

        Args:
            table: Name of the backing table.
            client: Client to use instead of the shared singleton.
        """
        self.table = table
        self.client = client if client is not None else get_supabase_client()

    def _execute(self, query: Any) -> Any:
        """Run a query, turning row rejections into validation errors."""
        try:
            return query.execute()
        except PostgrestAPIError as e:
            if e.code in _INVALID_ROW_CODES:
                raise ValidationError(
                    f"Invalid {self.resource_name}: {e.message}",
                    details=[{"msg": e.message or "Invalid value", "type": f"db_{e.code}"}],
                ) from e
            raise

    async def list_for_owner(self, owner_id: UUID) -> list[dict[str, Any]]:
        """Get every record owned by a user, oldest first.

        Args:
            owner_id: The requester's user ID.

        Returns:
            list[dict]: Matching records, possibly empty.
        """
        response = self._execute(
            self.client.table(self.table)
            .select("*")
            .eq("owner", str(owner_id))
            .order("created_at")
        )
        return response.data or []

    async def get(self, record_id: UUID) -> dict[str, Any] | None:
        """Get a record by ID regardless of owner.

        Args:
            record_id: The record's UUID.

        Returns:
            dict | None: The record or None if not found.
        """
        response = self._execute(
            self.client.table(self.table)
            .select("*")
            .eq("id", str(record_id))
            .limit(1)
        )
        return response.data[0] if response.data else None

    async def find_by_name(self, owner_id: UUID, name: str) -> dict[str, Any] | None:
        """Get the owner's record with the given name, if any.

        Args:
            owner_id: The requester's user ID.
            name: Record name to match exactly.

        Returns:
            dict | None: The first matching record or None.
        """
        response = self._execute(
            self.client.table(self.table)
            .select("*")
            .eq("owner", str(owner_id))
            .eq("name", name)
            .limit(1)
        )
        return response.data[0] if response.data else None

    async def create_or_update(self, owner_id: UUID, data: dict[str, Any]) -> dict[str, Any]:
        """Insert a record, or overwrite the owner's record with the same name.

        The owner is always taken from ``owner_id``. The name lookup and the
        write are separate calls, so two concurrent creates with the same
        name can both insert.

        Args:
            owner_id: The requester's user ID.
            data: Validated create payload.

        Returns:
            dict: The inserted or updated record.
        """
        payload = {**data, "owner": str(owner_id)}

        existing = await self.find_by_name(owner_id, payload["name"])
        if existing:
            logger.info(
                "%s %s already exists for owner %s, updating in place",
                self.resource_name,
                existing["id"],
                owner_id,
            )
            return await self.update(existing, payload)

        now = _now()
        response = self._execute(
            self.client.table(self.table).insert({**payload, "created_at": now, "updated_at": now})
        )
        record = response.data[0]
        logger.info("Created %s %s for owner %s", self.resource_name, record["id"], owner_id)
        return record

    async def update(self, record: dict[str, Any], changes: dict[str, Any]) -> dict[str, Any]:
        """Merge ``changes`` onto a loaded record and write the result.

        Args:
            record: The current record as loaded from the store.
            changes: Fields to overwrite; ``owner`` is ignored.

        Returns:
            dict: The record after the write.

        Raises:
            NotFoundError: If the record was deleted since it was loaded.
        """
        changes = {key: value for key, value in changes.items() if key not in ("id", "owner")}
        merged = {**record, **changes, "updated_at": _now()}

        write = {key: merged[key] for key in (*changes, "updated_at")}
        response = self._execute(
            self.client.table(self.table)
            .update(write)
            .eq("id", str(record["id"]))
        )
        if not response.data:
            raise NotFoundError(f"{self.resource_name.capitalize()} not found")
        logger.info("Updated %s %s (%s)", self.resource_name, record["id"], ", ".join(changes) or "no fields")
        return response.data[0]

    async def delete(self, record_id: UUID) -> None:
        """Delete a record by ID.

        Args:
            record_id: The record's UUID.
        """
        self._execute(
            self.client.table(self.table)
            .delete()
            .eq("id", str(record_id))
        )
        logger.info("Deleted %s %s", self.resource_name, record_id)
