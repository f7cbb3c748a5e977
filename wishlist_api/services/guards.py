"""Pass-through checks applied around record lookups and updates."""

from typing import Any, Mapping, TypeVar
from uuid import UUID

from wishlist_api.api.middleware.error_handler import NotFoundError, OwnershipError

RecordT = TypeVar("RecordT", bound=Mapping[str, Any])


def handle_404(record: RecordT | None, message: str = "Resource not found") -> RecordT:
    """Return ``record`` unchanged, or raise NotFoundError if the lookup came back empty.

    Args:
        record: Result of a single-record lookup.
        message: Error message for the 404 body.

    Returns:
        The same record.

    Raises:
        NotFoundError: If ``record`` is None or empty.
    """
    if not record:
        raise NotFoundError(message)
    return record


def require_ownership(requester_id: UUID | str, record: Mapping[str, Any]) -> None:
    """Raise OwnershipError unless ``requester_id`` owns ``record``.

    Both sides are compared as strings since the store hands back the
    owner column as text.

    Args:
        requester_id: Authenticated user id of the caller.
        record: The fetched record, carrying an ``owner`` key.

    Raises:
        OwnershipError: If the owner differs from the requester.
    """
    if str(record.get("owner")) != str(requester_id):
        raise OwnershipError()


def remove_blank_fields(payload: Any) -> Any:
    """Drop empty-string values from a nested update payload.

    ``{"wishlist": {"name": "", "item": "Bike"}}`` becomes
    ``{"wishlist": {"item": "Bike"}}``. Only exact ``""`` values are
    removed; anything that is not a mapping is returned as is.
    """
    if not isinstance(payload, Mapping):
        return payload

    cleaned: dict[str, Any] = {}
    for key, value in payload.items():
        if isinstance(value, Mapping):
            cleaned[key] = {k: v for k, v in value.items() if v != ""}
        else:
            cleaned[key] = value
    return cleaned
