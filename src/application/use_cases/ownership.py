from __future__ import annotations

from uuid import UUID

from src.application.errors import PermissionDenied


def ensure_owner(owner_id: UUID | None, actor_user_id: UUID | None, kind: str) -> None:
    """Reject writes to records stamped with another user.

    Records without an owner (seed data, rows created before ownership was
    tracked) are writable by any signed-in user.
    """
    if owner_id is None or actor_user_id is None:
        return
    if owner_id != actor_user_id:
        raise PermissionDenied(f"{kind} belongs to another user")
