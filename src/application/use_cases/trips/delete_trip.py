from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.ownership import ensure_owner


async def execute(uow: UnitOfWork, actor_user_id: UUID | None, trip_id: UUID) -> None:
    existing = await uow.trips.get(trip_id)
    if not existing:
        raise NotFound("Trip not found")
    ensure_owner(existing.user_id, actor_user_id, "Trip")
    deleted = await uow.trips.delete(trip_id)
    if not deleted:
        raise NotFound("Trip not found")
    await uow.commit()
