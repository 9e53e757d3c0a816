from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.trip import Trip


async def execute(uow: UnitOfWork, trip_id: UUID) -> Trip:
    trip = await uow.trips.get(trip_id)
    if not trip:
        raise NotFound("Trip not found")
    return trip
