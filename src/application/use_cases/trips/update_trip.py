from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.ownership import ensure_owner
from src.application.use_cases.trips.create_trip import (
    REQUIRED_TRIP_FIELDS,
    TripAnimalInput,
    build_line_items,
    ensure_required_fields,
)
from src.domain.models.trip import Trip


@dataclass(slots=True)
class UpdateTripInput:
    date: date | None = None
    region: str | None = None
    truck_no: str | None = None
    form_no: str | None = None
    driver_name: str | None = None
    escort_name: str | None = None
    prepared_by_name: str | None = None
    prepared_by_position: str | None = None
    # When given, replaces every existing line item of the trip
    animals: list[TripAnimalInput] | None = None


async def execute(
    uow: UnitOfWork,
    actor_user_id: UUID | None,
    trip_id: UUID,
    payload: UpdateTripInput,
) -> Trip:
    existing = await uow.trips.get(trip_id)
    if not existing:
        raise NotFound("Trip not found")
    ensure_owner(existing.user_id, actor_user_id, "Trip")

    data: dict = {}
    if payload.date is not None:
        data["date"] = payload.date
    for field_name in REQUIRED_TRIP_FIELDS:
        value = getattr(payload, field_name)
        if value is not None:
            data[field_name] = value.strip()
    ensure_required_fields(data)
    for field_name in ("prepared_by_name", "prepared_by_position"):
        value = getattr(payload, field_name)
        if value is not None:
            data[field_name] = value or None

    animals = None
    if payload.animals is not None:
        animals = await build_line_items(uow, trip_id, payload.animals, actor_user_id)
    if not data and animals is None:
        return existing

    updated = await uow.trips.update(trip_id, data, animals)
    if not updated:
        raise NotFound("Trip not found")
    await uow.commit()
    return updated
