from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.trip import Trip
from src.domain.models.trip_animal import TripAnimal

REQUIRED_TRIP_FIELDS = ("region", "truck_no", "form_no", "driver_name", "escort_name")


@dataclass(slots=True)
class TripAnimalInput:
    supplier_id: UUID | None
    goats_count: int = 0
    sheep_count: int = 0
    # Falls back to the supplier's default mark when omitted
    mark: str | None = None


@dataclass(slots=True)
class CreateTripInput:
    date: date
    region: str
    truck_no: str
    form_no: str
    driver_name: str
    escort_name: str
    prepared_by_name: str | None = None
    prepared_by_position: str | None = None
    animals: list[TripAnimalInput] = field(default_factory=list)


def validate_line_items(animals: list[TripAnimalInput]) -> None:
    if not animals:
        raise ValidationError("At least one supplier line item is required")
    for index, row in enumerate(animals, start=1):
        if row.supplier_id is None:
            raise ValidationError(
                "Each line item must have a supplier selected", details={"row": index}
            )
        if row.goats_count < 0 or row.sheep_count < 0:
            raise ValidationError("Counts must be zero or greater", details={"row": index})


async def build_line_items(
    uow: UnitOfWork,
    trip_id: UUID,
    animals: list[TripAnimalInput],
    actor_user_id: UUID | None,
) -> list[TripAnimal]:
    """Turn validated input rows into line items owned by ``trip_id``."""
    validate_line_items(animals)
    default_marks: dict[UUID, str] = {}
    for row in animals:
        if row.mark is None and row.supplier_id not in default_marks:
            supplier = await uow.suppliers.get(row.supplier_id)
            default_marks[row.supplier_id] = (supplier.default_mark if supplier else None) or ""

    # Spread timestamps so that ordering by created_at keeps the submitted order
    base = datetime.now(timezone.utc)
    return [
        TripAnimal.create(
            trip_id=trip_id,
            supplier_id=row.supplier_id,
            mark=row.mark if row.mark is not None else default_marks[row.supplier_id],
            goats_count=row.goats_count,
            sheep_count=row.sheep_count,
            user_id=actor_user_id,
            created_at=base + timedelta(microseconds=index),
        )
        for index, row in enumerate(animals)
    ]


def ensure_required_fields(values: dict) -> None:
    missing = [name for name in REQUIRED_TRIP_FIELDS if name in values and not values[name]]
    if missing:
        raise ValidationError("Missing required trip fields", details={"fields": missing})


async def execute(
    uow: UnitOfWork,
    actor_user_id: UUID | None,
    payload: CreateTripInput,
) -> Trip:
    header = {name: (getattr(payload, name) or "").strip() for name in REQUIRED_TRIP_FIELDS}
    ensure_required_fields(header)
    trip = Trip.create(
        date=payload.date,
        prepared_by_name=payload.prepared_by_name,
        prepared_by_position=payload.prepared_by_position,
        user_id=actor_user_id,
        **header,
    )
    trip.animals = await build_line_items(uow, trip.id, payload.animals, actor_user_id)
    created = await uow.trips.add(trip)
    await uow.commit()
    return created
