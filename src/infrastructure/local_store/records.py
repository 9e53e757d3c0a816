"""Conversions between domain entities and the JSON records kept in the local store."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any
from uuid import UUID

from src.domain.models.supplier import Supplier
from src.domain.models.trip import Trip
from src.domain.models.trip_animal import TripAnimal


def _uuid_or_none(value: Any) -> UUID | None:
    return UUID(str(value)) if value else None


def supplier_to_record(supplier: Supplier) -> dict[str, Any]:
    return {
        "id": str(supplier.id),
        "name": supplier.name,
        "phone": supplier.phone,
        "region": supplier.region,
        "default_mark": supplier.default_mark,
        "user_id": str(supplier.user_id) if supplier.user_id else None,
        "created_at": supplier.created_at.isoformat(),
    }


def supplier_from_record(record: dict[str, Any]) -> Supplier:
    return Supplier(
        id=UUID(str(record["id"])),
        name=record.get("name") or "",
        phone=record.get("phone"),
        region=record.get("region"),
        default_mark=record.get("default_mark"),
        user_id=_uuid_or_none(record.get("user_id")),
        created_at=datetime.fromisoformat(record["created_at"]),
    )


def trip_to_record(trip: Trip) -> dict[str, Any]:
    return {
        "id": str(trip.id),
        "date": trip.date.isoformat(),
        "region": trip.region,
        "truck_no": trip.truck_no,
        "form_no": trip.form_no,
        "driver_name": trip.driver_name,
        "escort_name": trip.escort_name,
        "prepared_by_name": trip.prepared_by_name,
        "prepared_by_position": trip.prepared_by_position,
        "user_id": str(trip.user_id) if trip.user_id else None,
        "created_at": trip.created_at.isoformat(),
    }


def trip_from_record(record: dict[str, Any]) -> Trip:
    return Trip(
        id=UUID(str(record["id"])),
        # Stored dates may carry a time part; only the calendar date matters
        date=date.fromisoformat(str(record["date"])[:10]),
        region=record.get("region") or "",
        truck_no=record.get("truck_no") or "",
        form_no=record.get("form_no") or "",
        driver_name=record.get("driver_name") or "",
        escort_name=record.get("escort_name") or "",
        prepared_by_name=record.get("prepared_by_name"),
        prepared_by_position=record.get("prepared_by_position"),
        user_id=_uuid_or_none(record.get("user_id")),
        created_at=datetime.fromisoformat(record["created_at"]),
    )


def trip_animal_to_record(animal: TripAnimal) -> dict[str, Any]:
    return {
        "id": str(animal.id),
        "trip_id": str(animal.trip_id),
        "supplier_id": str(animal.supplier_id),
        "mark": animal.mark,
        "goats_count": animal.goats_count,
        "sheep_count": animal.sheep_count,
        # Kept for readers of the raw file; recomputed on load
        "total_animals": animal.total_animals,
        "user_id": str(animal.user_id) if animal.user_id else None,
        "created_at": animal.created_at.isoformat(timespec="microseconds"),
    }


def trip_animal_from_record(
    record: dict[str, Any], supplier: Supplier | None = None
) -> TripAnimal:
    return TripAnimal(
        id=UUID(str(record["id"])),
        trip_id=UUID(str(record["trip_id"])),
        supplier_id=UUID(str(record["supplier_id"])),
        mark=record.get("mark") or "",
        goats_count=int(record.get("goats_count") or 0),
        sheep_count=int(record.get("sheep_count") or 0),
        user_id=_uuid_or_none(record.get("user_id")),
        created_at=datetime.fromisoformat(record["created_at"]),
        supplier=supplier,
    )
