from __future__ import annotations

from datetime import date
from typing import Any
from uuid import UUID

from src.application.interfaces.repositories.trips import TripsRepository
from src.domain.models.report import SupplierReportRow
from src.domain.models.supplier import Supplier
from src.domain.models.trip import Trip
from src.domain.models.trip_animal import TripAnimal
from src.infrastructure.local_store.records import (
    supplier_from_record,
    trip_animal_from_record,
    trip_animal_to_record,
    trip_from_record,
    trip_to_record,
)

UPDATABLE_FIELDS = (
    "date",
    "region",
    "truck_no",
    "form_no",
    "driver_name",
    "escort_name",
    "prepared_by_name",
    "prepared_by_position",
)


class TripsLocalRepository(TripsRepository):
    def __init__(self, data: dict[str, list[dict[str, Any]]]) -> None:
        self.data = data

    def _find(self, trip_id: UUID) -> dict[str, Any] | None:
        key = str(trip_id)
        return next((r for r in self.data["trips"] if r["id"] == key), None)

    def _suppliers_by_id(self) -> dict[str, Supplier]:
        return {r["id"]: supplier_from_record(r) for r in self.data["suppliers"]}

    def _enrich(self, record: dict[str, Any]) -> Trip:
        trip = trip_from_record(record)
        suppliers = self._suppliers_by_id()
        children = [r for r in self.data["tripAnimals"] if r["trip_id"] == record["id"]]
        children.sort(key=lambda r: r["created_at"])
        trip.animals = [
            trip_animal_from_record(r, suppliers.get(r["supplier_id"])) for r in children
        ]
        return trip

    async def add(self, trip: Trip) -> Trip:
        record = trip_to_record(trip)
        self.data["trips"].append(record)
        self.data["tripAnimals"].extend(trip_animal_to_record(a) for a in trip.animals)
        return self._enrich(record)

    async def get(self, trip_id: UUID) -> Trip | None:
        record = self._find(trip_id)
        return self._enrich(record) if record else None

    async def list(self) -> list[Trip]:
        trips = [trip_from_record(r) for r in self.data["trips"]]
        return sorted(trips, key=lambda t: t.date, reverse=True)

    async def update(
        self,
        trip_id: UUID,
        data: dict[str, Any],
        animals: list[TripAnimal] | None = None,
    ) -> Trip | None:
        record = self._find(trip_id)
        if record is None:
            return None
        for key, value in data.items():
            if key in UPDATABLE_FIELDS:
                record[key] = value.isoformat() if isinstance(value, date) else value
        if animals is not None:
            key = str(trip_id)
            self.data["tripAnimals"] = [
                r for r in self.data["tripAnimals"] if r["trip_id"] != key
            ] + [trip_animal_to_record(a) for a in animals]
        return self._enrich(record)

    async def delete(self, trip_id: UUID) -> bool:
        key = str(trip_id)
        before = len(self.data["trips"])
        self.data["trips"] = [r for r in self.data["trips"] if r["id"] != key]
        self.data["tripAnimals"] = [r for r in self.data["tripAnimals"] if r["trip_id"] != key]
        return len(self.data["trips"]) < before

    async def list_report_rows(
        self,
        date_from: date,
        date_to: date,
        *,
        region: str | None = None,
        supplier_id: UUID | None = None,
    ) -> list[SupplierReportRow]:
        trips = {r["id"]: trip_from_record(r) for r in self.data["trips"]}
        suppliers = self._suppliers_by_id()
        wanted_supplier = str(supplier_id) if supplier_id is not None else None
        rows: list[SupplierReportRow] = []
        for record in self.data["tripAnimals"]:
            if wanted_supplier is not None and record["supplier_id"] != wanted_supplier:
                continue
            trip = trips.get(record["trip_id"])
            if trip is None:
                continue
            if trip.date < date_from or trip.date > date_to:
                continue
            if region and trip.region != region:
                continue
            animal = trip_animal_from_record(record)
            supplier = suppliers.get(record["supplier_id"])
            rows.append(
                SupplierReportRow(
                    supplier_id=animal.supplier_id,
                    supplier_name=supplier.name if supplier else "Unknown",
                    goats_count=animal.goats_count,
                    sheep_count=animal.sheep_count,
                    trip_date=trip.date,
                    trip_region=trip.region,
                    truck_no=trip.truck_no,
                    form_no=trip.form_no,
                )
            )
        return rows
