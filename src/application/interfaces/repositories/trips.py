from __future__ import annotations

from datetime import date
from typing import Any, Protocol
from uuid import UUID

from src.domain.models.report import SupplierReportRow
from src.domain.models.trip import Trip
from src.domain.models.trip_animal import TripAnimal


class TripsRepository(Protocol):
    async def add(self, trip: Trip) -> Trip: ...

    async def get(self, trip_id: UUID) -> Trip | None: ...

    async def list(self) -> list[Trip]: ...

    async def update(
        self,
        trip_id: UUID,
        data: dict[str, Any],
        animals: list[TripAnimal] | None = None,
    ) -> Trip | None: ...

    async def delete(self, trip_id: UUID) -> bool: ...

    async def list_report_rows(
        self,
        date_from: date,
        date_to: date,
        *,
        region: str | None = None,
        supplier_id: UUID | None = None,
    ) -> list[SupplierReportRow]: ...
