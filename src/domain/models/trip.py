from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4

from src.domain.models.trip_animal import TripAnimal


@dataclass(slots=True)
class Trip:
    id: UUID
    date: date
    region: str
    truck_no: str
    form_no: str
    driver_name: str
    escort_name: str
    prepared_by_name: str | None = None
    prepared_by_position: str | None = None
    user_id: UUID | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    animals: list[TripAnimal] = field(default_factory=list)

    @property
    def total_goats(self) -> int:
        return sum(a.goats_count for a in self.animals)

    @property
    def total_sheep(self) -> int:
        return sum(a.sheep_count for a in self.animals)

    @property
    def total_animals(self) -> int:
        return sum(a.total_animals for a in self.animals)

    @classmethod
    def create(
        cls,
        *,
        date: date,
        region: str,
        truck_no: str,
        form_no: str,
        driver_name: str,
        escort_name: str,
        prepared_by_name: str | None = None,
        prepared_by_position: str | None = None,
        user_id: UUID | None = None,
    ) -> Trip:
        return cls(
            id=uuid4(),
            date=date,
            region=region,
            truck_no=truck_no,
            form_no=form_no,
            driver_name=driver_name,
            escort_name=escort_name,
            prepared_by_name=prepared_by_name,
            prepared_by_position=prepared_by_position,
            user_id=user_id,
            created_at=datetime.now(timezone.utc),
        )
