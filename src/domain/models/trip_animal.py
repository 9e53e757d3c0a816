from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from src.domain.models.supplier import Supplier


@dataclass(slots=True)
class TripAnimal:
    """One supplier line item on a trip."""

    id: UUID
    trip_id: UUID
    supplier_id: UUID
    mark: str
    goats_count: int
    sheep_count: int
    user_id: UUID | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    # Joined on read; never persisted
    supplier: Supplier | None = None

    @property
    def total_animals(self) -> int:
        return self.goats_count + self.sheep_count

    @property
    def supplier_name(self) -> str:
        return self.supplier.name if self.supplier else "Unknown"

    @classmethod
    def create(
        cls,
        *,
        trip_id: UUID,
        supplier_id: UUID,
        mark: str,
        goats_count: int,
        sheep_count: int,
        user_id: UUID | None = None,
        created_at: datetime | None = None,
    ) -> TripAnimal:
        return cls(
            id=uuid4(),
            trip_id=trip_id,
            supplier_id=supplier_id,
            mark=mark,
            goats_count=goats_count,
            sheep_count=sheep_count,
            user_id=user_id,
            created_at=created_at or datetime.now(timezone.utc),
        )
