from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class Supplier:
    id: UUID
    name: str
    phone: str | None = None
    region: str | None = None
    default_mark: str | None = None
    user_id: UUID | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        *,
        name: str,
        phone: str | None = None,
        region: str | None = None,
        default_mark: str | None = None,
        user_id: UUID | None = None,
    ) -> Supplier:
        return cls(
            id=uuid4(),
            name=name,
            phone=phone,
            region=region,
            default_mark=default_mark,
            user_id=user_id,
            created_at=datetime.now(timezone.utc),
        )
