from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class TripAnimalORM(Base):
    __tablename__ = "trip_animals"
    __table_args__ = (
        CheckConstraint("goats_count >= 0", name="ck_trip_animals_goats_non_negative"),
        CheckConstraint("sheep_count >= 0", name="ck_trip_animals_sheep_non_negative"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    trip_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("trips.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # No foreign key: a dangling supplier reference renders as "Unknown"
    supplier_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, index=True)
    mark: Mapped[str] = mapped_column(String(64), nullable=False, default="")
    goats_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    sheep_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # Stored for SQL-side reporting; the domain always recomputes it
    total_animals: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    user_id: Mapped[UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
