from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import Date, DateTime, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class TripORM(Base):
    __tablename__ = "trips"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    region: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    truck_no: Mapped[str] = mapped_column(String(64), nullable=False)
    form_no: Mapped[str] = mapped_column(String(64), nullable=False)
    driver_name: Mapped[str] = mapped_column(String(255), nullable=False)
    escort_name: Mapped[str] = mapped_column(String(255), nullable=False)
    prepared_by_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    prepared_by_position: Mapped[str | None] = mapped_column(String(255), nullable=True)
    user_id: Mapped[UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
