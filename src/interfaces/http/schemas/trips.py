from __future__ import annotations

import datetime as dt
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.interfaces.http.schemas.suppliers import SupplierResponse


class TripAnimalIn(BaseModel):
    supplier_id: UUID | None = None
    mark: str | None = None
    goats_count: int = Field(default=0, ge=0)
    sheep_count: int = Field(default=0, ge=0)


class TripCreate(BaseModel):
    date: dt.date
    region: str
    truck_no: str
    form_no: str
    driver_name: str
    escort_name: str
    prepared_by_name: str | None = None
    prepared_by_position: str | None = None
    animals: list[TripAnimalIn]


class TripUpdate(BaseModel):
    date: dt.date | None = None
    region: str | None = None
    truck_no: str | None = None
    form_no: str | None = None
    driver_name: str | None = None
    escort_name: str | None = None
    prepared_by_name: str | None = None
    prepared_by_position: str | None = None
    # Replaces all line items when present
    animals: list[TripAnimalIn] | None = None


class TripAnimalResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    trip_id: UUID
    supplier_id: UUID
    mark: str
    goats_count: int
    sheep_count: int
    total_animals: int
    created_at: dt.datetime
    supplier: SupplierResponse | None = None


class TripTotals(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    goats: int
    sheep: int
    total: int


class TripResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    date: dt.date
    region: str
    truck_no: str
    form_no: str
    driver_name: str
    escort_name: str
    prepared_by_name: str | None
    prepared_by_position: str | None
    user_id: UUID | None = None
    created_at: dt.datetime
    totals: TripTotals | None = None


class TripDetailResponse(TripResponse):
    animals: list[TripAnimalResponse]
    total_goats: int
    total_sheep: int
    total_animals: int
