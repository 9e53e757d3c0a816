from __future__ import annotations

from datetime import date
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class ReportTotalsSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    goats: int
    sheep: int
    total: int


class SupplierReportRowSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    supplier_id: UUID
    supplier_name: str
    goats_count: int
    sheep_count: int
    total_animals: int
    trip_date: date
    trip_region: str
    truck_no: str
    form_no: str


class SupplierRollupSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    supplier_id: UUID
    name: str
    goats: int
    sheep: int
    total: int


class SupplierReportResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    date_from: date
    date_to: date
    region: str | None
    rows: list[SupplierReportRowSchema]
    rollup: list[SupplierRollupSchema]
    totals: ReportTotalsSchema


class SupplierDetailRowSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    goats_count: int
    sheep_count: int
    total_animals: int
    trip_date: date
    trip_region: str
    truck_no: str
    form_no: str


class SupplierDetailReportResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    supplier_id: UUID
    supplier_name: str
    date_from: date
    date_to: date
    region: str | None
    rows: list[SupplierDetailRowSchema]
    totals: ReportTotalsSchema
