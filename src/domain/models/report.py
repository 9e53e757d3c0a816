from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any
from uuid import UUID


@dataclass(slots=True, frozen=True)
class SupplierReportRow:
    """One trip line item joined with its supplier and trip, for the cross-supplier report."""

    supplier_id: UUID
    supplier_name: str
    goats_count: int
    sheep_count: int
    trip_date: date
    trip_region: str
    truck_no: str
    form_no: str

    @property
    def total_animals(self) -> int:
        return self.goats_count + self.sheep_count


@dataclass(slots=True, frozen=True)
class SupplierDetailRow:
    """One trip line item for a single supplier."""

    goats_count: int
    sheep_count: int
    trip_date: date
    trip_region: str
    truck_no: str
    form_no: str

    @property
    def total_animals(self) -> int:
        return self.goats_count + self.sheep_count

    def to_csv_record(self) -> dict[str, Any]:
        return {
            "date": self.trip_date.isoformat(),
            "region": self.trip_region,
            "truck_no": self.truck_no,
            "form_no": self.form_no,
            "goats": self.goats_count,
            "sheep": self.sheep_count,
            "total_animals": self.total_animals,
        }


@dataclass(slots=True)
class SupplierRollup:
    supplier_id: UUID
    name: str
    goats: int = 0
    sheep: int = 0
    total: int = 0

    def add(self, goats: int, sheep: int) -> None:
        self.goats += goats
        self.sheep += sheep
        self.total += goats + sheep

    def to_csv_record(self) -> dict[str, Any]:
        return {
            "supplier_name": self.name,
            "total_goats": self.goats,
            "total_sheep": self.sheep,
            "total_animals": self.total,
        }


@dataclass(slots=True)
class ReportTotals:
    goats: int = 0
    sheep: int = 0
    total: int = 0


@dataclass(slots=True)
class SupplierReport:
    date_from: date
    date_to: date
    region: str | None
    rows: list[SupplierReportRow] = field(default_factory=list)
    rollup: list[SupplierRollup] = field(default_factory=list)
    totals: ReportTotals = field(default_factory=ReportTotals)


@dataclass(slots=True)
class SupplierDetailReport:
    supplier_id: UUID
    supplier_name: str
    date_from: date
    date_to: date
    region: str | None
    rows: list[SupplierDetailRow] = field(default_factory=list)
    totals: ReportTotals = field(default_factory=ReportTotals)
