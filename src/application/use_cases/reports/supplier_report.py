from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.report import (
    ReportTotals,
    SupplierReport,
    SupplierReportRow,
    SupplierRollup,
)


def validate_period(date_from: date, date_to: date) -> None:
    if date_from > date_to:
        raise ValidationError("date_from must be before or equal to date_to")


def normalize_region(region: str | None) -> str | None:
    """Blank region means no filter."""
    if region is None:
        return None
    region = region.strip()
    return region or None


def rollup_by_supplier(rows: Iterable[SupplierReportRow]) -> list[SupplierRollup]:
    """Group rows by supplier id, summing counts. Groups keep first-seen order."""
    groups: dict[UUID, SupplierRollup] = {}
    for row in rows:
        group = groups.get(row.supplier_id)
        if group is None:
            group = SupplierRollup(supplier_id=row.supplier_id, name=row.supplier_name)
            groups[row.supplier_id] = group
        group.add(row.goats_count, row.sheep_count)
    return list(groups.values())


def grand_totals(rollup: Iterable[SupplierRollup]) -> ReportTotals:
    totals = ReportTotals()
    for group in rollup:
        totals.goats += group.goats
        totals.sheep += group.sheep
        totals.total += group.total
    return totals


async def execute(
    uow: UnitOfWork,
    date_from: date,
    date_to: date,
    region: str | None = None,
) -> SupplierReport:
    validate_period(date_from, date_to)
    region = normalize_region(region)
    rows = await uow.trips.list_report_rows(date_from, date_to, region=region)
    rollup = rollup_by_supplier(rows)
    return SupplierReport(
        date_from=date_from,
        date_to=date_to,
        region=region,
        rows=rows,
        rollup=rollup,
        totals=grand_totals(rollup),
    )
