from __future__ import annotations

from datetime import date
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.reports.supplier_report import normalize_region, validate_period
from src.domain.models.report import ReportTotals, SupplierDetailReport, SupplierDetailRow

UNKNOWN_SUPPLIER = "Unknown Supplier"


async def execute(
    uow: UnitOfWork,
    supplier_id: UUID,
    date_from: date,
    date_to: date,
    region: str | None = None,
) -> SupplierDetailReport:
    """Per-trip rows for one supplier, newest trip first."""
    validate_period(date_from, date_to)
    region = normalize_region(region)
    supplier = await uow.suppliers.get(supplier_id)
    raw = await uow.trips.list_report_rows(
        date_from, date_to, region=region, supplier_id=supplier_id
    )
    rows = [
        SupplierDetailRow(
            goats_count=r.goats_count,
            sheep_count=r.sheep_count,
            trip_date=r.trip_date,
            trip_region=r.trip_region,
            truck_no=r.truck_no,
            form_no=r.form_no,
        )
        for r in raw
    ]
    # sorted() is stable: rows on the same date keep fetch order
    rows = sorted(rows, key=lambda r: r.trip_date, reverse=True)
    totals = ReportTotals(
        goats=sum(r.goats_count for r in rows),
        sheep=sum(r.sheep_count for r in rows),
        total=sum(r.total_animals for r in rows),
    )
    return SupplierDetailReport(
        supplier_id=supplier_id,
        supplier_name=supplier.name if supplier else UNKNOWN_SUPPLIER,
        date_from=date_from,
        date_to=date_to,
        region=region,
        rows=rows,
        totals=totals,
    )
