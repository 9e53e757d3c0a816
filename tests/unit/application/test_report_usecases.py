from __future__ import annotations

from datetime import date
from types import SimpleNamespace
from uuid import uuid4

import pytest

from src.application.errors import ValidationError
from src.application.use_cases.reports import supplier_detail_report, supplier_report
from src.domain.models.report import SupplierReportRow
from src.domain.models.supplier import Supplier

S1 = uuid4()
S2 = uuid4()


def _row(supplier_id, name, goats, sheep, day, region="Manyara", form_no="F-1"):
    return SupplierReportRow(
        supplier_id=supplier_id,
        supplier_name=name,
        goats_count=goats,
        sheep_count=sheep,
        trip_date=date(2024, 3, day),
        trip_region=region,
        truck_no="T 1",
        form_no=form_no,
    )


class StubTrips:
    def __init__(self, rows) -> None:
        self.rows = rows
        self.calls: list[dict] = []

    async def list_report_rows(self, date_from, date_to, *, region=None, supplier_id=None):
        self.calls.append(
            {"from": date_from, "to": date_to, "region": region, "supplier_id": supplier_id}
        )
        return list(self.rows)


class StubSuppliers:
    def __init__(self, supplier=None) -> None:
        self.supplier = supplier

    async def get(self, supplier_id):
        return self.supplier


def make_uow(rows, supplier=None):
    return SimpleNamespace(trips=StubTrips(rows), suppliers=StubSuppliers(supplier))


@pytest.mark.asyncio
async def test_rollup_groups_by_supplier_and_sums_to_grand_totals():
    rows = [
        _row(S1, "Mwanga", 3, 2, 5),
        _row(S2, "Kilimanjaro", 1, 0, 5),
        _row(S1, "Mwanga", 4, 0, 9),
    ]
    report = await supplier_report.execute(make_uow(rows), date(2024, 3, 1), date(2024, 3, 31))

    assert [(g.supplier_id, g.goats, g.sheep, g.total) for g in report.rollup] == [
        (S1, 7, 2, 9),
        (S2, 1, 0, 1),
    ]
    assert (report.totals.goats, report.totals.sheep, report.totals.total) == (8, 2, 10)
    assert report.totals.total == sum(g.total for g in report.rollup)


@pytest.mark.asyncio
async def test_blank_region_is_no_filter():
    uow = make_uow([])
    report = await supplier_report.execute(uow, date(2024, 3, 1), date(2024, 3, 31), "  ")
    assert report.region is None
    assert uow.trips.calls[0]["region"] is None
    assert report.rollup == []
    assert report.totals.total == 0


@pytest.mark.asyncio
async def test_inverted_period_is_rejected():
    with pytest.raises(ValidationError):
        await supplier_report.execute(make_uow([]), date(2024, 4, 1), date(2024, 3, 1))


@pytest.mark.asyncio
async def test_detail_rows_newest_first_with_totals():
    rows = [
        _row(S1, "Mwanga", 1, 1, 2, form_no="A"),
        _row(S1, "Mwanga", 2, 0, 9, form_no="B"),
        _row(S1, "Mwanga", 0, 3, 2, form_no="C"),
    ]
    uow = make_uow(rows, Supplier.create(name="Mwanga"))
    report = await supplier_detail_report.execute(
        uow, S1, date(2024, 3, 1), date(2024, 3, 31), region="Manyara"
    )

    assert [r.form_no for r in report.rows] == ["B", "A", "C"]
    assert report.supplier_name == "Mwanga"
    assert (report.totals.goats, report.totals.sheep, report.totals.total) == (3, 4, 7)
    assert uow.trips.calls[0]["supplier_id"] == S1
    assert uow.trips.calls[0]["region"] == "Manyara"


@pytest.mark.asyncio
async def test_detail_for_deleted_supplier_uses_placeholder_name():
    report = await supplier_detail_report.execute(
        make_uow([]), S2, date(2024, 3, 1), date(2024, 3, 31)
    )
    assert report.supplier_name == "Unknown Supplier"
    assert report.rows == []
