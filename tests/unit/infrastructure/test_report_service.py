from __future__ import annotations

from datetime import date
from uuid import uuid4

from src.domain.models.report import (
    ReportTotals,
    SupplierDetailReport,
    SupplierDetailRow,
    SupplierReport,
    SupplierReportRow,
)
from src.domain.models.supplier import Supplier
from src.domain.models.trip import Trip
from src.domain.models.trip_animal import TripAnimal
from src.infrastructure.reports.pdf_generator import PDFGenerator, numbered_rows_with_total
from src.infrastructure.reports.report_service import (
    ReportService,
    detail_filename,
    group_rows_by_supplier,
    summary_filename,
    trip_filename,
)


def _service() -> ReportService:
    return ReportService(PDFGenerator("TANCHOICE LIMITED", "Simply Organic Meat"))


def test_numbered_rows_with_total_sums_numeric_columns_only():
    body = numbered_rows_with_total(
        [("Mwanga", "M1", 3, 2, 5), ("Kilimanjaro", "KG", 1, 0, 1)],
        numeric_columns=(2, 3, 4),
    )
    assert body == [
        ["1", "Mwanga", "M1", "3", "2", "5"],
        ["2", "Kilimanjaro", "KG", "1", "0", "1"],
        ["TOTAL", "", "", "4", "2", "6"],
    ]


def test_summary_grouping_keeps_first_seen_order():
    s1, s2 = uuid4(), uuid4()
    rows = [
        SupplierReportRow(s2, "B", 1, 1, date(2024, 3, 1), "Arusha", "T", "F"),
        SupplierReportRow(s1, "A", 2, 0, date(2024, 3, 2), "Arusha", "T", "F"),
        SupplierReportRow(s2, "B", 0, 4, date(2024, 3, 3), "Arusha", "T", "F"),
    ]
    groups = group_rows_by_supplier(rows)
    assert [(g.name, g.goats, g.sheep, g.total) for g in groups] == [("B", 1, 5, 6), ("A", 2, 0, 2)]


def test_filenames():
    d1, d2 = date(2024, 3, 1), date(2024, 3, 31)
    assert summary_filename(d1, d2, "csv") == "supplier-report-2024-03-01-2024-03-31.csv"
    assert detail_filename("Mwanga Traders", d1, d2, "pdf") == (
        "supplier-Mwanga Traders-2024-03-01-2024-03-31.pdf"
    )
    assert detail_filename('A/B "C"', d1, d2, "csv").startswith("supplier-A_B _C_-")


def test_trip_manifest_pdf_renders():
    supplier = Supplier.create(name="Mwanga <Traders> & Co", default_mark="M1")
    trip = Trip.create(
        date=date(2024, 3, 5),
        region="Manyara",
        truck_no="T 1",
        form_no="F-9",
        driver_name="Juma",
        escort_name="Neema",
        prepared_by_name="Asha",
        prepared_by_position="Clerk",
    )
    animal = TripAnimal.create(
        trip_id=trip.id, supplier_id=supplier.id, mark="M1", goats_count=3, sheep_count=2
    )
    animal.supplier = supplier
    trip.animals = [animal]

    pdf = _service().trip_manifest_pdf(trip)
    assert pdf.startswith(b"%PDF")
    assert trip_filename(trip) == "Trip-F-9.pdf"


def test_report_pdfs_render_with_no_rows():
    service = _service()
    summary = SupplierReport(date_from=date(2024, 3, 1), date_to=date(2024, 3, 31), region="Arusha")
    detail = SupplierDetailReport(
        supplier_id=uuid4(),
        supplier_name="Unknown Supplier",
        date_from=date(2024, 3, 1),
        date_to=date(2024, 3, 31),
        region=None,
        totals=ReportTotals(),
    )
    assert service.supplier_summary_pdf(summary).startswith(b"%PDF")
    assert service.supplier_detail_pdf(detail).startswith(b"%PDF")


def test_detail_csv_uses_iso_dates():
    report = SupplierDetailReport(
        supplier_id=uuid4(),
        supplier_name="Mwanga",
        date_from=date(2024, 3, 1),
        date_to=date(2024, 3, 31),
        region=None,
        rows=[SupplierDetailRow(3, 2, date(2024, 3, 5), "Arusha, North", "T 1", "F-1")],
    )
    assert ReportService.supplier_detail_csv(report).splitlines() == [
        "Date,Region,Truck No,Form No,Goats,Sheep,Total Animals",
        '2024-03-05,"Arusha, North",T 1,F-1,3,2,5',
    ]


def test_total_row_spans_all_columns_when_empty():
    assert numbered_rows_with_total([], numeric_columns=(1, 2, 3)) == [["TOTAL", "", "0", "0", "0"]]
