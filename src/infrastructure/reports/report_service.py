from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import date

from src.domain.models.report import (
    SupplierDetailReport,
    SupplierReport,
    SupplierReportRow,
    SupplierRollup,
)
from src.domain.models.trip import Trip
from src.infrastructure.reports.csv_export import generate_csv
from src.infrastructure.reports.pdf_generator import PDFGenerator, numbered_rows_with_total

TRIP_MANIFEST_HEADERS = ("S/N", "Supplier's Name", "Mark / Symbol", "Goats", "Sheep", "Total Summary")
SUPPLIER_DETAIL_HEADERS = ("S/N", "Date", "Region", "Truck No", "Goats", "Sheep", "Total Animals")
SUPPLIER_SUMMARY_HEADERS = ("S/N", "Supplier Name", "Total Goats", "Total Sheep", "Total Animals")

SUMMARY_CSV_HEADERS = ("Supplier Name", "Total Goats", "Total Sheep", "Total Animals")
DETAIL_CSV_HEADERS = ("Date", "Region", "Truck No", "Form No", "Goats", "Sheep", "Total Animals")

_UNSAFE_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|\r\n]+')


def format_date(value: date) -> str:
    return value.strftime("%d/%m/%Y")


def _filename_part(value: str) -> str:
    return _UNSAFE_FILENAME_CHARS.sub("_", value).strip() or "unknown"


def summary_filename(date_from: date, date_to: date, extension: str) -> str:
    return f"supplier-report-{date_from.isoformat()}-{date_to.isoformat()}.{extension}"


def detail_filename(supplier_name: str, date_from: date, date_to: date, extension: str) -> str:
    name = _filename_part(supplier_name)
    return f"supplier-{name}-{date_from.isoformat()}-{date_to.isoformat()}.{extension}"


def trip_filename(trip: Trip) -> str:
    return f"Trip-{_filename_part(trip.form_no)}.pdf"


def group_rows_by_supplier(rows: Iterable[SupplierReportRow]) -> list[SupplierRollup]:
    """Per-supplier sums for the summary PDF, in first-seen order."""
    groups: dict = {}
    for row in rows:
        if row.supplier_id not in groups:
            groups[row.supplier_id] = SupplierRollup(
                supplier_id=row.supplier_id, name=row.supplier_name
            )
        groups[row.supplier_id].add(row.goats_count, row.sheep_count)
    return list(groups.values())


class ReportService:
    def __init__(self, pdf_generator: PDFGenerator):
        self.pdf_generator = pdf_generator

    def trip_manifest_pdf(self, trip: Trip) -> bytes:
        """Collection manifest for one trip with signature lines."""
        gen = self.pdf_generator
        elements: list = []
        elements.extend(gen.create_letterhead())
        elements.extend(
            gen.create_metadata_block(
                [
                    ("Region", trip.region),
                    ("Truck No", trip.truck_no),
                    ("Date", format_date(trip.date)),
                    ("Form No", trip.form_no),
                ]
            )
        )
        rows = [
            (
                animal.supplier_name,
                animal.mark,
                animal.goats_count,
                animal.sheep_count,
                animal.total_animals,
            )
            for animal in trip.animals
        ]
        body = numbered_rows_with_total(rows, numeric_columns=(2, 3, 4))
        elements.extend(gen.create_totals_table(TRIP_MANIFEST_HEADERS, body))
        prepared_by = " ".join(
            part for part in (trip.prepared_by_position, trip.prepared_by_name) if part
        )
        elements.extend(
            gen.create_signature_block(
                [
                    [f"Prepared by: {prepared_by}"],
                    [f"Driver: {trip.driver_name}", f"Escort: {trip.escort_name}"],
                ]
            )
        )
        return gen.generate_pdf(elements, title=f"Trip {trip.form_no}")

    def supplier_detail_pdf(self, report: SupplierDetailReport) -> bytes:
        gen = self.pdf_generator
        elements: list = []
        elements.extend(gen.create_letterhead("Supplier Report"))
        meta = [
            ("Supplier", report.supplier_name),
            ("Period", f"{format_date(report.date_from)} - {format_date(report.date_to)}"),
        ]
        if report.region:
            meta.append(("Region", report.region))
        elements.extend(gen.create_metadata_block(meta, columns=1))
        rows = [
            (
                format_date(row.trip_date),
                row.trip_region,
                row.truck_no,
                row.goats_count,
                row.sheep_count,
                row.total_animals,
            )
            for row in report.rows
        ]
        body = numbered_rows_with_total(rows, numeric_columns=(3, 4, 5))
        elements.extend(gen.create_totals_table(SUPPLIER_DETAIL_HEADERS, body, font_size=9))
        return gen.generate_pdf(elements, title=f"Supplier Report - {report.supplier_name}")

    def supplier_summary_pdf(self, report: SupplierReport) -> bytes:
        gen = self.pdf_generator
        elements: list = []
        elements.extend(gen.create_letterhead("Supplier Summary Report"))
        meta = [("Period", f"{format_date(report.date_from)} - {format_date(report.date_to)}")]
        if report.region:
            meta.append(("Region", report.region))
        elements.extend(gen.create_metadata_block(meta, columns=1))
        rows = [
            (group.name, group.goats, group.sheep, group.total)
            for group in group_rows_by_supplier(report.rows)
        ]
        body = numbered_rows_with_total(rows, numeric_columns=(1, 2, 3))
        elements.extend(gen.create_totals_table(SUPPLIER_SUMMARY_HEADERS, body))
        return gen.generate_pdf(elements, title="Supplier Summary Report")

    @staticmethod
    def supplier_summary_csv(report: SupplierReport) -> str:
        return generate_csv(
            [group.to_csv_record() for group in report.rollup], SUMMARY_CSV_HEADERS
        )

    @staticmethod
    def supplier_detail_csv(report: SupplierDetailReport) -> str:
        return generate_csv([row.to_csv_record() for row in report.rows], DETAIL_CSV_HEADERS)
