from __future__ import annotations

import io
from collections.abc import Sequence
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

BRAND_BLUE = colors.Color(0 / 255, 86 / 255, 143 / 255)
ZEBRA_GREY = colors.Color(245 / 255, 245 / 255, 245 / 255)
CONTENT_WIDTH = A4[0] - 28 * mm


def numbered_rows_with_total(
    rows: Sequence[Sequence[object]],
    numeric_columns: Sequence[int],
) -> list[list[str]]:
    """Prefix each row with its 1-based serial and append a TOTAL row.

    ``numeric_columns`` index into the input rows (before the serial column).
    The TOTAL row carries the column-wise sum for those columns and blanks
    everywhere else. With no rows the width is taken from the last numeric
    column.
    """
    width = len(rows[0]) if rows else max(numeric_columns, default=-1) + 1
    sums = {col: 0 for col in numeric_columns}
    body: list[list[str]] = []
    for serial, row in enumerate(rows, start=1):
        for col in numeric_columns:
            sums[col] += int(row[col])
        body.append([str(serial)] + ["" if v is None else str(v) for v in row])
    total = ["TOTAL"] + [str(sums[col]) if col in sums else "" for col in range(width)]
    body.append(total)
    return body


class PDFGenerator:
    def __init__(self, organization_name: str, organization_tagline: str = "") -> None:
        self.organization_name = organization_name
        self.organization_tagline = organization_tagline
        self.styles = getSampleStyleSheet()
        self._setup_custom_styles()

    def _setup_custom_styles(self) -> None:
        """Setup custom paragraph styles"""
        self.styles.add(
            ParagraphStyle(
                name="BannerName",
                parent=self.styles["Heading1"],
                fontSize=16,
                leading=19,
                textColor=colors.white,
                alignment=1,
                spaceAfter=0,
            )
        )
        self.styles.add(
            ParagraphStyle(
                name="BannerTagline",
                parent=self.styles["Normal"],
                fontSize=10,
                textColor=colors.white,
                alignment=1,
            )
        )
        self.styles.add(
            ParagraphStyle(
                name="DocTitle",
                parent=self.styles["Heading2"],
                fontSize=14,
                alignment=1,
                spaceBefore=6,
                spaceAfter=10,
            )
        )
        self.styles.add(
            ParagraphStyle(
                name="Meta",
                parent=self.styles["Normal"],
                fontSize=11,
                leading=15,
            )
        )

    def create_letterhead(self, title: str | None = None) -> list:
        """Organisation banner followed by the document heading."""
        name = escape(self.organization_name)
        banner_cells = [[Paragraph(f"<b>{name}</b>", self.styles["BannerName"])]]
        if self.organization_tagline:
            banner_cells.append(
                [Paragraph(escape(self.organization_tagline), self.styles["BannerTagline"])]
            )
        banner = Table(banner_cells, colWidths=[70 * mm])
        banner.hAlign = "LEFT"
        banner.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, -1), BRAND_BLUE),
                    ("TOPPADDING", (0, 0), (-1, -1), 4),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        heading = self.organization_name
        if self.organization_tagline:
            heading = f"{heading} – {self.organization_tagline}"
        elements: list = [banner, Spacer(1, 8)]
        elements.append(Paragraph(escape(heading), self.styles["DocTitle"]))
        if title:
            elements.append(Paragraph(escape(title), self.styles["DocTitle"]))
        return elements

    def create_metadata_block(self, pairs: Sequence[tuple[str, str]], columns: int = 2) -> list:
        """Label/value pairs laid out ``columns`` per line."""
        if not pairs:
            return []
        cells = [
            Paragraph(f"<b>{escape(label)}:</b> {escape(value)}", self.styles["Meta"])
            for label, value in pairs
        ]
        lines = [cells[i : i + columns] for i in range(0, len(cells), columns)]
        for line in lines:
            line.extend([""] * (columns - len(line)))
        table = Table(lines, colWidths=[CONTENT_WIDTH / columns] * columns)
        table.setStyle(
            TableStyle(
                [
                    ("LEFTPADDING", (0, 0), (-1, -1), 0),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                ]
            )
        )
        return [table, Spacer(1, 10)]

    def create_totals_table(
        self,
        headers: Sequence[str],
        body: Sequence[Sequence[str]],
        *,
        font_size: int = 10,
        col_widths: Sequence[float] | None = None,
    ) -> list:
        """Header row, data rows and a trailing TOTAL row (last row of ``body``)."""
        data = [list(headers)] + [list(row) for row in body]
        table = Table(data, colWidths=col_widths, repeatRows=1)
        style = [
            ("BACKGROUND", (0, 0), (-1, 0), BRAND_BLUE),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("FONTNAME", (0, 1), (-1, -1), "Helvetica"),
            ("FONTSIZE", (0, 0), (-1, -1), font_size),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ("BOTTOMPADDING", (0, 0), (-1, 0), 6),
            # Total row
            ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
            ("BACKGROUND", (0, -1), (-1, -1), colors.lightgrey),
        ]
        # Alternate shading on data rows, skipping header and total
        for index in range(2, len(data) - 1, 2):
            style.append(("BACKGROUND", (0, index), (-1, index), ZEBRA_GREY))
        table.setStyle(TableStyle(style))
        return [table, Spacer(1, 16)]

    def create_signature_block(self, lines: Sequence[Sequence[str]]) -> list:
        """Signature lines; each entry is one row of captions with a rule underneath."""
        elements: list = []
        for captions in lines:
            cells = [Paragraph(escape(c), self.styles["Meta"]) for c in captions]
            table = Table([cells], colWidths=[CONTENT_WIDTH / len(cells)] * len(cells))
            table.setStyle(
                TableStyle(
                    [
                        ("LINEBELOW", (0, 0), (-1, -1), 0.5, colors.black),
                        ("LEFTPADDING", (0, 0), (-1, -1), 0),
                        ("BOTTOMPADDING", (0, 0), (-1, -1), 10),
                    ]
                )
            )
            elements.extend([table, Spacer(1, 10)])
        return elements

    def generate_pdf(self, elements: list, *, title: str | None = None) -> bytes:
        """Build the document and return the raw PDF bytes"""
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=14 * mm,
            leftMargin=14 * mm,
            topMargin=10 * mm,
            bottomMargin=14 * mm,
            title=title or self.organization_name,
        )
        doc.build(elements)
        pdf_data = buffer.getvalue()
        buffer.close()
        return pdf_data
