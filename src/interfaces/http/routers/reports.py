from __future__ import annotations

from datetime import date
from typing import Literal
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from src.application.use_cases.reports import supplier_detail_report, supplier_report
from src.application.use_cases.suppliers import list_suppliers
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.reports.report_service import (
    ReportService,
    detail_filename,
    summary_filename,
)
from src.interfaces.http.deps import get_auth_context, get_report_service, get_uow
from src.interfaces.http.responses import attachment
from src.interfaces.http.schemas.reports import (
    SupplierDetailReportResponse,
    SupplierReportResponse,
)
from src.interfaces.http.schemas.suppliers import RegionsResponse

router = APIRouter(prefix="/reports", tags=["reports"])

ReportFormat = Literal["json", "csv", "pdf"]
CSV_MEDIA_TYPE = "text/csv"
PDF_MEDIA_TYPE = "application/pdf"


@router.get("/regions", response_model=RegionsResponse)
async def list_regions(context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)):
    return RegionsResponse(regions=await list_suppliers.list_regions(uow))


@router.get(
    "/suppliers",
    response_model=SupplierReportResponse,
    responses={200: {"content": {CSV_MEDIA_TYPE: {}, PDF_MEDIA_TYPE: {}}}},
)
async def suppliers_report(
    date_from: date,
    date_to: date,
    region: str | None = None,
    format: ReportFormat = Query(default="json"),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    reports: ReportService = Depends(get_report_service),
):
    """Totals per supplier for trips in the period, optionally for one region."""
    report = await supplier_report.execute(uow, date_from, date_to, region)
    if format == "csv":
        return attachment(
            reports.supplier_summary_csv(report),
            summary_filename(date_from, date_to, "csv"),
            CSV_MEDIA_TYPE,
        )
    if format == "pdf":
        return attachment(
            reports.supplier_summary_pdf(report),
            summary_filename(date_from, date_to, "pdf"),
            PDF_MEDIA_TYPE,
        )
    return SupplierReportResponse.model_validate(report)


@router.get(
    "/suppliers/{supplier_id}",
    response_model=SupplierDetailReportResponse,
    responses={200: {"content": {CSV_MEDIA_TYPE: {}, PDF_MEDIA_TYPE: {}}}},
)
async def supplier_detail(
    supplier_id: UUID,
    date_from: date,
    date_to: date,
    region: str | None = None,
    format: ReportFormat = Query(default="json"),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    reports: ReportService = Depends(get_report_service),
):
    """Every delivery by one supplier in the period, newest first."""
    report = await supplier_detail_report.execute(uow, supplier_id, date_from, date_to, region)
    if format == "csv":
        return attachment(
            reports.supplier_detail_csv(report),
            detail_filename(report.supplier_name, date_from, date_to, "csv"),
            CSV_MEDIA_TYPE,
        )
    if format == "pdf":
        return attachment(
            reports.supplier_detail_pdf(report),
            detail_filename(report.supplier_name, date_from, date_to, "pdf"),
            PDF_MEDIA_TYPE,
        )
    return SupplierDetailReportResponse.model_validate(report)
