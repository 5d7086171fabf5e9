"""
sales_sheets/api/routers/sales_report.py

Sales report HTTP endpoints.

GET /SALESRANKING/{month}                     Totals-row summary for one month
GET /DETAILEDSALES/{month}                    periods overlapping one month
GET /FILTEREDSALES/{start_date}/{end_date}    daily goal attainment trend

``month`` accepts a number, a 3-letter abbreviation or a full name.
Dates use ``yyyy-MM-dd``. All extraction lives in SalesReportService; the
router only maps results and errors onto HTTP.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path

from sales_sheets.api.dependencies import to_http_exception
from sales_sheets.domain.errors import ReportError
from sales_sheets.schemas.sales_report import (
    DailyGoalPointResponse,
    MonthlyBreakdownResponse,
    ReportErrorEnvelope,
    SalesSummaryResponse,
)
from sales_sheets.services.sales_report_service import (
    SalesReportService,
    get_sales_report_service,
)

router = APIRouter(tags=["sales"])

_ERROR_RESPONSES = {
    400: {"model": ReportErrorEnvelope},
    404: {"model": ReportErrorEnvelope},
    422: {"model": ReportErrorEnvelope},
    503: {"model": ReportErrorEnvelope},
}


@router.get(
    "/SALESRANKING/{month}",
    response_model=SalesSummaryResponse,
    responses=_ERROR_RESPONSES,
)
def get_sales_summary(
    month: str = Path(..., description="Month number, abbreviation or full name."),
    service: SalesReportService = Depends(get_sales_report_service),
) -> SalesSummaryResponse:
    try:
        summary = service.get_sales_summary(month)
    except ReportError as exc:
        raise to_http_exception(exc) from exc

    return SalesSummaryResponse.from_summary(summary)


@router.get(
    "/DETAILEDSALES/{month}",
    response_model=list[MonthlyBreakdownResponse],
    responses=_ERROR_RESPONSES,
)
def get_monthly_breakdown(
    month: str = Path(..., description="Month number, abbreviation or full name."),
    service: SalesReportService = Depends(get_sales_report_service),
) -> list[MonthlyBreakdownResponse]:
    try:
        breakdowns = service.get_monthly_breakdown(month)
    except ReportError as exc:
        raise to_http_exception(exc) from exc

    return [MonthlyBreakdownResponse.from_breakdown(item) for item in breakdowns]


@router.get(
    "/FILTEREDSALES/{start_date}/{end_date}",
    response_model=list[DailyGoalPointResponse],
    responses=_ERROR_RESPONSES,
)
def get_goal_trend(
    start_date: str = Path(..., description="First day, yyyy-MM-dd (inclusive)."),
    end_date: str = Path(..., description="Last day, yyyy-MM-dd (inclusive)."),
    service: SalesReportService = Depends(get_sales_report_service),
) -> list[DailyGoalPointResponse]:
    """
    Daily sales with cumulative goal attainment.

    Attainment accumulates from the first row of the report, not from
    ``start_date``.
    """

    try:
        points = service.get_goal_trend(start_date, end_date)
    except ReportError as exc:
        raise to_http_exception(exc) from exc

    return [DailyGoalPointResponse.from_point(point) for point in points]
