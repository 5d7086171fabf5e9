"""
sales_sheets/schemas package marker.
"""

from sales_sheets.schemas.keyword_ranking import KeywordRankingResponse
from sales_sheets.schemas.sales_report import (
    DailyGoalPointResponse,
    MonthlyBreakdownResponse,
    ReportErrorEnvelope,
    ReportErrorResponse,
    SalesSummaryResponse,
)

__all__ = [
    "DailyGoalPointResponse",
    "KeywordRankingResponse",
    "MonthlyBreakdownResponse",
    "ReportErrorEnvelope",
    "ReportErrorResponse",
    "SalesSummaryResponse",
]
