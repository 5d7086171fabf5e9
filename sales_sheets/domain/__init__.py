"""
sales_sheets/domain package marker.
"""

from sales_sheets.domain.errors import (
    InsufficientColumnsError,
    InsufficientDataError,
    InvalidDateError,
    InvalidDateRangeError,
    InvalidKeywordSourceError,
    MalformedRowError,
    MonthResourceNotFoundError,
    NoDataForMonthError,
    ReportError,
    ReportInputError,
    ReportStructureError,
    SourceUnavailableError,
    TotalsRowNotFoundError,
    UnrecognizedMonthError,
)
from sales_sheets.domain.sales_report import (
    DailyGoalPoint,
    KeywordRecord,
    MonthlyBreakdown,
    SalesSummary,
)

__all__ = [
    "DailyGoalPoint",
    "InsufficientColumnsError",
    "InsufficientDataError",
    "InvalidDateError",
    "InvalidDateRangeError",
    "InvalidKeywordSourceError",
    "KeywordRecord",
    "MalformedRowError",
    "MonthResourceNotFoundError",
    "MonthlyBreakdown",
    "NoDataForMonthError",
    "ReportError",
    "ReportInputError",
    "ReportStructureError",
    "SalesSummary",
    "SourceUnavailableError",
    "TotalsRowNotFoundError",
    "UnrecognizedMonthError",
]
