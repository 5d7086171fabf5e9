"""
sales_sheets/services package marker.
"""

from sales_sheets.services.keyword_ranking_service import (
    KeywordRankingService,
    get_keyword_ranking_service,
)
from sales_sheets.services.sales_report_service import (
    SalesReportService,
    get_sales_report_service,
    parse_query_date,
)

__all__ = [
    "KeywordRankingService",
    "SalesReportService",
    "get_keyword_ranking_service",
    "get_sales_report_service",
    "parse_query_date",
]
