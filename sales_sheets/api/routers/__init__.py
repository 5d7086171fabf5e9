"""
sales_sheets/api/routers package marker.
"""

from sales_sheets.api.routers.keyword_ranking import router as keyword_ranking_router
from sales_sheets.api.routers.sales_report import router as sales_report_router

__all__ = [
    "keyword_ranking_router",
    "sales_report_router",
]
