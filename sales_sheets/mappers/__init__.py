"""
sales_sheets/mappers package marker.
"""

from sales_sheets.mappers.month_resolver import MONTH_NAMES, MonthResolver, get_month_resolver

__all__ = [
    "MONTH_NAMES",
    "MonthResolver",
    "get_month_resolver",
]
