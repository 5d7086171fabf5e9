"""
sales_sheets/domain/sales_report.py

Domain records produced by the report extractors.

Text-valued records keep the source formatting untouched: currency
symbols and locale separators are not uniform across exports.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class KeywordRecord:
    """
    One ranked keyword row from a keyword research export.
    """

    keyword: str
    rank: str
    conversion_rate: str
    impressions: str
    clicks: str
    spend: str
    total_sales: str


@dataclass(frozen=True)
class SalesSummary:
    """
    Aggregate figures read from the "Totals" row of a monthly sales report.
    """

    total_sales: str
    total_products: str
    total_refunds: str
    budget: str


@dataclass(frozen=True)
class MonthlyBreakdown:
    """
    One reporting period that overlaps the requested month.
    """

    date_from: str
    date_to: str
    organic_sales: str
    sponsored_sales: str
    orders: str


@dataclass(frozen=True)
class DailyGoalPoint:
    """
    Daily sales alongside cumulative progress against the monthly goal.

    ``cumulative_sales`` is the life-to-date total from the first data row
    of the file up to and including ``date``.
    """

    date: date
    daily_sales: Decimal
    monthly_goal: Decimal
    cumulative_sales: Decimal
    goal_attainment_percent: Decimal
