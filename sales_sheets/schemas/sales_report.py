"""
sales_sheets/schemas/sales_report.py

Response schemas for sales report endpoints.
"""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from sales_sheets.domain.sales_report import DailyGoalPoint, MonthlyBreakdown, SalesSummary

_RESPONSE_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    from_attributes=True,
    frozen=True,
)


class SalesSummaryResponse(BaseModel):
    """
    API response model for a monthly Totals row.
    """

    model_config = _RESPONSE_CONFIG

    total_sales: str
    total_products: str
    total_refunds: str
    budget: str

    @classmethod
    def from_summary(cls, summary: SalesSummary) -> "SalesSummaryResponse":
        return cls.model_validate(summary)


class MonthlyBreakdownResponse(BaseModel):
    """
    API response model for one reporting period.
    """

    model_config = _RESPONSE_CONFIG

    date_from: str
    date_to: str
    organic_sales: str
    sponsored_sales: str
    orders: str

    @classmethod
    def from_breakdown(cls, breakdown: MonthlyBreakdown) -> "MonthlyBreakdownResponse":
        return cls.model_validate(breakdown)


class DailyGoalPointResponse(BaseModel):
    """
    API response model for one day of the goal trend.

    Decimals are emitted as JSON numbers rounded to the nearest IEEE-754
    double, which is the precision the dashboard parses them with. Use the
    domain DailyGoalPoint when every digit of the Decimal is needed.
    """

    model_config = _RESPONSE_CONFIG

    date: dt.date
    daily_sales: float
    monthly_goal: float
    cumulative_sales: float
    goal_attainment_percent: float

    @classmethod
    def from_point(cls, point: DailyGoalPoint) -> "DailyGoalPointResponse":
        return cls(
            date=point.date,
            daily_sales=float(point.daily_sales),
            monthly_goal=float(point.monthly_goal),
            cumulative_sales=float(point.cumulative_sales),
            goal_attainment_percent=float(point.goal_attainment_percent),
        )


class ReportErrorResponse(BaseModel):
    """
    Error body carried in ``detail`` for every report failure.
    """

    code: str
    message: str
    row_number: int | None = None


class ReportErrorEnvelope(BaseModel):
    """
    Full error response body as rendered by FastAPI's HTTPException handler.
    """

    detail: ReportErrorResponse
