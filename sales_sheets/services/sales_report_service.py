"""
sales_sheets/services/sales_report_service.py

Service layer for the sales report queries.

Each query resolves its CSV resource, loads it through CSVSource, checks
the minimum line count the report layout needs, and hands the lines to
the matching extractor:

    sales summary      : per-month resource, semicolon, "Totals" row
    monthly breakdown  : dashboard totals resource, semicolon, date ranges
    goal trend         : budget tracker resource, comma, daily rows

Extractors raise typed ReportError subclasses; this layer adds the
input validation and the "no data" decision that belong to the caller.
"""

from __future__ import annotations

import logging
from datetime import date
from functools import lru_cache

from sales_sheets.config import ReportSourceSettings, get_report_source_settings
from sales_sheets.domain.errors import (
    InsufficientDataError,
    InvalidDateError,
    InvalidDateRangeError,
    NoDataForMonthError,
)
from sales_sheets.domain.sales_report import DailyGoalPoint, MonthlyBreakdown, SalesSummary
from sales_sheets.extractors.goal_trend_extractor import GoalTrendExtractor
from sales_sheets.extractors.monthly_breakdown_extractor import MonthlyBreakdownExtractor
from sales_sheets.extractors.sales_summary_extractor import SalesSummaryExtractor
from sales_sheets.logging_utils import log_event
from sales_sheets.mappers.month_resolver import MonthResolver, get_month_resolver
from sales_sheets.parsing.values import parse_iso_date
from sales_sheets.repositories.csv_source import CSVSource, get_csv_source

logger = logging.getLogger(__name__)

SUMMARY_MIN_LINES = 7
BREAKDOWN_MIN_LINES = 2
TREND_MIN_LINES = 2


def _require_lines(lines: list[str], minimum: int, *, resource: str) -> None:
    if len(lines) < minimum:
        raise InsufficientDataError(
            f"CSV file {resource!r} does not contain enough data "
            f"({len(lines)} lines, expected at least {minimum})."
        )


def parse_query_date(value: str, *, field_name: str) -> date:
    """
    Parse a ``yyyy-MM-dd`` request parameter or raise InvalidDateError.
    """

    parsed = parse_iso_date(value)
    if parsed is None:
        raise InvalidDateError(field_name, value)
    return parsed


class SalesReportService:
    """
    Answers sales summary, monthly breakdown and goal trend queries.
    """

    def __init__(
        self,
        *,
        source: CSVSource,
        settings: ReportSourceSettings,
        month_resolver: MonthResolver,
        summary_extractor: SalesSummaryExtractor | None = None,
        breakdown_extractor: MonthlyBreakdownExtractor | None = None,
        trend_extractor: GoalTrendExtractor | None = None,
    ) -> None:
        self._source = source
        self._settings = settings
        self._month_resolver = month_resolver
        self._summary_extractor = summary_extractor or SalesSummaryExtractor()
        self._breakdown_extractor = breakdown_extractor or MonthlyBreakdownExtractor()
        self._trend_extractor = trend_extractor or GoalTrendExtractor()

    def get_sales_summary(self, month_token: str) -> SalesSummary:
        """
        Return the Totals-row summary from the month's sales report.
        """

        month_name = self._month_resolver.resolve(month_token)
        resource = self._month_resolver.resource_path_for(month_name)
        lines = self._source.read_lines(resource)
        _require_lines(lines, SUMMARY_MIN_LINES, resource=resource)

        summary = self._summary_extractor.extract(lines)
        log_event(logger, logging.INFO, "sales_summary_extracted", month=month_name, resource=resource)
        return summary

    def get_monthly_breakdown(self, month_token: str) -> list[MonthlyBreakdown]:
        """
        Return every reporting period that overlaps the month.

        Raises NoDataForMonthError instead of returning an empty list.
        """

        month_name = self._month_resolver.resolve(month_token)
        month_number = self._month_resolver.month_number(month_name)
        resource = self._settings.monthly_totals_file
        lines = self._source.read_lines(resource)
        _require_lines(lines, BREAKDOWN_MIN_LINES, resource=resource)

        breakdowns = self._breakdown_extractor.extract(lines, month_number)
        if not breakdowns:
            raise NoDataForMonthError(f"No data found for {month_name}.")

        log_event(
            logger,
            logging.INFO,
            "monthly_breakdown_extracted",
            month=month_name,
            periods=len(breakdowns),
        )
        return breakdowns

    def get_goal_trend(self, start_date: str, end_date: str) -> list[DailyGoalPoint]:
        """
        Return daily sales and goal attainment between two ISO dates.

        Both bounds are inclusive; ``end_date`` must not precede ``start_date``.
        """

        start = parse_query_date(start_date, field_name="start date")
        end = parse_query_date(end_date, field_name="end date")
        if end < start:
            raise InvalidDateRangeError("End date must be after the start date.")

        resource = self._settings.budget_tracker_file
        lines = self._source.read_lines(resource)
        _require_lines(lines, TREND_MIN_LINES, resource=resource)

        points = self._trend_extractor.extract(lines, start, end)
        log_event(
            logger,
            logging.INFO,
            "goal_trend_extracted",
            start=start,
            end=end,
            points=len(points),
        )
        return points


@lru_cache(maxsize=1)
def get_sales_report_service() -> SalesReportService:
    """
    Build and cache the sales report service with env-driven settings.
    """

    return SalesReportService(
        source=get_csv_source(),
        settings=get_report_source_settings(),
        month_resolver=get_month_resolver(),
    )
