"""
sales_sheets/extractors/goal_trend_extractor.py

Daily sales trend with cumulative goal attainment.

Input is the budget tracker export: one header line, then comma
separated rows ``date,daily_sales,monthly_goal,...`` in chronological
order.

Formula
-------
cumulative_sales        = sum of daily_sales for every row dated <= end,
                          from the first data row of the file up to and
                          including the current row
goal_attainment_percent = 100 * cumulative_sales / monthly_goal

Rows dated before ``start`` are never emitted but still feed the
accumulator, so the first point in the window already reflects all
earlier sales in the file. Rows are processed in file order; the file
is not re-sorted, which means out-of-order exports produce running
totals in file order.

Per-row tolerance
-----------------
- fewer than 4 fields           -> skipped (blank trailer rows)
- unparsable date               -> skipped
- unparsable daily sales        -> no contribution, no point
- zero or unparsable goal       -> contribution kept, point omitted
- arithmetic overflow           -> that row alone is dropped
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal, DecimalException
from typing import Sequence

from sales_sheets.domain.errors import InvalidDateRangeError
from sales_sheets.domain.sales_report import DailyGoalPoint
from sales_sheets.parsing.row_tokenizer import COMMA, RowTokenizer
from sales_sheets.parsing.values import parse_decimal, parse_iso_date

logger = logging.getLogger(__name__)

MIN_FIELDS = 4

_DATE_COLUMN = 0
_DAILY_SALES_COLUMN = 1
_MONTHLY_GOAL_COLUMN = 2
_HUNDRED = Decimal(100)


class GoalTrendExtractor:
    """
    Walks a daily sales export and emits goal attainment per day in a window.

    Holds no state between calls; the accumulator lives inside ``extract``.
    """

    def __init__(self, tokenizer: RowTokenizer | None = None) -> None:
        self._tokenizer = tokenizer or RowTokenizer()

    def extract(self, lines: Sequence[str], start: date, end: date) -> list[DailyGoalPoint]:
        """
        Return one point per in-window row, in file order.

        Args:
            lines: Raw CSV lines including the header line.
            start: First date to emit (inclusive).
            end:   Last date to emit and last date accumulated (inclusive).

        Raises:
            InvalidDateRangeError: ``end`` precedes ``start``.
        """
        if end < start:
            raise InvalidDateRangeError("End date must be after the start date.")

        points: list[DailyGoalPoint] = []
        cumulative_sales = Decimal(0)

        for row_number, line in enumerate(lines[1:], start=2):
            columns = self._tokenizer.split(line, COMMA)
            if len(columns) < MIN_FIELDS:
                continue

            current_date = parse_iso_date(columns[_DATE_COLUMN])
            if current_date is None or current_date > end:
                continue

            daily_sales = parse_decimal(columns[_DAILY_SALES_COLUMN])
            if daily_sales is None:
                logger.debug("Row %d: unparsable daily sales %r", row_number, columns[1])
                continue
            try:
                cumulative_sales += daily_sales
            except DecimalException:
                logger.debug("Row %d: daily sales %r overflow the running total", row_number, columns[1])
                continue

            if current_date < start:
                continue

            monthly_goal = parse_decimal(columns[_MONTHLY_GOAL_COLUMN])
            if monthly_goal is None:
                logger.debug("Row %d: unparsable monthly goal %r", row_number, columns[2])
                continue

            percent = self._attainment_percent(cumulative_sales, monthly_goal)
            if percent is None:
                logger.debug("Row %d: no attainment for monthly goal %r", row_number, columns[2])
                continue

            points.append(
                DailyGoalPoint(
                    date=current_date,
                    daily_sales=daily_sales,
                    monthly_goal=monthly_goal,
                    cumulative_sales=cumulative_sales,
                    goal_attainment_percent=percent,
                )
            )

        return points

    @staticmethod
    def _attainment_percent(cumulative_sales: Decimal, monthly_goal: Decimal) -> Decimal | None:
        if monthly_goal == 0:
            return None
        try:
            return _HUNDRED * cumulative_sales / monthly_goal
        except DecimalException:
            return None
