"""
sales_sheets/extractors/monthly_breakdown_extractor.py

Per-period rows from the multi-period dashboard totals export.

Each data row starts with a ``d/M/yyyy`` date range; a row belongs to a
month when ``date_from.month <= month <= date_to.month``. Rows whose
dates do not parse are excluded silently because the dates are only the
filter predicate.
"""

from __future__ import annotations

import logging
from typing import Sequence

from sales_sheets.domain.errors import MalformedRowError
from sales_sheets.domain.sales_report import MonthlyBreakdown
from sales_sheets.parsing.row_tokenizer import SEMICOLON, RowTokenizer
from sales_sheets.parsing.values import parse_day_month_year

logger = logging.getLogger(__name__)

MIN_COLUMNS = 11


class MonthlyBreakdownExtractor:
    def __init__(self, tokenizer: RowTokenizer | None = None) -> None:
        self._tokenizer = tokenizer or RowTokenizer()

    def extract(self, lines: Sequence[str], month_number: int) -> list[MonthlyBreakdown]:
        """
        Return every period overlapping ``month_number``; may be empty.
        """

        breakdowns: list[MonthlyBreakdown] = []
        for row_number, line in enumerate(lines[1:], start=2):
            columns = self._tokenizer.split(line, SEMICOLON)
            if len(columns) < 2:
                continue

            date_from = parse_day_month_year(columns[0])
            date_to = parse_day_month_year(columns[1])
            if date_from is None or date_to is None:
                logger.debug("Skipping row %d: unparsable period dates", row_number)
                continue
            if not date_from.month <= month_number <= date_to.month:
                continue

            if len(columns) < MIN_COLUMNS:
                raise MalformedRowError(
                    f"Period row {row_number} has {len(columns)} columns; "
                    f"expected at least {MIN_COLUMNS}.",
                    row_number=row_number,
                )
            breakdowns.append(
                MonthlyBreakdown(
                    date_from=columns[0],
                    date_to=columns[1],
                    organic_sales=columns[2],
                    sponsored_sales=columns[3],
                    orders=columns[10],
                )
            )

        return breakdowns
