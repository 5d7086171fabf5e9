"""
sales_sheets/extractors/sales_summary_extractor.py

Aggregate figures from the "Totals" row of a monthly sales report.
"""

from __future__ import annotations

from typing import Sequence

from sales_sheets.domain.errors import InsufficientColumnsError, TotalsRowNotFoundError
from sales_sheets.domain.sales_report import SalesSummary
from sales_sheets.parsing.row_tokenizer import SEMICOLON, RowTokenizer

TOTALS_LABEL = "totals"
MIN_MATCH_COLUMNS = 6
MIN_COLUMNS = 15

_TOTAL_SALES_COLUMN = 5
_TOTAL_PRODUCTS_COLUMN = 6
_TOTAL_REFUNDS_COLUMN = 8
_BUDGET_COLUMN = 14


class SalesSummaryExtractor:
    """
    Locates the first usable Totals row and projects its aggregates.
    """

    def __init__(self, tokenizer: RowTokenizer | None = None) -> None:
        self._tokenizer = tokenizer or RowTokenizer()

    def extract(self, lines: Sequence[str]) -> SalesSummary:
        """
        Raises TotalsRowNotFoundError when no row is labelled "Totals" and
        InsufficientColumnsError when the Totals row is truncated.
        """

        totals_row: list[str] | None = None
        saw_short_totals_row = False

        for line in lines:
            columns = self._tokenizer.split(line, SEMICOLON)
            if columns[0].replace('"', "").strip().lower() != TOTALS_LABEL:
                continue
            if len(columns) < MIN_MATCH_COLUMNS:
                saw_short_totals_row = True
                continue
            totals_row = columns
            break

        if totals_row is None:
            if saw_short_totals_row:
                raise InsufficientColumnsError("Insufficient columns in the total row.")
            raise TotalsRowNotFoundError("Total row not found in the CSV file.")

        if len(totals_row) < MIN_COLUMNS:
            raise InsufficientColumnsError("Insufficient columns in the total row.")

        return SalesSummary(
            total_sales=totals_row[_TOTAL_SALES_COLUMN],
            total_products=totals_row[_TOTAL_PRODUCTS_COLUMN],
            total_refunds=totals_row[_TOTAL_REFUNDS_COLUMN],
            budget=totals_row[_BUDGET_COLUMN],
        )
