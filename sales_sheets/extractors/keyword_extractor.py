"""
sales_sheets/extractors/keyword_extractor.py

Top-keyword window from a keyword research export.

Layout: three header/metadata lines, then ranking rows split by comma.
Columns 0,1,3,4,5,6,7 hold keyword, rank, CVR, impressions, clicks,
spend and total sales; column 2 is not reported.
"""

from __future__ import annotations

from typing import Sequence

from sales_sheets.domain.errors import MalformedRowError
from sales_sheets.domain.sales_report import KeywordRecord
from sales_sheets.parsing.row_tokenizer import COMMA, RowTokenizer

HEADER_LINES = 3
WINDOW_SIZE = 5
MIN_COLUMNS = 8


class KeywordExtractor:
    """
    Projects the first ranking rows into keyword records.
    """

    def __init__(self, tokenizer: RowTokenizer | None = None) -> None:
        self._tokenizer = tokenizer or RowTokenizer()

    def extract(self, lines: Sequence[str]) -> list[KeywordRecord]:
        """
        Return at most five records ordered by rank text.

        Rank is compared as raw text, so "10" sorts before "2".
        """

        records: list[KeywordRecord] = []
        window = lines[HEADER_LINES : HEADER_LINES + WINDOW_SIZE]
        for row_number, line in enumerate(window, start=HEADER_LINES + 1):
            columns = self._tokenizer.split(line, COMMA)
            if len(columns) < MIN_COLUMNS:
                raise MalformedRowError(
                    f"Keyword row {row_number} has {len(columns)} columns; "
                    f"expected at least {MIN_COLUMNS}.",
                    row_number=row_number,
                )
            records.append(
                KeywordRecord(
                    keyword=columns[0],
                    rank=columns[1],
                    conversion_rate=columns[3],
                    impressions=columns[4],
                    clicks=columns[5],
                    spend=columns[6],
                    total_sales=columns[7],
                )
            )

        return sorted(records, key=lambda record: record.rank)
