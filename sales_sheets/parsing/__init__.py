"""
sales_sheets/parsing package marker.
"""

from sales_sheets.parsing.row_tokenizer import COMMA, SEMICOLON, RowTokenizer, clean_field
from sales_sheets.parsing.values import parse_day_month_year, parse_decimal, parse_iso_date

__all__ = [
    "COMMA",
    "SEMICOLON",
    "RowTokenizer",
    "clean_field",
    "parse_day_month_year",
    "parse_decimal",
    "parse_iso_date",
]
