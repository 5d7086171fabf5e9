"""
sales_sheets/parsing/values.py

Tolerant scalar parsers for CSV fields.

Each parser returns ``None`` instead of raising so extractors can skip
rows whose values do not parse.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_DAY_MONTH_YEAR = re.compile(r"^\d{1,2}/\d{1,2}/\d{4}$")


def parse_iso_date(value: str | None) -> date | None:
    """
    Parse a ``yyyy-MM-dd`` date.
    """

    if value is None:
        return None
    text = value.strip()
    if not _ISO_DATE.match(text):
        return None
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        return None


def parse_day_month_year(value: str | None) -> date | None:
    """
    Parse a ``d/M/yyyy`` date (day and month may carry a leading zero).
    """

    if value is None:
        return None
    text = value.strip()
    if not _DAY_MONTH_YEAR.match(text):
        return None
    try:
        return datetime.strptime(text, "%d/%m/%Y").date()
    except ValueError:
        return None


def parse_decimal(value: str | None) -> Decimal | None:
    """
    Parse a finite decimal number; NaN, infinities and blanks yield None.
    """

    if value is None:
        return None
    text = value.strip()
    if not text:
        return None
    try:
        number = Decimal(text)
    except InvalidOperation:
        return None
    if not number.is_finite():
        return None
    return number
