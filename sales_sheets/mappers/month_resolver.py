"""
sales_sheets/mappers/month_resolver.py

Month token normalisation and month -> CSV resource lookup.

Lookup stages
-------------
token         "3" | "mar" | "March "       (user input, any case)
month name    "March"                      (canonical join key)
resource      "MonthlySales/...Mar.csv"    (configured per month)

The alias table is built once at import and never mutated.
"""

from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

from sales_sheets.config import get_report_source_settings
from sales_sheets.domain.errors import MonthResourceNotFoundError, UnrecognizedMonthError

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def _build_aliases() -> Mapping[str, str]:
    aliases: dict[str, str] = {}
    for number, name in enumerate(MONTH_NAMES, start=1):
        aliases[str(number)] = name
        aliases[name[:3].lower()] = name
        aliases[name.lower()] = name
    return MappingProxyType(aliases)


_MONTH_ALIASES = _build_aliases()
_MONTH_NUMBERS: Mapping[str, int] = MappingProxyType(
    {name: number for number, name in enumerate(MONTH_NAMES, start=1)}
)


class MonthResolver:
    """
    Resolves month tokens to canonical names, numbers and resources.
    """

    def __init__(self, resource_paths: Mapping[str, str]) -> None:
        self._resource_paths = MappingProxyType(dict(resource_paths))

    def resolve(self, token: str | None) -> str:
        """
        Return the canonical month name for a number, abbreviation or name.
        """

        key = (token or "").strip().lower()
        name = _MONTH_ALIASES.get(key)
        if name is None:
            raise UnrecognizedMonthError(token or "")
        return name

    def month_number(self, name: str) -> int:
        """
        Return 1..12 for a canonical month name.
        """

        number = _MONTH_NUMBERS.get(name)
        if number is None:
            raise UnrecognizedMonthError(name)
        return number

    def resource_path_for(self, name: str) -> str:
        """
        Return the configured CSV resource holding ``name``'s report.
        """

        path = self._resource_paths.get(name)
        if path is None:
            raise MonthResourceNotFoundError(f"No sales report is configured for {name}.")
        return path


@lru_cache(maxsize=1)
def get_month_resolver() -> MonthResolver:
    """
    Build and cache the resolver from configured monthly resources.
    """

    return MonthResolver(get_report_source_settings().monthly_sales_files)
