"""
sales_sheets/domain/errors.py

Typed failures raised by report extraction and the services above it.

Every error carries a stable ``code`` from :mod:`sales_sheets.failure_codes`
so the HTTP layer can map it to a status and clients can tell, for
example, "file has no totals" apart from "file is truncated".
"""

from __future__ import annotations

from sales_sheets import failure_codes


class ReportError(Exception):
    """Base exception for report extraction failures."""

    code: str = "report_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, object]:
        return {"code": self.code, "message": self.message}


# ---------------------------------------------------------------------------
# Input errors
# ---------------------------------------------------------------------------


class ReportInputError(ReportError):
    """Raised when caller-supplied parameters are invalid."""


class UnrecognizedMonthError(ReportInputError):
    """Raised when a month token matches no number, abbreviation or name."""

    code = failure_codes.UNRECOGNIZED_MONTH

    def __init__(self, token: str) -> None:
        super().__init__(
            f"Invalid month {token!r}. Please use a number, abbreviation, or full month name."
        )
        self.token = token


class InvalidDateError(ReportInputError):
    """Raised when a date parameter is not in yyyy-MM-dd form."""

    code = failure_codes.INVALID_DATE

    def __init__(self, field_name: str, value: str) -> None:
        super().__init__(f"Invalid {field_name} {value!r}. Please use 'yyyy-MM-dd' format.")
        self.field_name = field_name
        self.value = value


class InvalidDateRangeError(ReportInputError):
    """Raised when the end of a date window precedes its start."""

    code = failure_codes.INVALID_DATE_RANGE


class InvalidKeywordSourceError(ReportInputError):
    """Raised when a keyword report option is not configured."""

    code = failure_codes.INVALID_KEYWORD_SOURCE


# ---------------------------------------------------------------------------
# Structural file errors
# ---------------------------------------------------------------------------


class ReportStructureError(ReportError):
    """Raised when a CSV resource does not have the expected shape."""


class TotalsRowNotFoundError(ReportStructureError):
    code = failure_codes.TOTALS_ROW_NOT_FOUND


class InsufficientColumnsError(ReportStructureError):
    code = failure_codes.INSUFFICIENT_COLUMNS


class InsufficientDataError(ReportStructureError):
    code = failure_codes.INSUFFICIENT_DATA


class MalformedRowError(ReportStructureError):
    """Raised when a row required for output cannot be projected."""

    code = failure_codes.MALFORMED_ROW

    def __init__(self, message: str, *, row_number: int) -> None:
        super().__init__(message)
        self.row_number = row_number

    def to_dict(self) -> dict[str, object]:
        return {**super().to_dict(), "row_number": self.row_number}


# ---------------------------------------------------------------------------
# Lookup / availability errors
# ---------------------------------------------------------------------------


class NoDataForMonthError(ReportError):
    code = failure_codes.NO_DATA_FOR_MONTH


class MonthResourceNotFoundError(ReportError):
    code = failure_codes.MONTH_RESOURCE_NOT_FOUND


class SourceUnavailableError(ReportError):
    """Raised when a CSV resource is missing or cannot be read."""

    code = failure_codes.SOURCE_UNAVAILABLE

    def __init__(self, message: str, *, resource: str) -> None:
        super().__init__(message)
        self.resource = resource
