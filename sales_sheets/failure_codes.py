"""Shared failure code constants for report error handling."""

UNRECOGNIZED_MONTH = "unrecognized_month"
INVALID_DATE = "invalid_date"
INVALID_DATE_RANGE = "invalid_date_range"
INVALID_KEYWORD_SOURCE = "invalid_keyword_source"

TOTALS_ROW_NOT_FOUND = "totals_row_not_found"
INSUFFICIENT_COLUMNS = "insufficient_columns"
INSUFFICIENT_DATA = "insufficient_data"
MALFORMED_ROW = "malformed_row"

NO_DATA_FOR_MONTH = "no_data_for_month"
MONTH_RESOURCE_NOT_FOUND = "month_resource_not_found"
SOURCE_UNAVAILABLE = "source_unavailable"

INPUT_FAILURES = [
    UNRECOGNIZED_MONTH,
    INVALID_DATE,
    INVALID_DATE_RANGE,
    INVALID_KEYWORD_SOURCE,
]

STRUCTURAL_FAILURES = [
    TOTALS_ROW_NOT_FOUND,
    INSUFFICIENT_COLUMNS,
    INSUFFICIENT_DATA,
    MALFORMED_ROW,
]

NOT_FOUND_FAILURES = [
    NO_DATA_FOR_MONTH,
    MONTH_RESOURCE_NOT_FOUND,
]

UNAVAILABLE_FAILURES = [
    SOURCE_UNAVAILABLE,
]
