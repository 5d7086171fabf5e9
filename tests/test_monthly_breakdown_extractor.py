from __future__ import annotations

import pytest

from sales_sheets.domain.errors import MalformedRowError
from sales_sheets.domain.sales_report import MonthlyBreakdown
from sales_sheets.extractors.monthly_breakdown_extractor import MonthlyBreakdownExtractor

from csv_samples import MONTHLY_LINES

JANUARY_ROW = '"1/01/2024";"31/01/2024";"1000";"400";"";"";"";"";"";"";"55"'


@pytest.fixture()
def extractor() -> MonthlyBreakdownExtractor:
    return MonthlyBreakdownExtractor()


def test_january_row_included_for_month_one(extractor: MonthlyBreakdownExtractor) -> None:
    result = extractor.extract(["header", JANUARY_ROW], 1)
    assert result == [
        MonthlyBreakdown(
            date_from="1/01/2024",
            date_to="31/01/2024",
            organic_sales="1000",
            sponsored_sales="400",
            orders="55",
        )
    ]


def test_january_row_excluded_for_month_two(extractor: MonthlyBreakdownExtractor) -> None:
    assert extractor.extract(["header", JANUARY_ROW], 2) == []


def test_period_spanning_months_matches_each_month(extractor: MonthlyBreakdownExtractor) -> None:
    february = extractor.extract(MONTHLY_LINES, 2)
    march = extractor.extract(MONTHLY_LINES, 3)
    assert [item.date_from for item in february] == ["1/02/2024", "15/02/2024"]
    assert [item.date_from for item in march] == ["15/02/2024"]


def test_unparsable_dates_are_skipped(extractor: MonthlyBreakdownExtractor) -> None:
    assert all(item.date_from != "not a date" for item in extractor.extract(MONTHLY_LINES, 3))


def test_header_row_is_never_returned(extractor: MonthlyBreakdownExtractor) -> None:
    lines = [JANUARY_ROW, JANUARY_ROW]
    assert len(extractor.extract(lines, 1)) == 1


def test_no_match_returns_empty_list(extractor: MonthlyBreakdownExtractor) -> None:
    assert extractor.extract(MONTHLY_LINES, 7) == []


def test_blank_and_single_column_rows_are_skipped(extractor: MonthlyBreakdownExtractor) -> None:
    assert extractor.extract(["header", "", "only-one-field", JANUARY_ROW], 1)[0].orders == "55"


def test_matching_row_without_orders_column_is_malformed(
    extractor: MonthlyBreakdownExtractor,
) -> None:
    with pytest.raises(MalformedRowError) as exc_info:
        extractor.extract(["header", '"1/01/2024";"31/01/2024";"1000";"400"'], 1)
    assert exc_info.value.row_number == 2


def test_short_row_outside_month_is_ignored(extractor: MonthlyBreakdownExtractor) -> None:
    assert extractor.extract(["header", '"1/05/2024";"31/05/2024";"1"'], 1) == []
