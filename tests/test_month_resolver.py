from __future__ import annotations

import unittest

from sales_sheets.config import DEFAULT_MONTHLY_SALES_FILES
from sales_sheets.domain.errors import MonthResourceNotFoundError, UnrecognizedMonthError
from sales_sheets.mappers.month_resolver import MONTH_NAMES, MonthResolver


class TestMonthResolver(unittest.TestCase):
    def setUp(self) -> None:
        self.resolver = MonthResolver(DEFAULT_MONTHLY_SALES_FILES)

    def test_all_spellings_resolve_to_the_same_name(self) -> None:
        for number, name in enumerate(MONTH_NAMES, start=1):
            with self.subTest(month=name):
                self.assertEqual(self.resolver.resolve(str(number)), name)
                self.assertEqual(self.resolver.resolve(name[:3]), name)
                self.assertEqual(self.resolver.resolve(name), name)

    def test_march_spellings(self) -> None:
        self.assertEqual(
            {self.resolver.resolve(token) for token in ("3", "mar", "march")},
            {"March"},
        )

    def test_tokens_are_trimmed_and_case_insensitive(self) -> None:
        self.assertEqual(self.resolver.resolve("  SEPTEMBER "), "September")
        self.assertEqual(self.resolver.resolve("Dec"), "December")
        self.assertEqual(self.resolver.resolve("may"), "May")

    def test_rejects_unknown_tokens(self) -> None:
        for token in ("13", "", "foo", "0", "sept", "01"):
            with self.subTest(token=token):
                with self.assertRaises(UnrecognizedMonthError) as ctx:
                    self.resolver.resolve(token)
                self.assertEqual(ctx.exception.code, "unrecognized_month")

    def test_none_token_is_rejected(self) -> None:
        with self.assertRaises(UnrecognizedMonthError):
            self.resolver.resolve(None)

    def test_month_number_is_calendar_order(self) -> None:
        self.assertEqual(self.resolver.month_number("January"), 1)
        self.assertEqual(self.resolver.month_number("March"), 3)
        self.assertEqual(self.resolver.month_number("December"), 12)

    def test_month_number_rejects_non_canonical_name(self) -> None:
        with self.assertRaises(UnrecognizedMonthError):
            self.resolver.month_number("march")

    def test_every_month_has_a_default_resource(self) -> None:
        for name in MONTH_NAMES:
            with self.subTest(month=name):
                self.assertTrue(self.resolver.resource_path_for(name).endswith(".csv"))

    def test_september_resource_uses_sept_suffix(self) -> None:
        self.assertEqual(
            self.resolver.resource_path_for("September"),
            "MonthlySales/SalesByProducts_2024_Sept.csv",
        )

    def test_unconfigured_month_is_not_found(self) -> None:
        resolver = MonthResolver({"March": "march.csv"})
        with self.assertRaises(MonthResourceNotFoundError):
            resolver.resource_path_for("April")


if __name__ == "__main__":
    unittest.main()
