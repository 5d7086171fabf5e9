"""
Shared pytest fixtures: small CSV exports written to ``tmp_path`` and
services wired to read them.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from sales_sheets.config import ReportSourceSettings
from sales_sheets.mappers.month_resolver import MonthResolver
from sales_sheets.repositories.csv_source import CSVSource
from sales_sheets.services.keyword_ranking_service import KeywordRankingService
from sales_sheets.services.sales_report_service import SalesReportService

from csv_samples import BUDGET_LINES, KEYWORD_LINES, MONTHLY_LINES, SUMMARY_LINES, write_lines


@pytest.fixture()
def report_settings(tmp_path: Path) -> ReportSourceSettings:
    """Settings pointing every resource at files under ``tmp_path``."""
    return ReportSourceSettings(
        data_dir=tmp_path,
        keyword_primary_file="keywords_primary.csv",
        keyword_secondary_file="keywords_secondary.csv",
        monthly_totals_file="DashboardTotalsMonthly.csv",
        budget_tracker_file="budget_tracker.csv",
        monthly_sales_files={"March": "MonthlySales/SalesByProducts_2024_Mar.csv"},
    )


@pytest.fixture()
def populated_data_dir(tmp_path: Path, report_settings: ReportSourceSettings) -> Path:
    write_lines(tmp_path / report_settings.keyword_primary_file, KEYWORD_LINES)
    write_lines(tmp_path / report_settings.monthly_sales_files["March"], SUMMARY_LINES)
    write_lines(tmp_path / report_settings.monthly_totals_file, MONTHLY_LINES)
    write_lines(tmp_path / report_settings.budget_tracker_file, BUDGET_LINES)
    return tmp_path


@pytest.fixture()
def sales_service(populated_data_dir: Path, report_settings: ReportSourceSettings) -> SalesReportService:
    return SalesReportService(
        source=CSVSource(populated_data_dir),
        settings=report_settings,
        month_resolver=MonthResolver(report_settings.monthly_sales_files),
    )


@pytest.fixture()
def keyword_service(
    populated_data_dir: Path, report_settings: ReportSourceSettings
) -> KeywordRankingService:
    return KeywordRankingService(
        source=CSVSource(populated_data_dir),
        keyword_sources=report_settings.keyword_sources,
    )
