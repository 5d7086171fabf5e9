"""
sales_sheets/config.py

Application-level configuration helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]

DEFAULT_CORS_ORIGINS: tuple[str, ...] = (
    "https://googlesheetsapi-b4e4bdh9a0fpakg0.westeurope-01.azurewebsites.net",
    "http://localhost:4200",
    "https://thankful-sand-08fac1a03.5.azurestaticapps.net",
)

# Canonical month name -> resource path relative to the data directory.
DEFAULT_MONTHLY_SALES_FILES: dict[str, str] = {
    "January": "MonthlySales/SalesByProducts_2024_Jan.csv",
    "February": "MonthlySales/SalesByProducts_2024_Feb.csv",
    "March": "MonthlySales/SalesByProducts_2024_Mar.csv",
    "April": "MonthlySales/SalesByProducts_2024_Apr.csv",
    "May": "MonthlySales/SalesByProducts_2024_May.csv",
    "June": "MonthlySales/SalesByProducts_2024_Jun.csv",
    "July": "MonthlySales/SalesByProducts_2024_Jul.csv",
    "August": "MonthlySales/SalesByProducts_2024_Aug.csv",
    "September": "MonthlySales/SalesByProducts_2024_Sept.csv",
    "October": "MonthlySales/SalesByProducts_2023_Oct.csv",
    "November": "MonthlySales/SalesByProducts_2023_Nov.csv",
    "December": "MonthlySales/SalesByProducts_2023_Dec.csv",
}


def load_env_files() -> None:
    """
    Load simple KEY=VALUE pairs from `.env` and `.env.local` (if present).
    Existing process environment variables are not overwritten.
    """

    for filename in (".env", ".env.local"):
        env_path = _PROJECT_ROOT / filename
        if not env_path.exists():
            continue

        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and key not in os.environ:
                os.environ[key] = value


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading app settings.
    """

    load_env_files()


def _get_str_env(name: str, default: str) -> str:
    """
    Read a string from environment variables with fallback.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


def _get_list_env(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    """
    Read a comma-separated list from environment variables with fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    items = tuple(item.strip().rstrip("/") for item in raw_value.split(",") if item.strip())
    return items if items else default


@dataclass(frozen=True)
class ReportSourceSettings:
    """
    Locations of the CSV exports served by the API.

    All resource paths are relative to ``data_dir``.
    """

    data_dir: Path = Path("csvFiles")
    keyword_primary_file: str = "kwresearchstest2.csv"
    keyword_secondary_file: str = "kwresearchstest3.csv"
    monthly_totals_file: str = "DashboardTotalsMonthly.csv"
    budget_tracker_file: str = "september_budget_tracker_minimal.csv"
    monthly_sales_files: dict[str, str] = field(
        default_factory=lambda: dict(DEFAULT_MONTHLY_SALES_FILES)
    )

    @property
    def keyword_sources(self) -> dict[str, str]:
        """
        Keyword report option -> resource path.
        """

        return {
            "1": self.keyword_primary_file,
            "zebra": self.keyword_primary_file,
            "2": self.keyword_secondary_file,
            "leopard": self.keyword_secondary_file,
        }


@dataclass(frozen=True)
class APISettings:
    """
    HTTP surface settings.
    """

    title: str = "Sales Sheets API"
    cors_allowed_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_report_source_settings() -> ReportSourceSettings:
    """
    Return cached CSV source settings from environment variables.
    """

    data_dir = Path(_get_str_env("CSV_DATA_DIR", "csvFiles"))
    if not data_dir.is_absolute():
        data_dir = Path.cwd() / data_dir

    return ReportSourceSettings(
        data_dir=data_dir,
        keyword_primary_file=_get_str_env("KEYWORD_PRIMARY_FILE", "kwresearchstest2.csv"),
        keyword_secondary_file=_get_str_env("KEYWORD_SECONDARY_FILE", "kwresearchstest3.csv"),
        monthly_totals_file=_get_str_env("MONTHLY_TOTALS_FILE", "DashboardTotalsMonthly.csv"),
        budget_tracker_file=_get_str_env(
            "BUDGET_TRACKER_FILE", "september_budget_tracker_minimal.csv"
        ),
    )


@lru_cache(maxsize=1)
def get_api_settings() -> APISettings:
    """
    Return cached HTTP settings from environment variables.
    """

    return APISettings(
        title=_get_str_env("API_TITLE", "Sales Sheets API"),
        cors_allowed_origins=_get_list_env("CORS_ALLOWED_ORIGINS", DEFAULT_CORS_ORIGINS),
        log_level=_get_str_env("LOG_LEVEL", "INFO").upper(),
    )
