"""
sales_sheets/repositories package marker.
"""

from sales_sheets.repositories.csv_source import CSVSource, get_csv_source

__all__ = [
    "CSVSource",
    "get_csv_source",
]
