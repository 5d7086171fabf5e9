"""
sales_sheets/cli.py

Run report extraction against the configured CSV directory from CLI.

Installed as the ``sales-sheets-report`` console script.
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from typing import Any, Sequence

from sales_sheets.domain.errors import ReportError
from sales_sheets.services.keyword_ranking_service import get_keyword_ranking_service
from sales_sheets.services.sales_report_service import get_sales_report_service


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Inspect sales and keyword CSV reports.")
    commands = parser.add_subparsers(dest="command", required=True)

    keywords = commands.add_parser("keywords", help="Top keyword rows.")
    keywords.add_argument("--option", default=None, help="'1'/'zebra' or '2'/'leopard'.")

    summary = commands.add_parser("summary", help="Totals-row summary for a month.")
    summary.add_argument("month", help="Month number, abbreviation or full name.")

    monthly = commands.add_parser("monthly", help="Periods overlapping a month.")
    monthly.add_argument("month", help="Month number, abbreviation or full name.")

    trend = commands.add_parser("trend", help="Daily goal attainment between two dates.")
    trend.add_argument("start_date", help="yyyy-MM-dd")
    trend.add_argument("end_date", help="yyyy-MM-dd")
    return parser


def _run(args: argparse.Namespace) -> Any:
    if args.command == "keywords":
        return [asdict(record) for record in get_keyword_ranking_service().get_keyword_ranking(args.option)]

    service = get_sales_report_service()
    if args.command == "summary":
        return asdict(service.get_sales_summary(args.month))
    if args.command == "monthly":
        return [asdict(item) for item in service.get_monthly_breakdown(args.month)]
    return [asdict(point) for point in service.get_goal_trend(args.start_date, args.end_date)]


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        payload = _run(args)
    except ReportError as exc:
        print(json.dumps(exc.to_dict(), indent=2), file=sys.stderr)
        return 1

    print(json.dumps(payload, indent=2, default=str))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
