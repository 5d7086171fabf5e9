"""
tests/test_api_contract.py

HTTP contract for the report endpoints: camelCase bodies, status codes
and structured error details.
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from sales_sheets.api.dependencies import status_for
from sales_sheets.domain.errors import (
    InsufficientColumnsError,
    MalformedRowError,
    NoDataForMonthError,
    SourceUnavailableError,
    UnrecognizedMonthError,
)
from sales_sheets.domain.sales_report import DailyGoalPoint
from sales_sheets.main import create_app
from sales_sheets.schemas.sales_report import DailyGoalPointResponse
from sales_sheets.services.keyword_ranking_service import (
    KeywordRankingService,
    get_keyword_ranking_service,
)
from sales_sheets.services.sales_report_service import (
    SalesReportService,
    get_sales_report_service,
)


@pytest.fixture()
def app(
    sales_service: SalesReportService,
    keyword_service: KeywordRankingService,
) -> FastAPI:
    application = create_app()
    application.dependency_overrides[get_sales_report_service] = lambda: sales_service
    application.dependency_overrides[get_keyword_ranking_service] = lambda: keyword_service
    return application


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


# ---------------------------------------------------------------------------
# Success payloads
# ---------------------------------------------------------------------------


def test_keyword_ranking_payload(client: TestClient) -> None:
    response = client.get("/KWRANKING", params={"option": "zebra"})

    assert response.status_code == 200
    body = response.json()
    assert len(body) == 5
    assert set(body[0]) == {
        "keyword",
        "rank",
        "conversionRate",
        "impressions",
        "clicks",
        "spend",
        "totalSales",
    }
    assert [row["rank"] for row in body] == ["1", "10", "2", "3", "5"]


def test_keyword_ranking_defaults_to_primary_report(client: TestClient) -> None:
    response = client.get("/KWRANKING")
    assert response.status_code == 200
    assert response.json()[0]["keyword"] == "zebra costume"


def test_sales_summary_payload(client: TestClient) -> None:
    response = client.get("/SALESRANKING/mar")

    assert response.status_code == 200
    assert response.json() == {
        "totalSales": "12 345,50 kr",
        "totalProducts": "321",
        "totalRefunds": "7",
        "budget": "20 000 kr",
    }


def test_monthly_breakdown_payload(client: TestClient) -> None:
    response = client.get("/DETAILEDSALES/1")

    assert response.status_code == 200
    assert response.json() == [
        {
            "dateFrom": "1/01/2024",
            "dateTo": "31/01/2024",
            "organicSales": "1000",
            "sponsoredSales": "400",
            "orders": "55",
        }
    ]


def test_goal_trend_payload(client: TestClient) -> None:
    response = client.get("/FILTEREDSALES/2024-01-02/2024-01-03")

    assert response.status_code == 200
    body = response.json()
    assert [point["date"] for point in body] == ["2024-01-02", "2024-01-03"]
    assert [point["cumulativeSales"] for point in body] == [250.0, 300.0]
    assert [point["goalAttainmentPercent"] for point in body] == pytest.approx([25.0, 30.0])
    assert body[0]["dailySales"] == 150.0
    assert body[0]["monthlyGoal"] == 1000.0



def test_goal_point_decimals_round_to_doubles() -> None:
    point = DailyGoalPoint(
        date=dt.date(2024, 1, 1),
        daily_sales=Decimal("0.1"),
        monthly_goal=Decimal("3"),
        cumulative_sales=Decimal("0.1"),
        goal_attainment_percent=Decimal(100) * Decimal("0.1") / Decimal(3),
    )

    body = DailyGoalPointResponse.from_point(point).model_dump(mode="json", by_alias=True)

    assert body["goalAttainmentPercent"] == 3.3333333333333335
    assert body["dailySales"] == 0.1
    assert body["date"] == "2024-01-01"


# ---------------------------------------------------------------------------
# Error payloads
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "path, status_code, code",
    [
        ("/KWRANKING?option=panther", 400, "invalid_keyword_source"),
        ("/KWRANKING?option=leopard", 503, "source_unavailable"),
        ("/SALESRANKING/foo", 400, "unrecognized_month"),
        ("/SALESRANKING/april", 404, "month_resource_not_found"),
        ("/DETAILEDSALES/13", 400, "unrecognized_month"),
        ("/DETAILEDSALES/july", 404, "no_data_for_month"),
        ("/FILTEREDSALES/2024-01-03/2024-01-02", 400, "invalid_date_range"),
        ("/FILTEREDSALES/2024-13-01/2024-01-02", 400, "invalid_date"),
    ],
)
def test_error_mapping(client: TestClient, path: str, status_code: int, code: str) -> None:
    response = client.get(path)

    assert response.status_code == status_code
    detail = response.json()["detail"]
    assert detail["code"] == code
    assert detail["message"]


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_root_redirects_to_docs(client: TestClient) -> None:
    response = client.get("/", follow_redirects=False)
    assert response.status_code == 307
    assert response.headers["location"] == "/docs"


# ---------------------------------------------------------------------------
# Status mapping
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "error, expected",
    [
        (UnrecognizedMonthError("foo"), 400),
        (InsufficientColumnsError("short"), 422),
        (MalformedRowError("bad", row_number=4), 422),
        (NoDataForMonthError("none"), 404),
        (SourceUnavailableError("gone", resource="x.csv"), 503),
    ],
)
def test_status_for(error: Exception, expected: int) -> None:
    assert status_for(error) == expected


def test_malformed_row_detail_carries_row_number() -> None:
    assert MalformedRowError("bad", row_number=4).to_dict() == {
        "code": "malformed_row",
        "message": "bad",
        "row_number": 4,
    }
