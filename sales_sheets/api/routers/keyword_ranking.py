"""
sales_sheets/api/routers/keyword_ranking.py

Keyword ranking HTTP endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from sales_sheets.api.dependencies import to_http_exception
from sales_sheets.domain.errors import ReportError
from sales_sheets.schemas.keyword_ranking import KeywordRankingResponse
from sales_sheets.schemas.sales_report import ReportErrorEnvelope
from sales_sheets.services.keyword_ranking_service import (
    KeywordRankingService,
    get_keyword_ranking_service,
)

router = APIRouter(tags=["keywords"])


@router.get(
    "/KWRANKING",
    response_model=list[KeywordRankingResponse],
    responses={
        400: {"model": ReportErrorEnvelope},
        422: {"model": ReportErrorEnvelope},
        503: {"model": ReportErrorEnvelope},
    },
)
def get_keyword_ranking(
    option: str | None = Query(
        default=None,
        description="Keyword report: '1' or 'zebra' (default), '2' or 'leopard'.",
    ),
    service: KeywordRankingService = Depends(get_keyword_ranking_service),
) -> list[KeywordRankingResponse]:
    """
    Return the top keyword rows of the selected report, ordered by rank text.
    """

    try:
        records = service.get_keyword_ranking(option)
    except ReportError as exc:
        raise to_http_exception(exc) from exc

    return [KeywordRankingResponse.from_record(record) for record in records]
