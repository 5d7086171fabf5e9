"""
sales_sheets/api/dependencies.py

Shared FastAPI helpers for report endpoints.
"""

from __future__ import annotations

from fastapi import HTTPException, status

from sales_sheets import failure_codes
from sales_sheets.domain.errors import ReportError

_STATUS_BY_CODE: dict[str, int] = {
    **{code: 400 for code in failure_codes.INPUT_FAILURES},
    **{code: 422 for code in failure_codes.STRUCTURAL_FAILURES},
    **{code: 404 for code in failure_codes.NOT_FOUND_FAILURES},
    **{code: 503 for code in failure_codes.UNAVAILABLE_FAILURES},
}


def status_for(error: ReportError) -> int:
    """
    Return the HTTP status a report failure is surfaced with.
    """

    return _STATUS_BY_CODE.get(error.code, status.HTTP_500_INTERNAL_SERVER_ERROR)


def to_http_exception(error: ReportError) -> HTTPException:
    """
    Translate a report failure into an HTTPException with a structured detail.
    """

    return HTTPException(status_code=status_for(error), detail=error.to_dict())
