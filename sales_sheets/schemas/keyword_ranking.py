"""
sales_sheets/schemas/keyword_ranking.py

Response schemas for keyword ranking endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from sales_sheets.domain.sales_report import KeywordRecord


class KeywordRankingResponse(BaseModel):
    """
    API response model for one ranked keyword. Values are raw report text.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        frozen=True,
    )

    keyword: str
    rank: str
    conversion_rate: str
    impressions: str
    clicks: str
    spend: str
    total_sales: str

    @classmethod
    def from_record(cls, record: KeywordRecord) -> "KeywordRankingResponse":
        return cls.model_validate(record)
