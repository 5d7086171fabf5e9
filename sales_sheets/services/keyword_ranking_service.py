"""
sales_sheets/services/keyword_ranking_service.py

Keyword ranking queries over the keyword research exports.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Mapping

from sales_sheets.config import get_report_source_settings
from sales_sheets.domain.errors import InsufficientDataError, InvalidKeywordSourceError
from sales_sheets.domain.sales_report import KeywordRecord
from sales_sheets.extractors.keyword_extractor import KeywordExtractor
from sales_sheets.logging_utils import log_event
from sales_sheets.repositories.csv_source import CSVSource, get_csv_source

logger = logging.getLogger(__name__)

DEFAULT_OPTION = "1"
KEYWORD_MIN_LINES = 7


class KeywordRankingService:
    """
    Selects a keyword export by option and extracts its top rows.
    """

    def __init__(
        self,
        *,
        source: CSVSource,
        keyword_sources: Mapping[str, str],
        extractor: KeywordExtractor | None = None,
    ) -> None:
        self._source = source
        self._keyword_sources = dict(keyword_sources)
        self._extractor = extractor or KeywordExtractor()

    def resolve_resource(self, option: str | None) -> str:
        key = (option or "").strip().lower() or DEFAULT_OPTION
        resource = self._keyword_sources.get(key)
        if resource is None:
            allowed = ", ".join(repr(name) for name in self._keyword_sources)
            raise InvalidKeywordSourceError(
                f"Invalid option {option!r} provided. Please use one of: {allowed}."
            )
        return resource

    def get_keyword_ranking(self, option: str | None = None) -> list[KeywordRecord]:
        """
        Return the top keyword rows of the selected export ordered by rank text.
        """

        resource = self.resolve_resource(option)
        lines = self._source.read_lines(resource)
        if len(lines) < KEYWORD_MIN_LINES:
            raise InsufficientDataError(
                f"CSV file {resource!r} does not contain enough data "
                f"({len(lines)} lines, expected at least {KEYWORD_MIN_LINES})."
            )

        records = self._extractor.extract(lines)
        log_event(logger, logging.INFO, "keyword_ranking_extracted", resource=resource, rows=len(records))
        return records


@lru_cache(maxsize=1)
def get_keyword_ranking_service() -> KeywordRankingService:
    """
    Build and cache the keyword ranking service with env-driven settings.
    """

    return KeywordRankingService(
        source=get_csv_source(),
        keyword_sources=get_report_source_settings().keyword_sources,
    )
