"""
sales_sheets/repositories/csv_source.py

Read-only access to CSV report snapshots on the local filesystem.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from sales_sheets.config import get_report_source_settings
from sales_sheets.domain.errors import SourceUnavailableError
from sales_sheets.logging_utils import log_event

logger = logging.getLogger(__name__)


class CSVSource:
    """
    Loads whole CSV resources as ordered raw lines.

    Resources are paths relative to ``root_dir``. Files are treated as
    immutable snapshots that an external tool refreshes.
    """

    def __init__(self, root_dir: str | Path = "csvFiles", *, encoding: str = "utf-8-sig") -> None:
        self._root_dir = Path(root_dir)
        self._encoding = encoding

    @property
    def root_dir(self) -> Path:
        return self._root_dir

    def resolve_path(self, resource: str) -> Path:
        return self._root_dir / resource

    def read_lines(self, resource: str) -> list[str]:
        """
        Return every line of ``resource`` without line terminators.

        Raises SourceUnavailableError when the file is missing or unreadable.
        """

        path = self.resolve_path(resource)
        if not path.is_file():
            log_event(logger, logging.WARNING, "csv_source_missing", resource=resource, path=path)
            raise SourceUnavailableError(
                f"CSV resource {resource!r} is not available.",
                resource=resource,
            )

        try:
            text = path.read_text(encoding=self._encoding)
        except UnicodeDecodeError as exc:
            raise SourceUnavailableError(
                f"CSV resource {resource!r} is not valid {self._encoding} text.",
                resource=resource,
            ) from exc
        except OSError as exc:
            raise SourceUnavailableError(
                f"CSV resource {resource!r} could not be read.",
                resource=resource,
            ) from exc

        lines = text.splitlines()
        log_event(logger, logging.DEBUG, "csv_source_loaded", resource=resource, lines=len(lines))
        return lines


@lru_cache(maxsize=1)
def get_csv_source() -> CSVSource:
    """
    Build and cache the CSV source rooted at the configured data directory.
    """

    return CSVSource(get_report_source_settings().data_dir)
