from __future__ import annotations

import logging
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from pydantic import BaseModel

from sales_sheets.config import get_api_settings, get_report_source_settings

_ALLOWED_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class HealthResponse(BaseModel):
    status: str
    data_dir: str
    data_dir_present: bool


def _validate_env() -> None:
    """
    Validate environment variables at startup.

    Raises RuntimeError listing every invalid variable so the operator
    can fix all problems in one restart cycle. Missing CSV files are not
    checked here: each request reports its own unavailable source.
    """

    from sales_sheets.config import load_env_files

    load_env_files()

    errors: list[str] = []

    log_level = os.getenv("LOG_LEVEL")
    if log_level is not None and log_level.strip().upper() not in _ALLOWED_LOG_LEVELS:
        errors.append(
            f"LOG_LEVEL='{log_level.strip()}' is not valid. "
            f"Allowed values: {sorted(_ALLOWED_LOG_LEVELS)}."
        )

    data_dir = os.getenv("CSV_DATA_DIR")
    if data_dir is not None and not data_dir.strip():
        errors.append("CSV_DATA_DIR is set but empty. Unset it or point it at the CSV exports.")

    if errors:
        raise RuntimeError(
            "Startup validation failed, invalid environment variables:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )


def _configure_logging() -> None:
    """
    Configure root logging once for the API process.
    """

    log_level = get_api_settings().log_level
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Report where CSV exports are read from on boot."""
    log = logging.getLogger(__name__)
    data_dir = get_report_source_settings().data_dir
    if data_dir.is_dir():
        log.info("Serving CSV reports from %s", data_dir)
    else:
        log.warning("CSV data directory %s does not exist; report requests will fail", data_dir)
    yield
    log.info("Sales Sheets API shut down")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.
    """

    _validate_env()
    _configure_logging()
    api_settings = get_api_settings()

    application = FastAPI(
        title=api_settings.title,
        version="1.0.0",
        lifespan=_lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=list(api_settings.cors_allowed_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from sales_sheets.api.routers import keyword_ranking_router, sales_report_router

    application.include_router(keyword_ranking_router)
    application.include_router(sales_report_router)

    @application.get("/", include_in_schema=False)
    def root() -> RedirectResponse:
        return RedirectResponse(url="/docs")

    @application.get("/health", response_model=HealthResponse)
    def healthcheck() -> HealthResponse:
        data_dir = get_report_source_settings().data_dir
        return HealthResponse(
            status="ok",
            data_dir=str(data_dir),
            data_dir_present=data_dir.is_dir(),
        )

    return application


app = create_app()
