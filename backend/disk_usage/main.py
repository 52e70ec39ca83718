"""disk-usage FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

from disk_usage import __version__
from disk_usage.api.responses import NoStoreJSONResponse, NotFoundResponse
from disk_usage.config import settings
from disk_usage.schemas.disk import DiskStatsErrorResponse
from disk_usage.services import init_services, shutdown_services
from disk_usage.services.errors import DiskStatsError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    """Startup / shutdown lifecycle."""
    _setup_logging()
    init_services()
    logger.info("disk-usage listening on %s for %s", settings.port, settings.disk_path)

    try:
        yield
    finally:
        shutdown_services()
        logger.info("disk-usage shutting down")


def _setup_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


async def _disk_stats_error_handler(request: Request, exc: DiskStatsError) -> NoStoreJSONResponse:
    logger.error("Disk stats failed for %s: %s", settings.disk_path, exc)
    body = DiskStatsErrorResponse(message=str(exc))
    return NoStoreJSONResponse(body.model_dump(), status_code=500)


async def _http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return NotFoundResponse()
    return await http_exception_handler(request, exc)


def create_app() -> FastAPI:
    """Application factory."""
    from disk_usage.api.routes import api_router

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        lifespan=_lifespan,
        default_response_class=NoStoreJSONResponse,
        # Only /health and /disk are served; everything else is a 404
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    app.add_exception_handler(DiskStatsError, _disk_stats_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)

    app.include_router(api_router)
    return app


app = create_app()


def run(**kwargs: Any) -> None:
    import uvicorn

    uvicorn.run(
        "disk_usage.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        **kwargs,
    )


if __name__ == "__main__":
    run()
