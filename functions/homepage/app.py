"""
FastAPI application entry point for the homepage backend.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from homepage.config import get_settings
from homepage.middleware import CorsHeadersMiddleware
from homepage.routes import NOT_FOUND, error_response, router


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    # Unknown paths and unsupported methods on known paths are both "not found".
    if exc.status_code in (404, 405):
        return error_response(NOT_FOUND, 404)
    return error_response(str(exc.detail), exc.status_code)


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)
    # Interactive docs are opt-in; otherwise every unknown path is a 404.
    docs_enabled = settings.enable_docs
    app = FastAPI(
        title="Homepage Backend (FastAPI)",
        version="0.1.0",
        docs_url="/docs" if docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )
    app.add_middleware(CorsHeadersMiddleware, allow_origin=settings.cors_allow_origin)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.include_router(router, prefix=settings.api_prefix)
    return app


app = create_app()
