"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from kraftai.annotation.base import AnnotationUnavailableError
from kraftai.config import settings
from kraftai.models.responses import ErrorResponse

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.kraftai_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def _error(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


def _install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 404 and exc.detail == "Not Found":
            return _error(404, "Endpoint not found")
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(AnnotationUnavailableError)
    async def annotation_unavailable(request: Request, exc: AnnotationUnavailableError) -> JSONResponse:
        return _error(503, "Failed to analyze image", details=str(exc))

    @app.exception_handler(Exception)
    async def unhandled(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s", request.url.path)
        return _error(500, "Internal server error", details=str(exc))


def create_app() -> FastAPI:
    app = FastAPI(
        title="KraftAI",
        description="Craft image analysis and pricing-context synthesis for artisan storefronts",
        version="2.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    _install_error_handlers(app)

    # Import all stage modules to trigger registration
    from kraftai.engine.pipeline import register_stages

    count = register_stages()
    logger.info("Registered %d analysis stages", count)

    from kraftai.api.health import root_router
    from kraftai.api.router import api_router

    app.include_router(root_router)
    app.include_router(api_router)

    return app


app = create_app()
