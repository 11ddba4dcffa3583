from __future__ import annotations

import logging
import os
from typing import List

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ostransform import SERVICE_NAME, __version__
from ostransform.logging_setup import configure_logging, logging_middleware
from ostransform.routes import ENDPOINTS
from ostransform.routes import router as api_router
from ostransform.schemas import HealthResponse

logger = logging.getLogger(__name__)


def _cors_origins() -> List[str]:
    raw = os.getenv("CORS_ALLOW_ORIGINS", "*")
    return [o.strip() for o in raw.split(",") if o.strip()] or ["*"]


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title=SERVICE_NAME, version=__version__)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.middleware("http")(logging_middleware)

    @app.get("/health", response_model=HealthResponse)
    def health():
        return HealthResponse(status="ok", service=SERVICE_NAME, version=__version__, endpoints=ENDPOINTS)

    app.include_router(api_router)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return JSONResponse(status_code=404, content={"error": "Not found"})
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.exception_handler(Exception)
    async def internal_error(request: Request, exc: Exception):
        logger.error("unhandled error on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=500, content={"error": "Internal server error", "details": str(exc)})

    return app


app = create_app()
