"""
FastAPI server — ingestion endpoint plus read-only dashboard views.

create_app() builds an app that owns a fresh IngestionService (transaction log
+ wallet tracker) in app.state.ingestion, so every app instance, and every
test, starts from empty in-memory state. State is not persisted.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend_qubic import __version__
from backend_qubic.api_server.routes import router as transactions_router
from backend_qubic.config import Settings, get_settings
from backend_qubic.core.exceptions import FraudBackendError
from backend_qubic.ingestion.service import IngestionService
from backend_qubic.qubic_logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info(
        "api_started",
        service=settings.service_name,
        host=settings.api_host,
        port=settings.port,
        cors_origins=list(settings.cors_origins),
    )
    yield
    service: IngestionService = app.state.ingestion
    logger.info(
        "api_stopped",
        transactions=len(service.log),
        wallets=len(service.tracker),
    )


def fraud_error_handler(request: Request, exc: FraudBackendError) -> JSONResponse:
    """Render backend errors as {"error": message}; internal detail stays in the logs."""
    if exc.status_code >= 500:
        logger.error("request_failed", path=request.url.path, error=exc.detail or exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Consistent JSON error response for HTTPException."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


def create_app(
    service: IngestionService | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """
    Build the API.

    Args:
        service: Ingestion service to serve; a new empty one when None.
        settings: Settings to use; read from the environment when None.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Qubic Fraud Backend API",
        description="Scores Qubic transaction events and serves wallet risk views for the dashboard.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.ingestion = service if service is not None else IngestionService()

    allow_any = "*" in settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_any else list(settings.cors_origins),
        allow_credentials=not allow_any,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    app.add_exception_handler(FraudBackendError, fraud_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    app.include_router(transactions_router, prefix="/api")

    @app.get("/", response_class=PlainTextResponse)
    def root() -> str:
        """Liveness text."""
        return f"{settings.service_name} is running."

    @app.get("/health")
    def health() -> dict[str, Any]:
        """Liveness probe: API is up."""
        return {"status": "ok"}

    return app


app = create_app()
