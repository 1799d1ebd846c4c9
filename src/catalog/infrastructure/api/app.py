"""
Catalog Service - HTTP application.

Builds the FastAPI app, wires the product repository into ``app.state`` and
translates domain exceptions into JSON error bodies. This is the only place
that maps exceptions to status codes.
"""

import time
import uuid
from typing import Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from catalog.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.api.product_routes import router as product_router
from catalog.infrastructure.api.schemas import HealthResponse
from catalog.infrastructure.bootstrap import product_repository
from catalog.infrastructure.config import Settings, get_settings
from catalog.infrastructure.logging_config import configure_logging

logger = structlog.get_logger(__name__)

# Checked in order; subclasses must precede their bases.
_ERROR_KINDS: list[tuple[type[DomainException], str]] = [
    (InsufficientStockError, "InsufficientStock"),
    (ValidationError, "ValidationError"),
    (EntityNotFoundError, "NotFound"),
]


def _error(status_code: int, kind: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"error": kind, "message": message}
    )


def _format_request_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{location}: {err.get('msg')}" if location else err.get("msg"))
    return "; ".join(parts) or "Invalid request"


async def domain_exception_handler(request: Request, exc: DomainException):
    """Map domain failures to 400 with a machine-readable kind."""
    kind = next(
        (name for cls, name in _ERROR_KINDS if isinstance(exc, cls)), "DomainError"
    )
    logger.info(
        "Request rejected",
        path=request.url.path,
        method=request.method,
        kind=kind,
        reason=str(exc),
    )
    return _error(status.HTTP_400_BAD_REQUEST, kind, str(exc))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and parameters are a 400, like any other bad input."""
    message = _format_request_errors(exc)
    logger.info(
        "Request validation failed",
        path=request.url.path,
        method=request.method,
        reason=message,
    )
    return _error(status.HTTP_400_BAD_REQUEST, "ValidationError", message)


async def unexpected_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions."""
    logger.error(
        "Unhandled exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        exc_info=True,
    )
    return _error(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Unexpected",
        "An unexpected error occurred",
    )


def create_app(
    repository: Optional[ProductRepository] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Build the catalog API.

    ``repository`` defaults to whatever the configured storage backend
    provides; tests pass an in-memory one.
    """
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL, json=settings.LOG_JSON)

    app = FastAPI(
        title="Catalog Service",
        description="Product catalog with stock tracking",
        version="1.0.0",
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )
    app.state.settings = settings
    if repository is None:
        repository = product_repository(settings)
    app.state.product_repository = repository

    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)

    @app.middleware("http")
    async def request_context_middleware(request: Request, call_next):
        """Bind a request id to every log line emitted while serving a request."""
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        structlog.contextvars.bind_contextvars(request_id=request_id)
        start = time.perf_counter()
        try:
            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id
            logger.info(
                "Request handled",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
            )
            return response
        finally:
            structlog.contextvars.clear_contextvars()

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    def health_check():
        """Health check endpoint."""
        return HealthResponse(status="healthy", service=settings.SERVICE_NAME)

    app.include_router(product_router)

    logger.info(
        "Catalog service configured",
        storage=type(app.state.product_repository).__name__,
    )
    return app
