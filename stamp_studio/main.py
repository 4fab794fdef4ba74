"""FastAPI application entry point.

Design review service: clients submit stamp designs, designers approve or
reject them, approved designs yield technical production sheets.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from stamp_studio import __version__
from stamp_studio.config import settings
from stamp_studio.domain.errors import DomainError
from stamp_studio.infra.database import close_db_engine, create_tables, verify_db_connection
from stamp_studio.infra.logging import (
    bind_request_context,
    clear_request_context,
    get_logger,
    setup_logging,
)
from stamp_studio.schemas.common import ErrorResponse

# Import routers
from stamp_studio.api.routes.designs import router as designs_router
from stamp_studio.api.routes.health import router as health_router
from stamp_studio.api.routes.products import router as products_router
from stamp_studio.api.routes.reviews import router as reviews_router

# Setup logging first
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler.

    Startup:
    - Optionally create missing tables
    - Verify database connection

    Shutdown:
    - Close database connections
    """
    logger.info("Stamp Studio starting", environment=settings.environment, version=__version__)

    if settings.db_create_tables:
        await create_tables()

    db_ok = await verify_db_connection()
    if not db_ok:
        logger.warning("Database connection failed - will retry on first request")

    yield

    logger.info("Stamp Studio shutting down")
    await close_db_engine()
    logger.info("Cleanup complete")


app = FastAPI(
    title="Stamp Studio",
    description="Print-on-demand design review and technical sheet service",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.environment == "dev" else None,
    redoc_url=None,
)

if settings.environment == "dev":
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Bind request context for every log line emitted while handling it."""
    clear_request_context()
    bind_request_context(method=request.method, path=request.url.path)

    response = await call_next(request)

    logger.debug("Request handled", status_code=response.status_code)
    return response


# =============================================================================
# Exception Handlers
# =============================================================================


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render workflow errors with the status code their type carries."""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        "Request failed",
        error=exc.message,
        error_type=type(exc).__name__,
        status_code=exc.status_code,
        path=request.url.path,
        **exc.context,
    )

    body = ErrorResponse(error=exc.message, error_type=type(exc).__name__)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions."""
    logger.error(
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        exc_info=True,
    )

    body = ErrorResponse(error="Internal server error", error_type=type(exc).__name__)
    return JSONResponse(status_code=500, content=body.model_dump())


# =============================================================================
# Include Routers
# =============================================================================

app.include_router(health_router, tags=["Health"])
app.include_router(products_router, prefix="/api/products", tags=["Products"])
app.include_router(designs_router, prefix="/api/designs", tags=["Designs"])
app.include_router(reviews_router, prefix="/api/reviews", tags=["Reviews"])


@app.get("/")
async def root() -> dict:
    """Root endpoint - basic service info."""
    return {
        "service": "Stamp Studio",
        "version": __version__,
        "environment": settings.environment,
    }
