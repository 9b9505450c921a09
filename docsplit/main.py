"""FastAPI app entry: config, logging, health, and centralized error handling."""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from docsplit.config.logging import configure_logging, get_logger
from docsplit.config.settings import get_settings
from docsplit.controllers.routes.split import router as split_router
from docsplit.services.splitting.errors import SplitError

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: settings and logging."""
    settings = get_settings()
    configure_logging()
    logger.info("Application starting", extra={"app_name": settings.app_name, "environment": settings.environment})
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Document Splitter",
    description="Split documents into chunks for embedding and retrieval",
    version="1.0.0",
    lifespan=lifespan,
)
app.include_router(split_router)


@app.get("/health")
async def health() -> dict[str, Any]:
    """Liveness: service is up."""
    return {"status": "ok"}


@app.exception_handler(SplitError)
async def split_error_handler(_request: Request, exc: SplitError):
    """Splitting errors that escaped a route still carry a code the client can act on."""
    status_code = 400 if isinstance(exc, ValueError) else 502
    return JSONResponse(content={"error": exc.message, "code": exc.code}, status_code=status_code)


@app.exception_handler(Exception)
async def global_exception_handler(_request: Request, exc: Exception):
    """Centralized error handling: no stack traces or internal details reach the client."""
    exc_name = type(exc).__name__
    if "Connection" in exc_name or "Timeout" in exc_name:
        logger.warning("Connection or timeout error", extra={"error": exc_name})
        return JSONResponse(
            content={"detail": "A dependency is temporarily unavailable. Please retry later."},
            status_code=503,
        )
    logger.exception("Unhandled error")
    return JSONResponse(
        content={"detail": "An internal error occurred."},
        status_code=500,
    )
