"""
Frontify Collection Export API - Main Application Entry Point.

FastAPI application that turns Frontify asset metadata, including dynamic
custom metadata fields, into CSV downloads.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import get_settings
from app.core.exceptions import ExportAPIException
from app.core.responses import create_error_response
from app.api.v1.router import api_router

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    # Startup
    logger.info(f"Starting {settings.PROJECT_NAME}")
    logger.info(f"Debug mode: {settings.DEBUG}")

    if settings.frontify_configured:
        logger.info(f"Frontify library: {settings.FRONTIFY_LIBRARY_ID} on {settings.FRONTIFY_DOMAIN}")
    else:
        logger.warning("Frontify access not configured - collection endpoints will fail")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.PROJECT_NAME}")


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="""
## Frontify Collection Export API

Exports Frontify asset metadata as CSV.

### Features
- **Collection Export**: Download every asset of a library collection as CSV
- **Custom Metadata**: One column per custom metadata property found in the batch
- **Ad-hoc Export**: Convert an asset batch you already fetched
- **Preview**: Inspect the column schema and rows before downloading
    """,
    version=__version__,
    openapi_tags=[
        {"name": "collections", "description": "Collection listing and export"},
        {"name": "exports", "description": "CSV export of supplied asset batches"},
        {"name": "health", "description": "Service health checks"},
    ],
    lifespan=lifespan,
)

# CORS middleware for cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],
)


@app.exception_handler(ExportAPIException)
async def export_exception_handler(request: Request, exc: ExportAPIException) -> JSONResponse:
    """
    Global exception handler for export API exceptions.
    Returns standardized error responses.
    """
    if exc.status_code >= 500:
        logger.error(f"{exc.error}: {exc.message}")
    return create_error_response(
        error=exc.error,
        message=exc.message,
        status_code=exc.status_code,
        details=exc.details,
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Catch-all exception handler for unexpected errors.
    Logs the full error but returns a sanitized response.
    """
    logger.exception(f"Unexpected error: {exc}")
    return create_error_response(
        error="internal_error",
        message="An unexpected error occurred",
        status_code=500,
    )


# Include API routers
app.include_router(api_router, prefix=settings.API_V1_PREFIX)


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint with service information."""
    return {
        "name": settings.PROJECT_NAME,
        "version": __version__,
        "docs": "/docs",
        "openapi": "/openapi.json",
        "api": settings.API_V1_PREFIX,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
