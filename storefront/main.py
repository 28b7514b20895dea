"""Storefront Sections API -- FastAPI Application Entry Point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.api.v1.router import api_v1_router
from storefront.config import settings
from storefront.core.exceptions import CategoryCycleError, NotFoundError, StorefrontException
from storefront.schemas import ErrorDetail, ErrorResponse
from storefront.services.catalog_loader import load_catalog

# Configure logging
logging.basicConfig(
    level=logging.INFO if settings.DEBUG else logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: load the catalog snapshot on startup."""
    logger.info("Starting Storefront Sections API...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Debug mode: {settings.DEBUG}")

    # A broken snapshot should stop startup rather than serve empty sections
    app.state.catalog = load_catalog(settings.CATALOG_PATH)
    logger.info(
        f"Catalog ready: {len(app.state.catalog.products)} products, "
        f"{len(app.state.catalog.sections)} sections"
    )

    yield

    logger.info("Shutting down Storefront Sections API...")


app = FastAPI(
    title="Storefront Sections API",
    description="Resolves home page product sections and featured tabs from a catalog snapshot",
    version="0.1.0",
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        settings.FRONTEND_URL,
        "http://localhost:3000",
    ],
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    body = ErrorResponse(error=ErrorDetail(code=code, message=message))
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.exception_handler(StorefrontException)
async def storefront_exception_handler(request: Request, exc: StorefrontException):
    """Map domain errors onto the standard error envelope."""
    if isinstance(exc, NotFoundError):
        return _error_response(404, "not_found", exc.message)
    if isinstance(exc, CategoryCycleError):
        logger.error(f"Category cycle while serving {request.url.path}: {exc.message}")
        return _error_response(409, "category_cycle", exc.message)
    return _error_response(400, "bad_request", exc.message)


# Register API v1 router
app.include_router(api_v1_router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Storefront Sections API",
        "version": "0.1.0",
        "description": "Home page section resolution and featured tab ranking",
        "docs": "/docs" if settings.DEBUG else None,
        "health": "/api/v1/health",
    }
