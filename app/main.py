# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Product Catalog API.
# It validates configuration, then builds the FastAPI application with the
# request gate, exception handlers and routers.
#
# Usage:
#   APP_ENV=dev python -m app
#   APP_ENV=dev uvicorn --factory app.main:build_app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.auth import AuthInterceptor, TokenVerifier, accept_any_token
from app.config import ConfigurationError, Settings, load_settings
from app.exceptions import (
    ProductCatalogException,
    database_exception_handler,
    http_exception_handler,
    product_catalog_exception_handler,
    unexpected_exception_handler,
    validation_exception_handler,
)
from app.gate import RequestGate, log_request
from app.routers import health, products, users
from lib.mongo_client import MongoClientError, MongoDatabase

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)


def build_gate(
    settings: Settings,
    token_verifier: TokenVerifier = accept_any_token,
) -> RequestGate:
    """
    Build the request gate: logging first, then authorization.

    Authorization applies to every route except the configured exclusions.
    """
    return (
        RequestGate()
        .use(log_request)
        .use(
            AuthInterceptor(header=settings.AUTH_HEADER, verifier=token_verifier),
            routes=["*"],
            exclude=settings.excluded_paths_list,
        )
    )


def create_app(
    settings: Settings,
    database: MongoDatabase | None = None,
    token_verifier: TokenVerifier = accept_any_token,
) -> FastAPI:
    """
    Build the FastAPI application from validated settings.

    Args:
        settings: Validated configuration
        database: Database handle; built from settings when omitted
        token_verifier: Checks credential tokens in the auth stage

    Returns:
        FastAPI: The configured application
    """
    if database is None:
        database = MongoDatabase.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler.

        - Startup: Log the mode we are serving
        - Shutdown: Close the database connection pool
        """
        logger.info(f"Starting Product Catalog API in '{settings.APP_ENV}' mode")
        yield
        logger.info("Shutting down Product Catalog API")
        app.state.database.close()

    app = FastAPI(
        title="Product Catalog API",
        description="CRUD API for products and users backed by MongoDB.",
        version=health.API_VERSION,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Products", "description": "Create, read, update and delete products"},
            {"name": "Users", "description": "Create users"},
            {"name": "Health", "description": "API health and readiness checks"},
        ],
    )
    app.state.settings = settings
    app.state.database = database

    # =========================================================================
    # Request Gate
    # =========================================================================

    app.middleware("http")(build_gate(settings, token_verifier))

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(ProductCatalogException, product_catalog_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(MongoClientError, database_exception_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(health.router, tags=["Health"])
    app.include_router(products.router, prefix="/products", tags=["Products"])
    app.include_router(users.router, prefix="/users", tags=["Users"])

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint - returns API info."""
        return {
            "name": "Product Catalog API",
            "version": health.API_VERSION,
            "docs": "/docs",
            "health": "/health",
        }

    return app


def build_app() -> FastAPI:
    """Zero-argument factory for `uvicorn --factory app.main:build_app`."""
    settings = load_settings()
    configure_logging(settings.LOG_LEVEL)
    return create_app(settings)


def main() -> None:
    """
    Validate configuration and serve the API.

    Exits with status 1, before any socket is opened, when the environment
    file is missing or invalid or the database client cannot be built
    from it.
    """
    configure_logging()

    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.error(str(e))
        raise SystemExit(1) from e

    configure_logging(settings.LOG_LEVEL)

    try:
        app = create_app(settings)
    except MongoClientError as e:
        logger.error(str(e))
        raise SystemExit(1) from e

    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
    )
