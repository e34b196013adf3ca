# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error body is JSON with a human-readable "message"; nothing internal
# (tracebacks, driver errors) is sent to clients.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from lib.mongo_client import MongoClientError

logger = logging.getLogger(__name__)


class ProductCatalogException(Exception):
    """
    Base exception for the Product Catalog API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "PRODUCT_CATALOG_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "message": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Identifier Exceptions
# =============================================================================

class InvalidIdentifierError(ProductCatalogException):
    """Raised when a path id is not a well-formed ObjectId."""

    def __init__(self, identifier: str):
        super().__init__(
            message="Invalid ID format",
            code="INVALID_ID",
            status_code=400,
            suggestion="IDs are 24-character hexadecimal strings",
            details={"id": identifier}
        )


# =============================================================================
# Product Exceptions
# =============================================================================

class ProductNotFoundError(ProductCatalogException):
    """Raised when no product has the given id."""

    def __init__(self, product_id: str):
        super().__init__(
            message="Product not found",
            code="PRODUCT_NOT_FOUND",
            status_code=404,
            suggestion="Check that the product id is correct and the product hasn't been deleted",
            details={"id": product_id}
        )


# =============================================================================
# Persistence Exceptions
# =============================================================================

class DatabaseUnavailableError(ProductCatalogException):
    """Raised when the database cannot serve a request."""

    def __init__(self, operation: str):
        super().__init__(
            message="Database temporarily unavailable",
            code="DATABASE_UNAVAILABLE",
            status_code=503,
            suggestion="Try again later or contact support if the issue persists",
            details={"operation": operation}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def product_catalog_exception_handler(
    request: Request,
    exc: ProductCatalogException
) -> JSONResponse:
    """
    Convert ProductCatalogException to JSON response.

    Returns structured error with:
    - message: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request body/parameter validation errors.

    Every failing field is reported, with a 400 status.
    """
    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"] if part != "body"),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={
            "message": "Validation failed",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """Reshape framework HTTP errors (unknown route, bad method) into {message}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def database_exception_handler(
    request: Request,
    exc: MongoClientError
) -> JSONResponse:
    """Log persistence failures and hide driver details from clients."""
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    error = DatabaseUnavailableError(operation=exc.details.get("operation", "unknown"))
    return JSONResponse(
        status_code=error.status_code,
        content=error.to_dict()
    )


async def unexpected_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "message": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )
