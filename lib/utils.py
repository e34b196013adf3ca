# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

from typing import Any

from bson import ObjectId


# =============================================================================
# ObjectId Utilities
# =============================================================================

def is_valid_object_id(value: Any) -> bool:
    """
    Check that a value is a well-formed MongoDB ObjectId.

    Only the format is checked (24 hex characters or an ObjectId instance),
    never whether a document with that id exists.

    Example:
        is_valid_object_id("65a1f0c2e4b0a1b2c3d4e5f6")  # True
        is_valid_object_id("not-a-valid-id")            # False
    """
    if isinstance(value, ObjectId):
        return True
    if not isinstance(value, str) or len(value) != 24:
        return False
    return ObjectId.is_valid(value)


def normalize_object_id(value: str | ObjectId) -> str:
    """
    Normalize an ObjectId to its 24-character hex string.

    Example:
        normalize_object_id(ObjectId("65a1f0c2e4b0a1b2c3d4e5f6"))  # "65a1f0c2..."
    """
    return str(value) if isinstance(value, ObjectId) else value


# =============================================================================
# Base Error Class
# =============================================================================

class ApplicationError(Exception):
    """
    Base error class for application-specific errors.

    Provides actionable error messages following the principle:
    "Errors should tell HOW to fix, not just WHAT failed."

    Attributes:
        code: Error code for categorization
        message: Human-readable error message
        suggestion: Actionable suggestion for fixing the error
        details: Additional context for debugging
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result
