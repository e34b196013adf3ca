# =============================================================================
# lib/mongo_client.py - MongoDB Client Wrapper
# =============================================================================
# This module wraps a pymongo client behind a small typed interface.
# One MongoDatabase is built at startup from the validated Settings and
# handed to the services that need a collection.
#
# Usage:
#   from lib.mongo_client import MongoDatabase
#   database = MongoDatabase.from_settings(settings)
#   products = database.collection("products")
# =============================================================================

from __future__ import annotations

import logging
from typing import Any, TYPE_CHECKING

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

if TYPE_CHECKING:
    from app.config import Settings

# Set up logging for this module
logger = logging.getLogger(__name__)


class MongoClientError(Exception):
    """
    Error during MongoDB operations.

    Provides actionable error messages following the principle:
    "Errors should tell HOW to fix, not just WHAT failed."
    """

    def __init__(
        self,
        message: str,
        code: str = "MONGODB_ERROR",
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
            result += f" Suggestion: {self.suggestion}"
        return result


class MongoDatabase:
    """
    Handle on one MongoDB database.

    The underlying MongoClient connects lazily, so building a MongoDatabase
    never blocks; the first query (or ping) opens the connection pool.

    Example:
        database = MongoDatabase.from_settings(settings)
        database.ping()
        database.collection("products").find_one({})
    """

    def __init__(self, client: MongoClient, database_name: str):
        self._client = client
        self._database = client.get_default_database(default=database_name)
        self.name = self._database.name

    @classmethod
    def from_settings(cls, settings: Settings) -> MongoDatabase:
        """
        Create a database handle from validated settings.

        Raises:
            MongoClientError: If the connection URI cannot be parsed
        """
        try:
            client = MongoClient(settings.MONGODB_URI)
        except PyMongoError as e:
            raise MongoClientError(
                message=f"Failed to create MongoDB client: {e}",
                code="CLIENT_INIT_FAILED",
                suggestion="Check MONGODB_URI in your environment file",
            ) from e

        database = cls(client, settings.MONGODB_DATABASE)
        logger.info(f"MongoDB client initialized for database '{database.name}'")
        return database

    def collection(self, name: str) -> Collection:
        """Get a collection by name."""
        return self._database[name]

    def ping(self) -> bool:
        """
        Check that the server answers.

        Returns:
            True if the server responded to a ping

        Raises:
            MongoClientError: If the server is unreachable
        """
        try:
            self._client.admin.command("ping")
            return True
        except PyMongoError as e:
            raise MongoClientError(
                message=f"MongoDB ping failed: {e}",
                code="PING_FAILED",
                suggestion="Check that MongoDB is running and MONGODB_URI is reachable",
            ) from e

    def close(self) -> None:
        """Close all pooled connections."""
        self._client.close()
        logger.info("MongoDB client closed")
