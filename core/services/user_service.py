# =============================================================================
# core/services/user_service.py - User Business Logic
# =============================================================================
# Users can only be created; there is no read/update/delete path yet.
# =============================================================================

import logging
from typing import Any

from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from core.models.user import UserCreate
from lib.mongo_client import MongoClientError

logger = logging.getLogger(__name__)

COLLECTION_NAME = "users"


class UserService:
    """Service for user creation."""

    def __init__(self, collection: Collection):
        self.collection = collection

    def create_user(self, user: UserCreate) -> dict[str, Any]:
        """
        Insert a new user.

        Raises:
            MongoClientError: If the insert fails
        """
        document = user.model_dump(exclude_none=True)

        try:
            result = self.collection.insert_one(document)
        except PyMongoError as e:
            logger.error(f"Failed to create user: {e}")
            raise MongoClientError(
                message=f"Failed to create user: {e}",
                code="USER_INSERT_FAILED",
                suggestion="Check that MongoDB is reachable",
                details={"operation": "create user"},
            ) from e

        document["_id"] = result.inserted_id
        logger.info(f"Created user: {result.inserted_id}")
        return document
