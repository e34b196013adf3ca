# =============================================================================
# core/services/product_service.py - Product Business Logic
# =============================================================================
# Handles product CRUD operations against a MongoDB collection.
# Separates HTTP concerns from database logic: routes validate ids and
# bodies, this service does one single-document operation per call.
# =============================================================================

import logging
from typing import Any

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from app.exceptions import ProductNotFoundError
from core.models.product import ProductCreate, ProductUpdate
from lib.mongo_client import MongoClientError

logger = logging.getLogger(__name__)

COLLECTION_NAME = "products"


class ProductService:
    """
    Service for product management operations.

    Provides a clean interface between API routes and the database.
    Product ids passed in must already be well-formed ObjectId strings.
    """

    def __init__(self, collection: Collection):
        self.collection = collection

    def _failed(self, operation: str, error: Exception) -> MongoClientError:
        logger.error(f"Failed to {operation}: {error}")
        return MongoClientError(
            message=f"Failed to {operation}: {error}",
            code="PRODUCT_QUERY_FAILED",
            suggestion="Check that MongoDB is reachable",
            details={"operation": operation},
        )

    def create_product(self, product: ProductCreate) -> dict[str, Any]:
        """
        Insert a new product.

        Returns:
            The stored document, including its generated "_id"

        Raises:
            MongoClientError: If the insert fails
        """
        document = product.model_dump(exclude_none=True)

        try:
            result = self.collection.insert_one(document)
        except PyMongoError as e:
            raise self._failed("create product", e) from e

        document["_id"] = result.inserted_id
        logger.info(f"Created product: {result.inserted_id}")
        return document

    def list_products(self) -> list[dict[str, Any]]:
        """Return every product in insertion order."""
        try:
            return list(self.collection.find())
        except PyMongoError as e:
            raise self._failed("list products", e) from e

    def get_product(self, product_id: str) -> dict[str, Any]:
        """
        Get a product by id.

        Raises:
            ProductNotFoundError: If no product has this id
            MongoClientError: If the query fails
        """
        try:
            document = self.collection.find_one({"_id": ObjectId(product_id)})
        except PyMongoError as e:
            raise self._failed("fetch product", e) from e

        if document is None:
            logger.debug(f"Product not found: {product_id}")
            raise ProductNotFoundError(product_id)
        return document

    def update_product(self, product_id: str, update: ProductUpdate) -> dict[str, Any]:
        """
        Apply a partial update and return the updated product.

        Only fields present in the update are written; fields sent as null
        are removed from the document. An empty update leaves the document
        untouched but still 404s on a missing id.

        Raises:
            ProductNotFoundError: If no product has this id
            MongoClientError: If the query fails
        """
        changes = update.to_changes()
        if not changes:
            return self.get_product(product_id)

        operations: dict[str, dict[str, Any]] = {}
        to_set = {k: v for k, v in changes.items() if v is not None}
        to_unset = {k: "" for k, v in changes.items() if v is None}
        if to_set:
            operations["$set"] = to_set
        if to_unset:
            operations["$unset"] = to_unset

        try:
            document = self.collection.find_one_and_update(
                {"_id": ObjectId(product_id)},
                operations,
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise self._failed("update product", e) from e

        if document is None:
            logger.debug(f"Product not found for update: {product_id}")
            raise ProductNotFoundError(product_id)

        logger.info(f"Updated product {product_id}: {sorted(changes)}")
        return document

    def delete_product(self, product_id: str) -> dict[str, Any]:
        """
        Delete a product and return the removed document.

        Raises:
            ProductNotFoundError: If no product has this id
            MongoClientError: If the query fails
        """
        try:
            document = self.collection.find_one_and_delete({"_id": ObjectId(product_id)})
        except PyMongoError as e:
            raise self._failed("delete product", e) from e

        if document is None:
            logger.debug(f"Product not found for delete: {product_id}")
            raise ProductNotFoundError(product_id)

        logger.info(f"Deleted product: {product_id}")
        return document
