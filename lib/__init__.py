# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - mongo_client.py: Typed MongoDB wrapper for database operations
# - utils.py: Shared utilities (error base class, ObjectId checks)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.mongo_client import MongoClientError, MongoDatabase
from lib.utils import ApplicationError, is_valid_object_id, normalize_object_id

__all__ = [
    # MongoDB
    "MongoClientError",
    "MongoDatabase",
    # Utils
    "ApplicationError",
    "is_valid_object_id",
    "normalize_object_id",
]
