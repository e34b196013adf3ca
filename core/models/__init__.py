# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - product.py: Product create/update/response schemas
# - user.py: User create/response schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .product import ProductCreate, ProductResponse, ProductUpdate
from .user import UserCreate, UserResponse

__all__ = [
    # Product
    "ProductCreate",
    "ProductResponse",
    "ProductUpdate",
    # User
    "UserCreate",
    "UserResponse",
]
