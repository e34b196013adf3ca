# =============================================================================
# core/models/product.py - Product Schemas
# =============================================================================
# These models define the API contract for product operations:
# - ProductCreate: Input for creating a product (name and price required)
# - ProductUpdate: Partial input for PATCH (every field optional)
# - ProductResponse: Output shape returned to clients
#
# Products are stored as MongoDB documents; the ObjectId in "_id" is exposed
# to clients as a 24-character hex string in "id".
# =============================================================================

from typing import Any

from pydantic import BaseModel, Field, field_validator

from lib.utils import normalize_object_id


class ProductCreate(BaseModel):
    """
    Schema for creating a new product.

    Example:
        {
            "name": "Laptop",
            "description": "High-performance laptop",
            "price": 999.99,
            "category": "Electronics"
        }
    """

    name: str = Field(
        ...,
        min_length=1,
        strict=True,
        description="Product name"
    )

    description: str | None = Field(
        default=None,
        strict=True,
        description="Optional free-text description"
    )

    # Prices are never negative; zero is allowed for free items
    price: float = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        strict=True,
        description="Unit price"
    )

    category: str | None = Field(
        default=None,
        strict=True,
        description="Optional category label"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Laptop",
                "description": "High-performance laptop",
                "price": 999.99,
                "category": "Electronics",
            }
        }
    }


class ProductUpdate(BaseModel):
    """
    Schema for a partial product update.

    Only the fields present in the request body are changed; everything
    else on the stored product is left alone. Sending null clears
    description or category; name and price cannot be null.
    """

    name: str | None = Field(default=None, min_length=1, strict=True)
    description: str | None = Field(default=None, strict=True)
    price: float | None = Field(default=None, ge=0, allow_inf_nan=False, strict=True)
    category: str | None = Field(default=None, strict=True)

    model_config = {
        "json_schema_extra": {
            "example": {"price": 899.99}
        }
    }

    @field_validator("name", "price")
    @classmethod
    def required_fields_not_null(cls, value):
        # Only runs for values the client sent; name and price cannot be cleared
        if value is None:
            raise ValueError("must not be null")
        return value

    def to_changes(self) -> dict[str, Any]:
        """
        Fields the client actually sent.

        An explicit null on description or category is kept as None and
        means "clear this field".
        """
        return self.model_dump(exclude_unset=True)


class ProductResponse(BaseModel):
    """Schema for returning product data to clients."""

    id: str = Field(..., description="Product ObjectId as hex string")
    name: str
    description: str | None = None
    price: float
    category: str | None = None

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "ProductResponse":
        """Build a response from a raw MongoDB document."""
        return cls(
            id=normalize_object_id(document["_id"]),
            name=document["name"],
            description=document.get("description"),
            price=document["price"],
            category=document.get("category"),
        )
