# =============================================================================
# app/routers/products.py - Product CRUD Endpoints
# =============================================================================
# Handles product creation, listing, lookup, partial update and deletion.
# Path ids are checked for ObjectId format before the database is touched.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status
from pydantic import BaseModel

from app.dependencies import ProductServiceDep
from app.exceptions import InvalidIdentifierError
from core.models.product import ProductCreate, ProductResponse, ProductUpdate
from lib.utils import is_valid_object_id

router = APIRouter()


# =============================================================================
# Request/Response Models
# =============================================================================

class ProductMessageResponse(BaseModel):
    """Response carrying a single product."""
    message: str
    product: ProductResponse


class ProductListResponse(BaseModel):
    """Response when listing products."""
    count: int
    products: list[ProductResponse]


class MessageResponse(BaseModel):
    message: str


# =============================================================================
# Path Parameters
# =============================================================================

def valid_product_id(
    product_id: Annotated[str, Path(description="Product ObjectId")],
) -> str:
    """Reject ids that are not 24-character hex ObjectIds with a 400."""
    if not is_valid_object_id(product_id):
        raise InvalidIdentifierError(product_id)
    return product_id


ProductId = Annotated[str, Depends(valid_product_id)]


# =============================================================================
# Endpoints
# =============================================================================

@router.post(
    "",
    response_model=ProductMessageResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_product(product: ProductCreate, service: ProductServiceDep):
    """
    Create a new product.

    name and price are required; description and category are optional.
    """
    document = service.create_product(product)
    return ProductMessageResponse(
        message="Product created successfully",
        product=ProductResponse.from_document(document),
    )


@router.get("", response_model=ProductListResponse)
def list_products(service: ProductServiceDep):
    """List every product together with the total count."""
    products = [ProductResponse.from_document(d) for d in service.list_products()]
    return ProductListResponse(count=len(products), products=products)


@router.get("/{product_id}", response_model=ProductMessageResponse)
def get_product(product_id: ProductId, service: ProductServiceDep):
    """Get a single product by id."""
    document = service.get_product(product_id)
    return ProductMessageResponse(
        message="Product retrieved successfully",
        product=ProductResponse.from_document(document),
    )


@router.patch("/{product_id}", response_model=ProductMessageResponse)
def update_product(
    product_id: ProductId,
    update: ProductUpdate,
    service: ProductServiceDep,
):
    """
    Partially update a product.

    Fields left out of the body keep their stored values.
    """
    document = service.update_product(product_id, update)
    return ProductMessageResponse(
        message="Product successfully updated",
        product=ProductResponse.from_document(document),
    )


@router.delete("/{product_id}", response_model=MessageResponse)
def delete_product(product_id: ProductId, service: ProductServiceDep):
    """Delete a product."""
    service.delete_product(product_id)
    return MessageResponse(message="Product successfully deleted")
