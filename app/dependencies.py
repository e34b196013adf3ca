# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# Settings and the database handle live on app.state (set by create_app);
# these functions hand them to route handlers through Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings
from core.services import ProductService, UserService
from core.services.product_service import COLLECTION_NAME as PRODUCTS
from core.services.user_service import COLLECTION_NAME as USERS
from lib.mongo_client import MongoDatabase


def get_settings(request: Request) -> Settings:
    """Get the settings the application was built with."""
    return request.app.state.settings


def get_database(request: Request) -> MongoDatabase:
    """Get the shared database handle."""
    return request.app.state.database


def get_product_service(
    database: MongoDatabase = Depends(get_database),
) -> ProductService:
    """Get a product service bound to the products collection."""
    return ProductService(database.collection(PRODUCTS))


def get_user_service(
    database: MongoDatabase = Depends(get_database),
) -> UserService:
    """Get a user service bound to the users collection."""
    return UserService(database.collection(USERS))


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings)]
DatabaseDep = Annotated[MongoDatabase, Depends(get_database)]
ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
