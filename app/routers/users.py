# =============================================================================
# app/routers/users.py - User Endpoints
# =============================================================================
# Only user creation is exposed.
# =============================================================================

import logging

from fastapi import APIRouter, status
from pydantic import BaseModel

from app.dependencies import UserServiceDep
from core.models.user import UserCreate, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter()


class UserCreateResponse(BaseModel):
    message: str
    user: UserResponse


@router.post(
    "",
    response_model=UserCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_user(user: UserCreate, service: UserServiceDep):
    """Create a user."""
    logger.debug(f"Creating user: {user.name}")
    document = service.create_user(user)
    return UserCreateResponse(
        message="User created successfully",
        user=UserResponse.from_document(document),
    )
