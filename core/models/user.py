# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# Users only have a create path; there is no read/update/delete contract.
# =============================================================================

from typing import Any

from pydantic import BaseModel, Field

from lib.utils import normalize_object_id


class UserCreate(BaseModel):
    """Schema for creating a user."""

    name: str = Field(..., min_length=1, strict=True, description="Display name")
    email: str | None = Field(default=None, strict=True, description="Contact email")


class UserResponse(BaseModel):
    """Schema for returning a created user."""

    id: str
    name: str
    email: str | None = None

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "UserResponse":
        return cls(
            id=normalize_object_id(document["_id"]),
            name=document["name"],
            email=document.get("email"),
        )
