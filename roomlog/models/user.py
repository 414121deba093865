from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from roomlog.models.enums import UserRole


class RegisterPayload(BaseModel):
    """Registration body. Presence of required fields is checked by AuthService."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[str] = Field(None, alias="userId")
    password: Optional[str] = None
    role: Optional[str] = None
    allowed_room: Optional[List[str]] = Field(None, alias="allowedRoom")


class LoginPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[str] = Field(None, alias="userId")
    password: Optional[str] = None


class UserResponse(BaseModel):
    """API-safe representation of a user (no password digest)."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="Record ID")
    user_id: str = Field(..., alias="userId")
    secret_key: str = Field(..., alias="secretKey")
    role: UserRole
    allowed_room: List[str] = Field(default_factory=list, alias="allowedRoom")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    @classmethod
    def from_user(cls, user: Any) -> "UserResponse":
        return cls(
            id=str(user.id),
            user_id=user.user_id,
            secret_key=user.secret_key,
            role=user.role,
            allowed_room=list(user.allowed_room or []),
            created_at=getattr(user, "created_at", None),
            updated_at=getattr(user, "updated_at", None),
        )
