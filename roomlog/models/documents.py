"""Beanie Document models for RoomLog MongoDB collections."""

from datetime import datetime, timezone
from typing import List

from beanie import Document, Indexed
from pydantic import Field

from roomlog.models.enums import UserRole


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Return ``value`` in UTC; a naive datetime is taken to already be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class UserDocument(Document):
    """User document for authentication and room authorization."""

    user_id: Indexed(str, unique=True)
    secret_key: Indexed(str, unique=True)
    password: str
    role: UserRole
    allowed_room: List[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    class Settings:
        name = "users"
        use_cache = False


class LogDocument(Document):
    """Room access event."""

    user_id: Indexed(str)
    room: str
    timestamp: datetime = Field(default_factory=utc_now)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    class Settings:
        name = "logs"
        use_cache = False


DOCUMENT_MODELS = [UserDocument, LogDocument]

__all__ = [
    "UserDocument",
    "LogDocument",
    "DOCUMENT_MODELS",
    "utc_now",
]
