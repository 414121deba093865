from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from roomlog.models.documents import as_utc


class LogCreatePayload(BaseModel):
    """Room access event body. ``timestamp`` defaults to the time of insertion.

    A timestamp without an offset is read as UTC.
    """

    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[str] = Field(None, alias="userId")
    room: Optional[str] = None
    timestamp: Optional[datetime] = None

    @field_validator("timestamp")
    @classmethod
    def _timestamp_in_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value) if value is not None else None


class LogResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="Record ID")
    user_id: str = Field(..., alias="userId")
    room: str
    timestamp: datetime
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    @classmethod
    def from_log(cls, log: Any) -> "LogResponse":
        return cls(
            id=str(log.id),
            user_id=log.user_id,
            room=log.room,
            timestamp=log.timestamp,
            created_at=getattr(log, "created_at", None),
            updated_at=getattr(log, "updated_at", None),
        )
