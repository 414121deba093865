from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Envelope shared by every endpoint: ``{success, message, data?}``."""

    success: bool = True
    message: str
    data: Optional[T] = None
