from .enums import UserRole
from .log import LogCreatePayload, LogResponse
from .responses import ApiResponse
from .user import LoginPayload, RegisterPayload, UserResponse

__all__ = [
    "UserRole",
    "RegisterPayload",
    "LoginPayload",
    "UserResponse",
    "LogCreatePayload",
    "LogResponse",
    "ApiResponse",
]
