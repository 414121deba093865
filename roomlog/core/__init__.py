from .exceptions import DuplicateIdentity, ErrorCode, InvalidCredential, NotFound, RoomLogError, ValidationError
from .logger import get_logger, setup_logger
from .security import PasswordHasher, SecretKeyIssuer
from .settings import RoomLogSettings, get_roomlog_config, reset_roomlog_config

__all__ = [
    "RoomLogSettings",
    "get_roomlog_config",
    "reset_roomlog_config",
    "get_logger",
    "setup_logger",
    "PasswordHasher",
    "SecretKeyIssuer",
    "ErrorCode",
    "RoomLogError",
    "ValidationError",
    "DuplicateIdentity",
    "NotFound",
    "InvalidCredential",
]
