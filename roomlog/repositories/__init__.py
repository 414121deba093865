from .log_repository import LogRepository
from .user_repository import UserRepository

__all__ = ["UserRepository", "LogRepository"]
