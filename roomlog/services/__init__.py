from .auth_service import AuthService
from .log_service import LogService

__all__ = ["AuthService", "LogService"]
