from . import logs, users

__all__ = ["logs", "users"]
