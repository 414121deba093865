"""RoomLog - room access logging backend.

This package exposes the FastAPI application factory and configuration helpers.
"""

from .api import create_app
from .core.settings import RoomLogSettings, get_roomlog_config

__all__ = [
    "create_app",
    "RoomLogSettings",
    "get_roomlog_config",
]
