"""Enums for the RoomLog application."""

from enum import Enum


class UserRole(str, Enum):
    """User role enumeration for access control."""

    ADMIN = "admin"
    LECTURER = "lecturer"
