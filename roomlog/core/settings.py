from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class RoomLogSettings(BaseSettings):
    """RoomLog service configuration settings.

    Every field can be overridden with a ``ROOMLOG__<FIELD>`` environment
    variable or a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="ROOMLOG__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Service URL
    URL: str = "http://localhost:8080"
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Database
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB: str = "roomlog"

    # Credentials
    BCRYPT_ROUNDS: int = 10
    SECRET_KEY_BYTES: int = 32

    # HTTP
    CORS_ORIGINS: List[str] = ["*"]
    TYPED_ERROR_STATUS: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "~/.cache/roomlog/logs"
    LOG_TO_FILE: bool = True
    LOG_JSON: bool = True

    # Misc
    DEBUG: bool = False


_config: Optional[RoomLogSettings] = None


def get_roomlog_config() -> RoomLogSettings:
    """Load cached settings with ROOMLOG__ env override support."""
    global _config
    if _config is None:
        _config = RoomLogSettings()
    return _config


def reset_roomlog_config() -> None:
    """Reset config cache (useful in tests)."""
    global _config
    _config = None
