"""FastAPI application factory for RoomLog."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roomlog.api.exception_handlers import setup_exception_handlers
from roomlog.api.middleware import REQUEST_ID_HEADER, RequestLoggingMiddleware
from roomlog.api.routers import logs, users
from roomlog.core.logger import get_logger
from roomlog.core.security import PasswordHasher, SecretKeyIssuer
from roomlog.core.settings import RoomLogSettings, get_roomlog_config
from roomlog.database.mongo import MongoODM
from roomlog.models import ApiResponse
from roomlog.repositories import LogRepository, UserRepository
from roomlog.services import AuthService, LogService

logger = get_logger(__name__)


def build_services(app: FastAPI, odm: MongoODM, settings: RoomLogSettings) -> None:
    """Wire repositories and services onto ``app.state`` around one store handle."""
    app.state.odm = odm
    app.state.auth_service = AuthService(
        UserRepository(odm),
        hasher=PasswordHasher(rounds=settings.BCRYPT_ROUNDS),
        issuer=SecretKeyIssuer(num_bytes=settings.SECRET_KEY_BYTES),
    )
    app.state.log_service = LogService(LogRepository(odm))


def create_app(settings: Optional[RoomLogSettings] = None, *, enable_db: bool = True) -> FastAPI:
    """Create the RoomLog API.

    Args:
        settings: Configuration; defaults to the cached ``ROOMLOG__`` settings.
        enable_db: When False no store handle is opened and the caller must put
            ``auth_service`` and ``log_service`` on ``app.state`` itself.
    """
    settings = settings or get_roomlog_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not enable_db:
            yield
            return

        odm = MongoODM(settings.MONGO_URI, settings.MONGO_DB)
        await odm.initialize()
        build_services(app, odm, settings)
        logger.info("RoomLog started", url=settings.URL, db_name=settings.MONGO_DB)
        try:
            yield
        finally:
            odm.close()
            logger.info("RoomLog stopped")

    app = FastAPI(
        title="RoomLog",
        summary="Room access logging backend",
        description="User registration, login, and room access logs",
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.typed_error_status = settings.TYPED_ERROR_STATUS

    # Last added runs outermost: CORS wraps the request logger.
    app.add_middleware(RequestLoggingMiddleware, service_name="roomlog")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )

    setup_exception_handlers(app)
    app.include_router(users.router)
    app.include_router(logs.router)

    @app.get("/status", response_model=ApiResponse[None], response_model_exclude_none=True, tags=["Health"])
    async def service_status():
        return ApiResponse(message="Available")

    return app
