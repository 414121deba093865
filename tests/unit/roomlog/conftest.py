"""Fixtures for RoomLog unit tests: in-memory repositories, no MongoDB."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from roomlog.api import create_app
from roomlog.core.exceptions import DuplicateIdentity
from roomlog.core.security import PasswordHasher, SecretKeyIssuer
from roomlog.core.settings import RoomLogSettings
from roomlog.models.documents import as_utc
from roomlog.models.enums import UserRole
from roomlog.services import AuthService, LogService

# bcrypt's minimum cost keeps the unit suite fast; the default cost is covered in test_security.
FAST_ROUNDS = 4


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class FakeUser:
    id: str
    user_id: str
    secret_key: str
    password: str
    role: UserRole
    allowed_room: List[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)


@dataclass
class FakeLog:
    id: str
    user_id: str
    room: str
    timestamp: datetime
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)


class FakeUserRepository:
    """Mirrors UserRepository, including the unique userId / secretKey constraint."""

    def __init__(self) -> None:
        self._users: dict[str, FakeUser] = {}

    async def create_user(
        self,
        user_id: str,
        secret_key: str,
        password_hash: str,
        role: UserRole,
        allowed_room: Optional[List[str]] = None,
    ) -> FakeUser:
        for existing in self._users.values():
            if existing.user_id == user_id:
                raise DuplicateIdentity("userId", f"userId '{user_id}' already exists")
            if existing.secret_key == secret_key:
                raise DuplicateIdentity("secretKey")
        user = FakeUser(
            id=str(ObjectId()),
            user_id=user_id,
            secret_key=secret_key,
            password=password_hash,
            role=role,
            allowed_room=list(allowed_room or []),
        )
        self._users[user.id] = user
        return user

    async def get_by_user_id(self, user_id: str) -> Optional[FakeUser]:
        return next((u for u in self._users.values() if u.user_id == user_id), None)

    async def get_by_id(self, record_id: str) -> Optional[FakeUser]:
        return self._users.get(record_id)

    async def list(self) -> List[FakeUser]:
        return list(self._users.values())

    async def delete_by_id(self, record_id: str) -> bool:
        return self._users.pop(record_id, None) is not None


class FakeLogRepository:
    def __init__(self) -> None:
        self._logs: dict[str, FakeLog] = {}

    async def append(self, user_id: str, room: str, timestamp: Optional[datetime] = None) -> FakeLog:
        timestamp = as_utc(timestamp) if timestamp else _now()
        log = FakeLog(id=str(ObjectId()), user_id=user_id, room=room, timestamp=timestamp)
        self._logs[log.id] = log
        return log

    async def list(self) -> List[FakeLog]:
        return list(self._logs.values())

    async def list_by_user_id(self, user_id: str) -> List[FakeLog]:
        return sorted((log for log in self._logs.values() if log.user_id == user_id), key=lambda log: log.timestamp)

    async def delete_by_id(self, record_id: str) -> bool:
        return self._logs.pop(record_id, None) is not None


@pytest.fixture
def user_repo() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def log_repo() -> FakeLogRepository:
    return FakeLogRepository()


@pytest.fixture
def auth_service(user_repo) -> AuthService:
    return AuthService(user_repo, hasher=PasswordHasher(rounds=FAST_ROUNDS), issuer=SecretKeyIssuer())


@pytest.fixture
def log_service(log_repo) -> LogService:
    return LogService(log_repo)


def _client(settings: RoomLogSettings, auth_service: AuthService, log_service: LogService) -> TestClient:
    app = create_app(settings, enable_db=False)
    app.state.auth_service = auth_service
    app.state.log_service = log_service
    return TestClient(app)


@pytest.fixture
def client(auth_service, log_service) -> TestClient:
    """In-process client with fake repositories and the default (uniform 400) error status."""
    with _client(RoomLogSettings(), auth_service, log_service) as c:
        yield c


@pytest.fixture
def typed_client(auth_service, log_service) -> TestClient:
    """Same as ``client`` but with per-kind error status codes."""
    with _client(RoomLogSettings(TYPED_ERROR_STATUS=True), auth_service, log_service) as c:
        yield c
