from typing import Any, List, Optional

from roomlog.core.exceptions import InvalidCredential, NotFound, ValidationError
from roomlog.core.logger import get_logger
from roomlog.core.security import PasswordHasher, SecretKeyIssuer
from roomlog.models.enums import UserRole
from roomlog.models.user import LoginPayload, RegisterPayload

logger = get_logger(__name__)

_ROLE_CHOICES = ", ".join(r.value for r in UserRole)


class AuthService:
    """Registration, credential checks, and user administration.

    Login hands back the stored user record (minus the password digest at the
    API layer); no session or token is issued.
    """

    def __init__(
        self,
        user_repo,
        hasher: Optional[PasswordHasher] = None,
        issuer: Optional[SecretKeyIssuer] = None,
    ):
        self.user_repo = user_repo
        self.hasher = hasher or PasswordHasher()
        self.issuer = issuer or SecretKeyIssuer()

    async def register(self, payload: RegisterPayload) -> Any:
        """Create a user with a hashed password and a freshly issued secret key.

        Raises:
            ValidationError: ``userId``, ``password`` or ``role`` is missing, or the role is unknown.
            DuplicateIdentity: ``userId`` or the issued secret key already exists.
        """
        if not payload.user_id or not payload.password or not payload.role:
            raise ValidationError("userId, password and role are required")

        try:
            role = UserRole(payload.role)
        except ValueError:
            raise ValidationError(f"role must be one of: {_ROLE_CHOICES}") from None

        user = await self.user_repo.create_user(
            user_id=payload.user_id,
            secret_key=self.issuer.issue(),
            password_hash=self.hasher.hash(payload.password),
            role=role,
            allowed_room=payload.allowed_room or [],
        )
        logger.info("User registered", user_id=user.user_id, role=role.value)
        return user

    async def login(self, payload: LoginPayload) -> Any:
        """Verify a password and return the matching user.

        Raises:
            ValidationError: ``userId`` or ``password`` is missing.
            NotFound: No user has this ``userId``.
            InvalidCredential: The password does not match.
        """
        if not payload.user_id or not payload.password:
            raise ValidationError("userId and password are required")

        user = await self.user_repo.get_by_user_id(payload.user_id)
        if user is None:
            raise NotFound("User not found")

        if not self.hasher.verify(payload.password, user.password):
            logger.warning("Login rejected", user_id=payload.user_id)
            raise InvalidCredential("Invalid Password")

        logger.info("Login successful", user_id=user.user_id)
        return user

    async def list_users(self) -> List[Any]:
        return await self.user_repo.list()

    async def delete_user(self, record_id: str) -> None:
        """Delete a user by record id (not ``userId``)."""
        if not await self.user_repo.delete_by_id(record_id):
            raise NotFound("User not found")
        logger.info("User deleted", record_id=record_id)

    @staticmethod
    def can_enter(user: Any, room: str) -> bool:
        """Admins may enter every room; lecturers only the rooms in ``allowed_room``."""
        if user.role == UserRole.ADMIN:
            return True
        return room in (user.allowed_room or [])
