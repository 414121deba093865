import secrets

from passlib.context import CryptContext

BCRYPT_ROUNDS = 10
SECRET_KEY_BYTES = 32
_MIN_SECRET_KEY_BYTES = 16  # 128 bits


class PasswordHasher:
    """One-way bcrypt hashing of plaintext passwords."""

    def __init__(self, rounds: int = BCRYPT_ROUNDS):
        self.rounds = rounds
        self._context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, password: str) -> str:
        """Return a salted bcrypt digest of ``password``."""
        return self._context.hash(password)

    def verify(self, password: str, digest: str) -> bool:
        """Check ``password`` against a stored digest. Malformed digests never match."""
        try:
            return self._context.verify(password, digest)
        except (ValueError, TypeError):
            return False


class SecretKeyIssuer:
    """Issues the opaque per-user secret key assigned at registration."""

    def __init__(self, num_bytes: int = SECRET_KEY_BYTES):
        if num_bytes < _MIN_SECRET_KEY_BYTES:
            raise ValueError(f"Secret keys need at least {_MIN_SECRET_KEY_BYTES} random bytes, got {num_bytes}")
        self.num_bytes = num_bytes

    def issue(self) -> str:
        """Return a fresh hex-encoded random token."""
        return secrets.token_hex(self.num_bytes)
