"""Password hashing and verification.

Uses bcrypt for password hashing with automatic salting and a
configurable work factor.
"""

import bcrypt

from ..config import settings
from ..exceptions import ValidationError

# bcrypt only reads the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """One-way bcrypt hashing with a fixed work factor."""

    def __init__(self, work_factor: int | None = None):
        self._work_factor = work_factor if work_factor is not None else settings.bcrypt_work_factor

    def hash(self, plaintext: str) -> str:
        """Hash a password with a fresh salt.

        Raises:
            ValidationError: If the password is longer than 72 bytes as UTF-8
        """
        encoded = plaintext.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes",
                {"field": "password", "max_bytes": MAX_PASSWORD_BYTES}
            )
        salt = bcrypt.gensalt(rounds=self._work_factor)
        return bcrypt.hashpw(encoded, salt).decode("utf-8")

    def verify(self, plaintext: str, hashed: str | None) -> bool:
        """Constant-time comparison against a bcrypt hash.

        Missing or malformed hashes (e.g. a password stored unhashed by
        direct account creation) and over-long passwords never verify.
        """
        encoded = plaintext.encode("utf-8")
        if not hashed or len(encoded) > MAX_PASSWORD_BYTES:
            return False
        try:
            return bcrypt.checkpw(encoded, hashed.encode("utf-8"))
        except (ValueError, TypeError):
            return False
