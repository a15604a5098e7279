"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from storefront.domain.users.repositories import PasswordHasher
from storefront.shared.config import PasswordConfig


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted PBKDF2 (or scrypt) digests with a fixed work factor.

    The work factor lives in ``method``, e.g. ``pbkdf2:sha256:600000``. Every
    call to :meth:`hash` draws a fresh salt.
    """

    def __init__(self, method: str = "pbkdf2:sha256:600000", salt_length: int = 16) -> None:
        self._method = method
        self._salt_length = salt_length

    @classmethod
    def from_config(cls, config: PasswordConfig) -> WerkzeugPasswordHasher:
        return cls(method=config.hash_method, salt_length=config.salt_length)

    def hash(self, password: str) -> str:
        return str(
            generate_password_hash(password, method=self._method, salt_length=self._salt_length)
        )

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return bool(check_password_hash(hashed, password))
        except ValueError:
            # Unknown or malformed method prefix in the stored digest.
            return False
