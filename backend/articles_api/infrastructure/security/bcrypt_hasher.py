"""bcrypt implementation of the PasswordHasher port."""

import bcrypt

from articles_api.application.interfaces import PasswordHasher

# bcrypt only looks at the first 72 bytes of a password.
_MAX_PASSWORD_BYTES = 72


class BcryptPasswordHasher(PasswordHasher):
    """Salted bcrypt hashes with a cost factor fixed at construction."""

    def __init__(self, rounds: int = 12):
        if not 4 <= rounds <= 31:
            raise ValueError(f"bcrypt rounds must be between 4 and 31, got {rounds}")
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        encoded = password.encode("utf-8")
        if len(encoded) > _MAX_PASSWORD_BYTES:
            raise ValueError(f"Password longer than {_MAX_PASSWORD_BYTES} bytes cannot be hashed")
        return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=self._rounds)).decode("ascii")

    def verify(self, password: str, password_hash: str) -> bool:
        encoded = password.encode("utf-8")
        if len(encoded) > _MAX_PASSWORD_BYTES:
            return False
        try:
            return bcrypt.checkpw(encoded, password_hash.encode("ascii"))
        except (ValueError, UnicodeEncodeError):
            return False
