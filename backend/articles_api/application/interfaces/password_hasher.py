"""Password hashing port."""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """Adaptive salted one-way hash with constant-time verification."""

    @abstractmethod
    def hash(self, password: str) -> str:
        ...

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Return True when ``password`` matches ``password_hash``.

        Must never raise on a malformed hash; return False instead.
        """
        ...
