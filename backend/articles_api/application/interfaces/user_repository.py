"""Read-only user lookup port."""

from abc import ABC, abstractmethod

from articles_api.domain.entities import User


class UserRepository(ABC):
    """Port for credential lookup. There is no write side."""

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        """Find a user by email (case-insensitive)."""
        ...

    @abstractmethod
    async def get_by_id(self, user_id: int) -> User | None:
        ...
