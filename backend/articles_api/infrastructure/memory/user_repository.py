"""In-memory, read-only credential store."""

from collections.abc import Iterable

from articles_api.application.interfaces import UserRepository
from articles_api.domain.entities import User


class InMemoryUserRepository(UserRepository):
    """Users indexed by lower-cased email. Populated once, never mutated."""

    def __init__(self, users: Iterable[User]):
        self._by_email: dict[str, User] = {}
        self._by_id: dict[int, User] = {}
        for user in users:
            key = user.email.lower()
            if key in self._by_email:
                raise ValueError(f"Duplicate user email {user.email!r}")
            self._by_email[key] = user
            self._by_id[user.id] = user

    async def get_by_email(self, email: str) -> User | None:
        return self._by_email.get(email.strip().lower())

    async def get_by_id(self, user_id: int) -> User | None:
        return self._by_id.get(user_id)
