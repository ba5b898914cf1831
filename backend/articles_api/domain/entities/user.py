"""Domain entity for authenticated users."""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """A user able to log in. Read-only at runtime."""

    id: int
    email: str
    password_hash: str
    name: str
