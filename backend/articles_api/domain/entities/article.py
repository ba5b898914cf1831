"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any

_UPDATABLE_FIELDS = frozenset({"title", "description", "content", "publication_date"})


def _today() -> date:
    return datetime.now(timezone.utc).date()


@dataclass
class Article:
    """Core domain entity representing a published article."""

    title: str
    description: str
    content: str | None = None
    publication_date: date = field(default_factory=_today)
    id: int | None = None

    def update(self, **changes: Any) -> None:
        """Replace only the fields present in ``changes``.

        Presence decides, not truthiness: an empty string or ``None``
        passed explicitly is applied as-is.
        """
        unknown = set(changes) - _UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown article fields: {', '.join(sorted(unknown))}")
        for name, value in changes.items():
            setattr(self, name, value)
