"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from articles_api.domain.entities import Article


class ArticleRepository(ABC):
    """Port for article storage — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, article_id: int) -> Article | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Article]:
        """Retrieve every article in insertion order."""
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Store a new article and return it with the assigned ID."""
        ...

    @abstractmethod
    async def update(self, article: Article) -> Article:
        """Replace the stored article that has the same ID."""
        ...

    @abstractmethod
    async def delete(self, article_id: int) -> bool:
        """Delete an article. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def count(self) -> int:
        ...
