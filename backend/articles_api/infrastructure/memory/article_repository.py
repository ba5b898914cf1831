"""In-memory repository implementation for articles."""

import logging
from collections.abc import Iterable
from dataclasses import replace

from articles_api.application.interfaces import ArticleRepository
from articles_api.domain.entities import Article

logger = logging.getLogger(__name__)


class InMemoryArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port with an ordered list.

    IDs come from a monotonic counter and are never reused, even after
    deletions. Entities are copied on the way in and out so callers
    cannot mutate stored state without going through ``update``.

    Not thread-safe: every method runs to completion without awaiting,
    which is enough on a single event loop.
    """

    def __init__(self, articles: Iterable[Article] = ()):
        self._articles: list[Article] = []
        self._next_id = 1
        for article in articles:
            self._insert(replace(article))

    def _insert(self, article: Article) -> Article:
        if article.id is None:
            article.id = self._next_id
        elif self._index_of(article.id) is not None:
            raise ValueError(f"Duplicate article id {article.id}")
        self._next_id = max(self._next_id, article.id + 1)
        self._articles.append(article)
        return article

    def _index_of(self, article_id: int) -> int | None:
        for index, article in enumerate(self._articles):
            if article.id == article_id:
                return index
        return None

    async def get_by_id(self, article_id: int) -> Article | None:
        index = self._index_of(article_id)
        return replace(self._articles[index]) if index is not None else None

    async def get_all(self) -> list[Article]:
        return [replace(article) for article in self._articles]

    async def create(self, article: Article) -> Article:
        stored = self._insert(replace(article, id=None))
        logger.debug("Stored article %d, next id %d", stored.id, self._next_id)
        return replace(stored)

    async def update(self, article: Article) -> Article:
        index = self._index_of(article.id) if article.id is not None else None
        if index is None:
            raise ValueError(f"Article {article.id} not found in store")
        self._articles[index] = replace(article)
        return replace(article)

    async def delete(self, article_id: int) -> bool:
        index = self._index_of(article_id)
        if index is None:
            return False
        del self._articles[index]
        return True

    async def count(self) -> int:
        return len(self._articles)
