"""Application service (use case) for Article operations."""

import logging

from articles_api.application.interfaces import ArticleRepository
from articles_api.application.schemas import ArticleCreate, ArticleUpdate
from articles_api.domain.entities import Article
from articles_api.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class ArticleService:
    """Orchestrates article CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def get_article(self, article_id: int) -> Article:
        article = await self._repository.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def list_articles(self) -> list[Article]:
        return await self._repository.get_all()

    async def create_article(self, data: ArticleCreate) -> Article:
        article = Article(
            title=data.title,
            description=data.description,
            content=data.content,
        )
        if data.publication_date is not None:
            article.publication_date = data.publication_date
        created = await self._repository.create(article)
        logger.info("Created article %d (%r)", created.id, created.title)
        return created

    async def update_article(self, article_id: int, data: ArticleUpdate) -> Article:
        article = await self.get_article(article_id)
        changes = data.changes()
        article.update(**changes)
        updated = await self._repository.update(article)
        logger.info("Updated article %d fields=%s", article_id, sorted(changes))
        return updated

    async def delete_article(self, article_id: int) -> bool:
        exists = await self._repository.get_by_id(article_id)
        if exists is None:
            raise EntityNotFoundError("Article", article_id)
        deleted = await self._repository.delete(article_id)
        logger.info("Deleted article %d", article_id)
        return deleted
