"""FastAPI dependency injection — wires infrastructure to application layer.

The stores live on ``app.state`` and belong to the application instance
that created them, so every app built by ``create_app`` starts isolated.
"""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request

from articles_api.application.interfaces import ArticleRepository
from articles_api.application.services import ArticleService, AuthService


def get_article_repository(request: Request) -> ArticleRepository:
    return request.app.state.article_repository


async def get_article_service(
    repository: ArticleRepository = Depends(get_article_repository),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService bound to the app's article store."""
    yield ArticleService(repository)


def get_auth_service(request: Request) -> AuthService:
    """Provides the app-wide AuthService (built once at startup)."""
    return request.app.state.auth_service
