from .article_service import ArticleService
from .auth_service import AuthService

__all__ = [
    "ArticleService",
    "AuthService",
]
