from .article_repository import InMemoryArticleRepository
from .user_repository import InMemoryUserRepository
from .seed import SEED_ARTICLES, build_seed_users

__all__ = [
    "InMemoryArticleRepository",
    "InMemoryUserRepository",
    "SEED_ARTICLES",
    "build_seed_users",
]
