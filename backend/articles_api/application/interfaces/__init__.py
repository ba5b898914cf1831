from .article_repository import ArticleRepository
from .password_hasher import PasswordHasher
from .token_service import TokenService
from .user_repository import UserRepository

__all__ = [
    "ArticleRepository",
    "PasswordHasher",
    "TokenService",
    "UserRepository",
]
