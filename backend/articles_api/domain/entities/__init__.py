from .article import Article
from .token import IssuedToken, TokenClaims
from .user import User

__all__ = [
    "Article",
    "IssuedToken",
    "TokenClaims",
    "User",
]
