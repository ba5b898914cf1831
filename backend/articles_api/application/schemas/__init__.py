from .article import ArticleCreate, ArticleUpdate, ArticleResponse
from .auth import LoginRequest, TokenResponse, CurrentUserResponse
from .common import MessageResponse, ErrorResponse

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "LoginRequest",
    "TokenResponse",
    "CurrentUserResponse",
    "MessageResponse",
    "ErrorResponse",
]
