import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Articles API"
    app_version: str = "1.0.0"
    app_env: str = "development"
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = ["*"]

    # Token signing. No default: startup fails without it.
    jwt_secret_key: SecretStr
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = Field(60, ge=1)

    # Password hashing cost factor (bcrypt log rounds)
    bcrypt_rounds: int = Field(12, ge=4, le=31)

    # Seed data
    seed_articles: bool = True
    demo_user_password: SecretStr = SecretStr("password123")

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_auth: str = "INFO"             # AuthService, token service
    log_level_store: str = "INFO"            # ArticleService, in-memory repositories

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        if self.app_env != "development" and self.demo_user_password.get_secret_value() == "password123":
            _config_logger.warning(
                "DEMO_USER_PASSWORD is left at its default outside development (env=%s)",
                self.app_env,
            )


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
