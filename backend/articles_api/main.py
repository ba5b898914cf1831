"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from articles_api.config import Settings, get_settings
from articles_api.application.services import AuthService
from articles_api.infrastructure.logging.log_config import setup_logging
from articles_api.infrastructure.memory import (
    SEED_ARTICLES,
    InMemoryArticleRepository,
    InMemoryUserRepository,
    build_seed_users,
)
from articles_api.infrastructure.security import BcryptPasswordHasher, JWTTokenService
from articles_api.presentation.api.errors import register_exception_handlers
from articles_api.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


def _wire_services(app: FastAPI, settings: Settings) -> None:
    """Build the stores and services owned by this application instance."""
    hasher = BcryptPasswordHasher(rounds=settings.bcrypt_rounds)
    tokens = JWTTokenService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        algorithm=settings.jwt_algorithm,
        expires_minutes=settings.access_token_expire_minutes,
    )
    users = InMemoryUserRepository(
        build_seed_users(hasher, settings.demo_user_password.get_secret_value())
    )

    app.state.settings = settings
    app.state.article_repository = InMemoryArticleRepository(
        SEED_ARTICLES if settings.seed_articles else ()
    )
    app.state.user_repository = users
    app.state.auth_service = AuthService(users=users, hasher=hasher, tokens=tokens)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and report store contents."""
    settings: Settings = app.state.settings
    setup_logging(settings)

    count = await app.state.article_repository.count()
    logger.info(
        "%s %s started (env=%s, %d seeded articles)",
        settings.app_title,
        settings.app_version,
        settings.app_env,
        count,
    )

    yield

    logger.info("%s shutting down", settings.app_title)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api-docs",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _wire_services(app, settings)
    register_exception_handlers(app)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "articles_api.main:app",
        host=settings.host,
        port=settings.port,
    )
