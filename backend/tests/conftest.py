"""Shared test configuration.

The environment is set before anything imports ``articles_api``:
``articles_api.main`` builds its module-level app on import and the
signing secret has no default.
"""

import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from articles_api.config import Settings  # noqa: E402
from articles_api.main import create_app  # noqa: E402

TEST_SECRET = "integration-secret"
DEMO_EMAIL = "admin@example.com"
DEMO_PASSWORD = "correct horse battery staple"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        jwt_secret_key=TEST_SECRET,
        bcrypt_rounds=4,
        demo_user_password=DEMO_PASSWORD,
        seed_articles=True,
    )


@pytest.fixture
def app(settings: Settings):
    return create_app(settings)


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def jwt_secret() -> str:
    return TEST_SECRET


@pytest.fixture
def demo_credentials() -> dict[str, str]:
    return {"email": DEMO_EMAIL, "password": DEMO_PASSWORD}
