"""Unit tests for the AuthService — login and token verification."""

from datetime import datetime, timedelta, timezone

import pytest

from articles_api.application.services import AuthService
from articles_api.domain.entities import User
from articles_api.domain.exceptions import InvalidCredentialsError, InvalidTokenError
from articles_api.infrastructure.memory import InMemoryUserRepository
from articles_api.infrastructure.security import BcryptPasswordHasher, JWTTokenService

SECRET = "auth-service-secret"


class CountingHasher(BcryptPasswordHasher):
    """Real bcrypt hasher that records how often verify is called."""

    def __init__(self):
        super().__init__(rounds=4)
        self.verify_calls = 0

    def verify(self, password: str, password_hash: str) -> bool:
        self.verify_calls += 1
        return super().verify(password, password_hash)


@pytest.fixture
def hasher() -> CountingHasher:
    return CountingHasher()


@pytest.fixture
def users(hasher: CountingHasher) -> InMemoryUserRepository:
    return InMemoryUserRepository([
        User(id=1, email="alice@example.com", password_hash=hasher.hash("wonderland"), name="Alice"),
        User(id=2, email="bob@example.com", password_hash=hasher.hash("builder"), name="Bob"),
    ])


@pytest.fixture
def service(users: InMemoryUserRepository, hasher: CountingHasher) -> AuthService:
    return AuthService(users=users, hasher=hasher, tokens=JWTTokenService(SECRET))


@pytest.mark.asyncio
async def test_login_returns_token_for_valid_credentials(service: AuthService):
    issued = await service.login("alice@example.com", "wonderland")
    claims = await service.verify(issued.token)
    assert claims.user_id == 1
    assert claims.email == "alice@example.com"


@pytest.mark.asyncio
async def test_login_email_lookup_is_case_insensitive(service: AuthService):
    issued = await service.login("Alice@Example.com", "wonderland")
    assert issued.claims.user_id == 1


@pytest.mark.asyncio
async def test_wrong_password_and_unknown_email_fail_identically(service: AuthService):
    with pytest.raises(InvalidCredentialsError) as wrong_password:
        await service.login("alice@example.com", "nope")
    with pytest.raises(InvalidCredentialsError) as unknown_email:
        await service.login("mallory@example.com", "nope")
    assert str(wrong_password.value) == str(unknown_email.value) == "Invalid credentials"


@pytest.mark.asyncio
async def test_unknown_email_still_runs_hash_verification(service: AuthService, hasher: CountingHasher):
    before = hasher.verify_calls
    with pytest.raises(InvalidCredentialsError):
        await service.login("mallory@example.com", "whatever")
    assert hasher.verify_calls == before + 1


@pytest.mark.asyncio
async def test_verify_rejects_expired_token(users, hasher):
    past = datetime.now(timezone.utc) - timedelta(minutes=61)
    issuer = AuthService(users=users, hasher=hasher, tokens=JWTTokenService(SECRET, clock=lambda: past))
    issued = await issuer.login("bob@example.com", "builder")

    verifier = AuthService(users=users, hasher=hasher, tokens=JWTTokenService(SECRET))
    with pytest.raises(InvalidTokenError):
        await verifier.verify(issued.token)


@pytest.mark.asyncio
async def test_verify_rejects_token_for_unknown_subject(service: AuthService):
    token = JWTTokenService(SECRET).issue(99, "ghost@example.com").token
    with pytest.raises(InvalidTokenError):
        await service.verify(token)


@pytest.mark.asyncio
async def test_current_user_resolves_token_owner(service: AuthService):
    issued = await service.login("bob@example.com", "builder")
    user = await service.current_user(issued.token)
    assert user.name == "Bob"


def test_duplicate_emails_are_rejected():
    with pytest.raises(ValueError):
        InMemoryUserRepository([
            User(id=1, email="a@example.com", password_hash="x", name="A"),
            User(id=2, email="A@example.com", password_hash="y", name="B"),
        ])
