"""Application service for password login and session token verification.

Login never reveals whether the email or the password was wrong: both
cases raise the same ``InvalidCredentialsError`` and both pay for one
hash verification, so response timing does not leak which users exist.
"""

import logging

from anyio import to_thread

from articles_api.application.interfaces import PasswordHasher, TokenService, UserRepository
from articles_api.domain.entities import IssuedToken, TokenClaims, User
from articles_api.domain.exceptions import InvalidCredentialsError, InvalidTokenError

logger = logging.getLogger(__name__)


class AuthService:
    """Validates credentials against the user store and issues signed tokens."""

    def __init__(
        self,
        users: UserRepository,
        hasher: PasswordHasher,
        tokens: TokenService,
    ):
        self._users = users
        self._hasher = hasher
        self._tokens = tokens
        # Verified against when the email is unknown.
        self._dummy_hash = hasher.hash("not-a-real-password")

    async def _verify_password(self, password: str, password_hash: str) -> bool:
        # bcrypt is CPU-bound; keep it off the event loop.
        return await to_thread.run_sync(self._hasher.verify, password, password_hash)

    async def login(self, email: str, password: str) -> IssuedToken:
        user = await self._users.get_by_email(email)
        if user is None:
            await self._verify_password(password, self._dummy_hash)
            logger.warning("Rejected login attempt")
            raise InvalidCredentialsError()

        if not await self._verify_password(password, user.password_hash):
            logger.warning("Rejected login attempt")
            raise InvalidCredentialsError()

        issued = self._tokens.issue(user.id, user.email)
        logger.info("User %d logged in, token expires at %s", user.id, issued.claims.expires_at.isoformat())
        return issued

    async def _resolve(self, token: str) -> tuple[TokenClaims, User]:
        claims = self._tokens.verify(token)
        user = await self._users.get_by_id(claims.user_id)
        if user is None or user.email.lower() != claims.email.lower():
            raise InvalidTokenError("subject no longer exists")
        return claims, user

    async def verify(self, token: str) -> TokenClaims:
        """Check signature and expiry, and that the subject still exists."""
        claims, _ = await self._resolve(token)
        return claims

    async def current_user(self, token: str) -> User:
        """Resolve the user a valid token was issued to."""
        _, user = await self._resolve(token)
        return user
