"""JWT implementation of the TokenService port (python-jose)."""

import logging
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from jose import ExpiredSignatureError, JWTError, jwt

from articles_api.application.interfaces import TokenService
from articles_api.domain.entities import IssuedToken, TokenClaims
from articles_api.domain.exceptions import InvalidTokenError

logger = logging.getLogger(__name__)

_DECODE_OPTIONS = {
    "require_exp": True,
    "require_iat": True,
    "require_sub": True,
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JWTTokenService(TokenService):
    """Signs ``{sub, email, iat, exp}`` with a shared secret.

    Verification is stateless: signature and expiry are all that is checked.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expires_minutes: int = 60,
        clock: Callable[[], datetime] = _utcnow,
    ):
        if not secret_key:
            raise ValueError("A non-empty JWT secret key is required")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._lifetime = timedelta(minutes=expires_minutes)
        self._clock = clock

    def issue(self, user_id: int, email: str) -> IssuedToken:
        # JWT timestamps have one-second resolution
        issued_at = self._clock().astimezone(timezone.utc).replace(microsecond=0)
        expires_at = issued_at + self._lifetime
        payload = {
            "sub": str(user_id),
            "email": email,
            "iat": issued_at,
            "exp": expires_at,
        }
        token = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return IssuedToken(
            token=token,
            claims=TokenClaims(
                user_id=user_id,
                email=email,
                issued_at=issued_at,
                expires_at=expires_at,
            ),
        )

    def verify(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options=_DECODE_OPTIONS,
            )
        except ExpiredSignatureError:
            logger.debug("Rejected expired token")
            raise InvalidTokenError("token expired")
        except JWTError as e:
            logger.debug("Rejected token: %s", e)
            raise InvalidTokenError("malformed or forged token")

        email = payload.get("email")
        try:
            user_id = int(payload["sub"])
        except (KeyError, TypeError, ValueError):
            raise InvalidTokenError("subject is not a user id")
        if not isinstance(email, str) or not email:
            raise InvalidTokenError("missing email claim")

        return TokenClaims(
            user_id=user_id,
            email=email,
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
