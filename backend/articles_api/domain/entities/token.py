"""Session token claims."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TokenClaims:
    """Identity asserted by a signed session token."""

    user_id: int
    email: str
    issued_at: datetime
    expires_at: datetime


@dataclass(frozen=True)
class IssuedToken:
    """A freshly signed token together with its decoded claims."""

    token: str
    claims: TokenClaims
