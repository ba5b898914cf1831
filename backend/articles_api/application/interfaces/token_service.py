"""Session token port."""

from abc import ABC, abstractmethod

from articles_api.domain.entities import IssuedToken, TokenClaims


class TokenService(ABC):
    """Issues and verifies stateless signed session tokens."""

    @abstractmethod
    def issue(self, user_id: int, email: str) -> IssuedToken:
        ...

    @abstractmethod
    def verify(self, token: str) -> TokenClaims:
        """Decode ``token``, checking signature and expiry.

        Raises InvalidTokenError on any failure.
        """
        ...
