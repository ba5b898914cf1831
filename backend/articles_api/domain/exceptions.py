"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class AuthenticationError(Exception):
    """Base class for authentication failures."""


class InvalidCredentialsError(AuthenticationError):
    """Raised when an email/password pair does not match a known user.

    The message never says which of the two was wrong.
    """

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class InvalidTokenError(AuthenticationError):
    """Raised when a session token is malformed, forged, expired or orphaned."""

    def __init__(self, reason: str = "invalid token"):
        self.reason = reason
        super().__init__("Could not validate credentials")
