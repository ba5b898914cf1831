"""Response envelopes shared by every endpoint."""

from typing import Any

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Plain acknowledgement, e.g. after a delete."""

    message: str


class ErrorResponse(BaseModel):
    """The single error envelope used for every non-2xx response."""

    message: str
    errors: list[dict[str, Any]] | None = None
