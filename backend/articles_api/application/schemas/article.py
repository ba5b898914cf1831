"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import date
from typing import Any

from pydantic import BaseModel, Field, model_validator

# Fields that may not be cleared with an explicit null on update.
_NON_NULLABLE = ("title", "description", "publication_date")


class ArticleCreate(BaseModel):
    """Schema for creating a new article."""

    title: str = Field(..., min_length=1, max_length=255, examples=["Les bases de Node.js"])
    description: str = Field(
        ..., min_length=1, examples=["Introduction à Node.js et ses fonctionnalités principales."]
    )
    content: str | None = None
    publication_date: date | None = Field(
        None,
        alias="publicationDate",
        description="Defaults to today's date when omitted.",
        examples=["2023-01-01"],
    )

    model_config = {"populate_by_name": True}


class ArticleUpdate(BaseModel):
    """Schema for updating an existing article — all fields optional.

    Only the fields present in the request body are applied.
    """

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, min_length=1)
    content: str | None = None
    publication_date: date | None = Field(None, alias="publicationDate")

    model_config = {"populate_by_name": True}

    @model_validator(mode="after")
    def _reject_null_for_required_fields(self) -> "ArticleUpdate":
        for name in _NON_NULLABLE:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"'{name}' cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        """Field name → new value, for the fields present in the request."""
        return {name: getattr(self, name) for name in self.model_fields_set}


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    title: str
    description: str
    content: str | None = None
    publication_date: date = Field(..., alias="publicationDate")

    model_config = {"from_attributes": True, "populate_by_name": True}
