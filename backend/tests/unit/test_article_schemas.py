"""Tests for article request/response DTOs and the entity merge rules."""

from datetime import date

import pytest
from pydantic import ValidationError

from articles_api.application.schemas import ArticleCreate, ArticleResponse, ArticleUpdate
from articles_api.domain.entities import Article


def test_create_requires_title_and_description():
    with pytest.raises(ValidationError):
        ArticleCreate(title="only a title")
    with pytest.raises(ValidationError):
        ArticleCreate(title="", description="empty title")


def test_create_accepts_camel_case_and_snake_case_dates():
    camel = ArticleCreate.model_validate({"title": "T", "description": "D", "publicationDate": "2023-02-15"})
    snake = ArticleCreate.model_validate({"title": "T", "description": "D", "publication_date": "2023-02-15"})
    assert camel.publication_date == snake.publication_date == date(2023, 2, 15)


def test_update_changes_only_lists_present_fields():
    data = ArticleUpdate.model_validate({"description": "B"})
    assert data.changes() == {"description": "B"}


def test_update_rejects_empty_title():
    with pytest.raises(ValidationError):
        ArticleUpdate.model_validate({"title": ""})


@pytest.mark.parametrize("field", ["title", "description", "publicationDate"])
def test_update_rejects_null_for_required_fields(field: str):
    with pytest.raises(ValidationError):
        ArticleUpdate.model_validate({field: None})


def test_update_allows_null_content():
    data = ArticleUpdate.model_validate({"content": None})
    assert data.changes() == {"content": None}


def test_response_serializes_camel_case():
    article = Article(id=1, title="A", description="B", publication_date=date(2023, 1, 1))
    body = ArticleResponse.model_validate(article, from_attributes=True).model_dump(
        by_alias=True, mode="json", exclude_none=True
    )
    assert body == {"id": 1, "title": "A", "description": "B", "publicationDate": "2023-01-01"}


def test_entity_update_rejects_unknown_fields():
    article = Article(title="A", description="B")
    with pytest.raises(ValueError):
        article.update(id=5)
