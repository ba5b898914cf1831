"""Article CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from articles_api.application.schemas import (
    ArticleCreate,
    ArticleResponse,
    ArticleUpdate,
    ErrorResponse,
    MessageResponse,
)
from articles_api.application.services import ArticleService
from articles_api.domain.exceptions import EntityNotFoundError
from articles_api.infrastructure.dependencies import get_article_service

router = APIRouter(prefix="/articles", tags=["Articles"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Article not found"}}


@router.get("", response_model=list[ArticleResponse], response_model_exclude_none=True)
async def list_articles(
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Return every article, in insertion order."""
    articles = await service.list_articles()
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]


@router.get(
    "/{article_id}",
    response_model=ArticleResponse,
    response_model_exclude_none=True,
    responses=_NOT_FOUND,
)
async def get_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by ID."""
    try:
        article = await service.get_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.post(
    "",
    response_model=ArticleResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_article(
    data: ArticleCreate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create a new article. ``publicationDate`` defaults to today."""
    article = await service.create_article(data)
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.put(
    "/{article_id}",
    response_model=ArticleResponse,
    response_model_exclude_none=True,
    responses=_NOT_FOUND,
)
async def update_article(
    article_id: int,
    data: ArticleUpdate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Update an existing article. Fields absent from the body keep their value."""
    try:
        article = await service.update_article(article_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.delete("/{article_id}", response_model=MessageResponse, responses=_NOT_FOUND)
async def delete_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> MessageResponse:
    """Delete an article by ID."""
    try:
        await service.delete_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return MessageResponse(message="Article deleted successfully")
