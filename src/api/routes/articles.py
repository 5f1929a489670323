# -*- coding: utf-8 -*-
"""
FastAPI Routes для статей.

Путь: src/api/routes/articles.py

    GET    /articles?cursor=&num=   → список статей, курсор в заголовке X-Cursor
    POST   /articles                → создать статью
    GET    /articles/{article_id}   → статья по ID
    DELETE /articles/{article_id}   → удалить статью

Бизнес-логики здесь нет: маршруты разбирают параметры и вызывают
IArticleService. Ошибки сервиса превращаются в ответы обработчиками
из src/api/errors.py.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response

from src.api.dependencies import get_app_settings, get_article_service
from src.api.params import parse_id, parse_page_size
from src.api.schemas.article_schemas import ArticleResponse, CreateArticleRequest
from src.domain.entities.article import Article
from src.domain.services.article_service import IArticleService
from src.infrastructure.config.settings import Settings
from src.shared.exceptions.domain_exceptions import UnprocessableEntityError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/articles", tags=["articles"])


@router.get("", response_model=List[ArticleResponse])
async def fetch_articles(
    response: Response,
    cursor: str = "",
    num: Optional[str] = None,
    service: IArticleService = Depends(get_article_service),
    settings: Settings = Depends(get_app_settings),
):
    """Получить страницу статей."""
    page_size = parse_page_size(num, default=settings.default_page_size)
    logger.debug(f"Fetch articles: cursor={cursor!r}, num={page_size}")

    articles, next_cursor = await service.fetch(cursor, page_size)

    # курсор пишется байтами UTF-8 без перекодировки
    response.raw_headers.append(
        (settings.cursor_header.lower().encode("latin-1"), next_cursor.encode("utf-8"))
    )
    return [ArticleResponse.from_entity(a) for a in articles]


async def _bind_article(request: Request) -> Article:
    """Разобрать тело запроса в статью."""
    try:
        payload = await request.json()
        return CreateArticleRequest.model_validate(payload).to_entity()
    except ValueError as e:
        raise UnprocessableEntityError(str(e)) from e


@router.post("", response_model=ArticleResponse)
async def store_article(
    request: Request,
    service: IArticleService = Depends(get_article_service),
    settings: Settings = Depends(get_app_settings),
):
    """
    Создать статью.

    Без store_validation тело запроса не читается и сервис получает
    статью с пустыми полями.
    """
    article = Article()
    if settings.store_validation:
        article = await _bind_article(request)
        article.validate()

    await service.store(article)
    logger.debug(f"Stored article id={article.id}")
    return ArticleResponse.from_entity(article)


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: str,
    service: IArticleService = Depends(get_article_service),
):
    """Получить статью по ID."""
    article = await service.get_by_id(parse_id(article_id))
    return ArticleResponse.from_entity(article)


@router.delete("/{article_id}", status_code=204, response_class=Response)
async def delete_article(
    article_id: str,
    service: IArticleService = Depends(get_article_service),
):
    """Удалить статью по ID."""
    await service.delete(parse_id(article_id))
    return Response(status_code=204)
