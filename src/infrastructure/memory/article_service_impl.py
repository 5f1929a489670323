# -*- coding: utf-8 -*-
"""
In-memory реализация сервиса статей.

Путь: src/infrastructure/memory/article_service_impl.py

Адаптер в Hexagonal Architecture. Хранит статьи в словаре процесса,
позволяет запускать API и проверять его целиком без базы данных.

Пагинация курсорная: курсор - base64 от created_at последней статьи
страницы (RFC 3339). Статьи отдаются от новых к старым.
"""

import asyncio
import base64
import binascii
import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional, Tuple

from src.domain.entities.article import Article
from src.domain.services.article_service import IArticleService
from src.shared.exceptions.domain_exceptions import (
    BadParamInputError,
    DuplicateEntityError,
    EntityNotFoundError,
)

logger = logging.getLogger(__name__)


def encode_cursor(value: datetime) -> str:
    """Закодировать метку времени в курсор."""
    return base64.urlsafe_b64encode(value.isoformat().encode("utf-8")).decode("ascii")


def decode_cursor(cursor: str) -> datetime:
    """
    Раскодировать курсор в метку времени.

    Raises:
        BadParamInputError: Если курсор повреждён
    """
    try:
        raw = base64.urlsafe_b64decode(cursor.encode("ascii")).decode("utf-8")
        value = datetime.fromisoformat(raw)
    except (ValueError, UnicodeError, binascii.Error) as e:
        raise BadParamInputError(f"invalid cursor: {cursor!r}") from e

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


class InMemoryArticleService(IArticleService):
    """
    Сервис статей поверх словаря.

    Выдаваемые метки времени строго возрастают, поэтому курсор однозначно
    задаёт позицию в выдаче.
    """

    def __init__(self, articles: Optional[Iterable[Article]] = None):
        self._articles: Dict[int, Article] = {}
        self._next_id = 1
        self._last_stamp: Optional[datetime] = None
        self._lock = asyncio.Lock()

        for article in articles or []:
            self._insert(article)

    # =========================================================================
    # Внутренние помощники
    # =========================================================================

    def _now(self) -> datetime:
        now = datetime.now(timezone.utc)
        if self._last_stamp is not None and now <= self._last_stamp:
            now = self._last_stamp + timedelta(microseconds=1)
        self._last_stamp = now
        return now

    def _insert(self, article: Article) -> None:
        now = self._now()
        article.id = self._next_id
        article.created_at = now
        article.updated_at = now
        self._articles[article.id] = article
        self._next_id += 1

    def _ordered(self) -> List[Article]:
        return sorted(
            self._articles.values(),
            key=lambda a: a.created_at,
            reverse=True,
        )

    def _find_by_title(self, title: str) -> Optional[Article]:
        for article in self._articles.values():
            if article.title == title:
                return article
        return None

    # =========================================================================
    # IArticleService
    # =========================================================================

    async def fetch(self, cursor: str, num: int) -> Tuple[List[Article], str]:
        """Страница статей, начиная после курсора."""
        async with self._lock:
            articles = self._ordered()
            if cursor:
                after = decode_cursor(cursor)
                articles = [a for a in articles if a.created_at < after]

            page = articles[:num] if num > 0 else []

        next_cursor = encode_cursor(page[-1].created_at) if page else ""
        logger.debug(f"Fetched {len(page)} articles (num={num})")
        return page, next_cursor

    async def get_by_id(self, article_id: int) -> Article:
        """Статья по ID."""
        async with self._lock:
            article = self._articles.get(article_id)
        if article is None:
            raise EntityNotFoundError()
        return article

    async def update(self, article: Article) -> None:
        """Заменить сохранённую статью."""
        async with self._lock:
            current = self._articles.get(article.id)
            if current is None:
                raise EntityNotFoundError()
            article.created_at = current.created_at
            article.touch(self._now())
            self._articles[article.id] = article

    async def get_by_title(self, title: str) -> Article:
        """Статья по заголовку."""
        async with self._lock:
            article = self._find_by_title(title)
        if article is None:
            raise EntityNotFoundError()
        return article

    async def store(self, article: Article) -> None:
        """Сохранить статью и назначить ей id."""
        async with self._lock:
            if article.title and self._find_by_title(article.title) is not None:
                raise DuplicateEntityError()
            self._insert(article)
        logger.info(f"Stored article id={article.id}")

    async def delete(self, article_id: int) -> None:
        """Удалить статью."""
        async with self._lock:
            if self._articles.pop(article_id, None) is None:
                raise EntityNotFoundError()
        logger.info(f"Deleted article id={article_id}")
