# -*- coding: utf-8 -*-
"""
Доменная сущность: Статья (Article)

Путь: src/domain/entities/article.py

API слой не владеет жизненным циклом статьи: он только передаёт
статьи между клиентом и сервисом. Поэтому статья с нулевыми значениями
полей допустима, а проверка обязательных полей вынесена в validate().
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

from src.shared.exceptions.domain_exceptions import DomainValidationError


@dataclass
class Author:
    """Автор статьи."""

    id: int = 0
    name: str = ""


@dataclass
class Article:
    """
    Доменная сущность статьи.

    Идентификатор назначает сервис при сохранении (0 - ещё не сохранена).
    """

    # =========================================================================
    # Идентификация
    # =========================================================================
    id: int = 0

    # =========================================================================
    # Основные атрибуты
    # =========================================================================
    title: str = ""
    content: str = ""
    author: Author = field(default_factory=Author)

    # =========================================================================
    # Метаданные
    # =========================================================================
    updated_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    REQUIRED_FIELDS = ("title", "content")

    def missing_fields(self) -> List[str]:
        """Список обязательных полей без значения."""
        return [
            name for name in self.REQUIRED_FIELDS
            if not str(getattr(self, name) or "").strip()
        ]

    def validate(self) -> None:
        """
        Проверка обязательных полей.

        Исключения:
            DomainValidationError: Если обязательное поле пустое
        """
        missing = self.missing_fields()
        if missing:
            raise DomainValidationError(
                f"Article fields are required: {', '.join(missing)}"
            )

    def touch(self, now: Optional[datetime] = None) -> None:
        """Обновить метку времени изменения."""
        self.updated_at = now or datetime.now(timezone.utc)

    def __repr__(self) -> str:
        return f"Article(id={self.id}, title='{self.title[:50]}')"
