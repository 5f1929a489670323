"""
Service Interface: IArticleService

Порт (интерфейс) бизнес-логики статей.
HTTP слой зависит только от этой абстракции; реализации (адаптеры)
находятся в infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import List, Tuple

from src.domain.entities.article import Article


class IArticleService(ABC):
    """
    Интерфейс сервиса статей.

    Ошибки сообщаются исключениями из src.shared.exceptions.domain_exceptions.
    """

    @abstractmethod
    async def fetch(self, cursor: str, num: int) -> Tuple[List[Article], str]:
        """
        Получить страницу статей.

        Args:
            cursor: Непрозрачный курсор позиции ("" - с начала)
            num: Размер страницы

        Returns:
            Статьи страницы и курсор следующей страницы
        """
        pass

    @abstractmethod
    async def get_by_id(self, article_id: int) -> Article:
        """
        Найти статью по ID.

        Raises:
            EntityNotFoundError: Если статьи нет
        """
        pass

    @abstractmethod
    async def update(self, article: Article) -> None:
        """Обновить статью."""
        pass

    @abstractmethod
    async def get_by_title(self, title: str) -> Article:
        """Найти статью по заголовку."""
        pass

    @abstractmethod
    async def store(self, article: Article) -> None:
        """
        Сохранить статью.

        Реализация может изменить переданную статью (например, назначить id).

        Raises:
            DuplicateEntityError: Если такая статья уже есть
        """
        pass

    @abstractmethod
    async def delete(self, article_id: int) -> None:
        """Удалить статью по ID."""
        pass
