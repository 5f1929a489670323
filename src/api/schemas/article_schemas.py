"""
Pydantic schemas для API.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities.article import Article, Author


class AuthorSchema(BaseModel):
    """Автор статьи."""

    id: int = 0
    name: str = ""


class CreateArticleRequest(BaseModel):
    """Запрос на создание статьи (используется при store_validation)."""

    title: str = Field(default="", description="Заголовок")
    content: str = Field(default="", description="Текст статьи")
    author: AuthorSchema = Field(default_factory=AuthorSchema)

    def to_entity(self) -> Article:
        """Создать entity."""
        return Article(
            title=self.title,
            content=self.content,
            author=Author(id=self.author.id, name=self.author.name),
        )


class ArticleResponse(BaseModel):
    """Ответ со статьёй."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    author: AuthorSchema
    updated_at: Optional[datetime]
    created_at: Optional[datetime]

    @classmethod
    def from_entity(cls, entity: Article) -> "ArticleResponse":
        """Создать из entity."""
        return cls(
            id=entity.id,
            title=entity.title,
            content=entity.content,
            author=AuthorSchema(id=entity.author.id, name=entity.author.name),
            updated_at=entity.updated_at,
            created_at=entity.created_at,
        )
