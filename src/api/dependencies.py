"""
FastAPI Dependencies для DI.

Сервис статей и настройки задаются один раз при создании
приложения (см. src/main.py) и дальше только читаются.
"""

from fastapi import Request

from src.domain.services.article_service import IArticleService
from src.infrastructure.config.settings import Settings, get_settings


def get_article_service(request: Request) -> IArticleService:
    """DI для service."""
    return request.app.state.article_service


def get_app_settings(request: Request) -> Settings:
    """DI для настроек приложения."""
    return getattr(request.app.state, "settings", None) or get_settings()
