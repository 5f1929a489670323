"""
FastAPI Application Entry Point.

Путь: src/main.py

    uvicorn src.main:app
"""

import logging
from typing import Optional

from fastapi import FastAPI

from src.api.errors import register_error_handlers
from src.api.routes import articles
from src.domain.services.article_service import IArticleService
from src.infrastructure.config.settings import Settings, get_settings
from src.infrastructure.memory.article_service_impl import InMemoryArticleService


def configure_logging(settings: Settings) -> None:
    """Базовая настройка логирования."""
    logging.basicConfig(
        level=settings.get_log_level(),
        format='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def create_app(
    service: Optional[IArticleService] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Собрать приложение.

    Args:
        service: Реализация сервиса статей (по умолчанию in-memory)
        settings: Настройки (по умолчанию из окружения)
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="HTTP слой CRUD операций над статьями",
        version=settings.app_version,
        debug=settings.debug
    )
    app.state.settings = settings
    app.state.article_service = service or InMemoryArticleService()

    register_error_handlers(app)
    app.include_router(articles.router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": settings.app_version
        }

    logging.getLogger(__name__).info(
        f"Article API ready (service={type(app.state.article_service).__name__})"
    )
    return app


app = create_app()
