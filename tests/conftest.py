"""
Общие фикстуры тестов.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from src.domain.services.article_service import IArticleService
from src.infrastructure.config.settings import Settings
from src.main import create_app


@pytest.fixture
def article_service():
    """Шпион сервиса статей: записывает все вызовы."""
    service = AsyncMock(spec=IArticleService)
    service.fetch.return_value = ([], "")
    return service


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def make_client(article_service, settings):
    """Фабрика TestClient с переопределяемыми настройками."""
    def _make(service=None, **overrides):
        app_settings = settings.model_copy(update=overrides) if overrides else settings
        app = create_app(service=service or article_service, settings=app_settings)
        return TestClient(app, raise_server_exceptions=False)
    return _make


@pytest.fixture
def client(make_client):
    with make_client() as test_client:
        yield test_client
