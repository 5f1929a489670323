# -*- coding: utf-8 -*-
# =============================================================================
# Путь: src/infrastructure/config/settings.py
# =============================================================================
"""
Application Settings - Infrastructure Layer.

Загружает настройки из переменных окружения и .env файла.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Настройки приложения.

    Все переменные загружаются из .env файла или переменных окружения.
    """

    # ==========================================================================
    # App Settings
    # ==========================================================================
    app_name: str = "Article API"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # ==========================================================================
    # Server (используется командой cli.py serve)
    # ==========================================================================
    host: str = "0.0.0.0"
    port: int = 8000

    # ==========================================================================
    # Articles API
    # ==========================================================================
    default_page_size: int = 10
    cursor_header: str = "X-Cursor"
    legacy_error_status: bool = False  # ошибки отдаются со статусом 200
    store_validation: bool = False  # привязка тела и проверка полей при создании

    # ==========================================================================
    # Pydantic Settings Config
    # ==========================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Игнорировать неизвестные переменные
        case_sensitive=False,  # Регистронезависимые имена
    )

    def get_log_level(self) -> str:
        """Уровень логирования в верхнем регистре."""
        return self.log_level.upper()


@lru_cache()
def get_settings() -> Settings:
    """
    Получить закэшированные настройки.

    Использует lru_cache - настройки загружаются один раз при старте.

    Возвращает:
        Экземпляр Settings
    """
    return Settings()
