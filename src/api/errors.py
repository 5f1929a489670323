# -*- coding: utf-8 -*-
"""
Преобразование ошибок в HTTP ответы.

Путь: src/api/errors.py

Любая ошибка отдаётся телом {"message": "<текст ошибки>"}.
Статус вычисляет классификатор get_status_code(). В режиме
legacy_error_status все ошибки отдаются со статусом 200, как
это делал прежний обработчик.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.shared.exceptions.domain_exceptions import (
    BadParamInputError,
    DomainException,
    DomainValidationError,
    DuplicateEntityError,
    EntityNotFoundError,
    InternalServerError,
    UnprocessableEntityError,
)

logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    """Тело ответа с ошибкой."""
    message: str


_STATUS_BY_ERROR = (
    (EntityNotFoundError, 404),
    (DuplicateEntityError, 409),
    (InternalServerError, 500),
    (DomainValidationError, 400),
    (BadParamInputError, 400),
    (UnprocessableEntityError, 422),
)


def get_status_code(error: Optional[BaseException]) -> int:
    """
    Классификатор: HTTP статус для ошибки.

    Каждая ошибка логируется до классификации. Неизвестные ошибки
    считаются внутренними (500).
    """
    if error is None:
        return 200

    logger.error(f"{type(error).__name__}: {error}")
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return 500


def return_error(
    error: Optional[BaseException],
    legacy_status: bool = False,
) -> Optional[JSONResponse]:
    """
    Ответ с ошибкой или None, если ошибки нет.

    Вызывающий код возвращает полученный ответ как окончательный;
    при None он продолжает и формирует свой успешный ответ.
    """
    if error is None:
        return None

    status_code = get_status_code(error)
    if legacy_status:
        status_code = 200

    body = ErrorResponse(message=str(error))
    return JSONResponse(status_code=status_code, content=body.model_dump())


def _legacy_status(request: Request) -> bool:
    settings = getattr(request.app.state, "settings", None)
    return bool(settings and settings.legacy_error_status)


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Обработчик доменных исключений."""
    return return_error(exc, legacy_status=_legacy_status(request))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    Ошибки самого фреймворка (неизвестный путь, неподдерживаемый метод).

    Статус сохраняется, меняется только форма тела.
    """
    body = ErrorResponse(message=str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Обработчик непредвиденных исключений сервиса."""
    return return_error(exc, legacy_status=_legacy_status(request))


def register_error_handlers(app: FastAPI) -> None:
    """Подключить обработчики ошибок к приложению."""
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
