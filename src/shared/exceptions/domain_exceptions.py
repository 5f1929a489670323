"""
Domain Exceptions

Исключения доменного слоя. Сервис статей сообщает об ошибках,
выбрасывая наследников DomainException; API слой переводит их в HTTP ответы.
"""


class DomainException(Exception):
    """Базовое исключение домена."""

    default_message = "domain error"

    def __init__(self, message: str = ""):
        super().__init__(message or self.default_message)


class DomainValidationError(DomainException):
    """Ошибка валидации доменной сущности."""

    default_message = "validation failed"


class EntityNotFoundError(DomainException):
    """Сущность не найдена."""

    default_message = "not found"


class DuplicateEntityError(DomainException):
    """Дубликат сущности (конфликт)."""

    default_message = "conflict"


class InternalServerError(DomainException):
    """Внутренняя ошибка сервиса."""

    default_message = "internal server error"


class BadParamInputError(DomainException):
    """Некорректный входной параметр."""

    default_message = "given param is not valid"


class UnprocessableEntityError(DomainException):
    """Тело запроса не удалось разобрать."""

    default_message = "unprocessable entity"
