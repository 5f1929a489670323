"""
Разбор параметров запроса.

Путь: src/api/params.py

Целые числа разбираются строго: необязательный знак и ASCII цифры,
без пробелов и разделителей "_", в пределах signed 64-bit.
"""

import re
from typing import Optional

from src.shared.exceptions.domain_exceptions import EntityNotFoundError

_INT_RE = re.compile(r"[+-]?[0-9]+")

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

DEFAULT_PAGE_SIZE = 10


def parse_int(raw: Optional[str]) -> Optional[int]:
    """Целое из строки или None, если строка не является целым."""
    if raw is None or not _INT_RE.fullmatch(raw):
        return None
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value


def parse_page_size(raw: Optional[str], default: int = DEFAULT_PAGE_SIZE) -> int:
    """
    Размер страницы из параметра num.

    Нечисловое значение или 0 заменяются значением по умолчанию.
    Отрицательные значения передаются как есть.
    """
    num = parse_int(raw)
    if num is None or num == 0:
        return default
    return num


def parse_id(raw: str) -> int:
    """
    ID статьи из пути.

    Raises:
        EntityNotFoundError: Если ID не является целым числом
    """
    article_id = parse_int(raw)
    if article_id is None:
        raise EntityNotFoundError()
    return article_id
