"""
Unit tests для классификатора ошибок и ответов с ошибкой.
"""

import json
import logging

import pytest

from src.api.errors import get_status_code, return_error
from src.shared.exceptions.domain_exceptions import (
    BadParamInputError,
    DomainException,
    DomainValidationError,
    DuplicateEntityError,
    EntityNotFoundError,
    InternalServerError,
    UnprocessableEntityError,
)


@pytest.mark.parametrize("error, expected", [
    (EntityNotFoundError(), 404),
    (DuplicateEntityError(), 409),
    (InternalServerError(), 500),
    (DomainValidationError("bad"), 400),
    (BadParamInputError(), 400),
    (UnprocessableEntityError(), 422),
    (DomainException("generic"), 500),
    (RuntimeError("boom"), 500),
])
def test_status_code(error, expected):
    assert get_status_code(error) == expected


def test_status_code_none_is_ok():
    assert get_status_code(None) == 200


def test_status_code_logs_error(caplog):
    with caplog.at_level(logging.ERROR, logger="src.api.errors"):
        get_status_code(DuplicateEntityError("title taken"))

    assert "title taken" in caplog.text


def test_status_code_none_not_logged(caplog):
    with caplog.at_level(logging.ERROR, logger="src.api.errors"):
        get_status_code(None)

    assert caplog.records == []


def test_return_error_none():
    assert return_error(None) is None


def test_return_error_body_and_status():
    resp = return_error(EntityNotFoundError("article 3 missing"))

    assert resp.status_code == 404
    assert json.loads(resp.body) == {"message": "article 3 missing"}


def test_return_error_legacy_status():
    resp = return_error(DuplicateEntityError(), legacy_status=True)

    assert resp.status_code == 200
    assert json.loads(resp.body) == {"message": "conflict"}


def test_default_messages():
    assert str(EntityNotFoundError()) == "not found"
    assert str(DuplicateEntityError()) == "conflict"
    assert str(InternalServerError()) == "internal server error"
