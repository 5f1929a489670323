"""
Unit tests для разбора параметров запроса.
"""

import pytest

from src.api.params import parse_id, parse_int, parse_page_size
from src.shared.exceptions.domain_exceptions import EntityNotFoundError


@pytest.mark.parametrize("raw, expected", [
    ("0", 0),
    ("42", 42),
    ("-5", -5),
    ("+5", 5),
    ("007", 7),
    ("9223372036854775807", 2 ** 63 - 1),
    ("-9223372036854775808", -(2 ** 63)),
])
def test_parse_int_valid(raw, expected):
    assert parse_int(raw) == expected


@pytest.mark.parametrize("raw", [
    None, "", " ", "abc", "1.5", " 1", "1 ", "1_000", "+", "-", "0x10", "١٢",
    "9223372036854775808",
])
def test_parse_int_invalid(raw):
    assert parse_int(raw) is None


def test_page_size_default():
    assert parse_page_size(None) == 10
    assert parse_page_size("0") == 10
    assert parse_page_size("ten") == 10


def test_page_size_custom_default():
    assert parse_page_size("", default=25) == 25


def test_page_size_negative_passes_through():
    assert parse_page_size("-1") == -1


def test_parse_id():
    assert parse_id("7") == 7

    with pytest.raises(EntityNotFoundError, match="not found"):
        parse_id("seven")
