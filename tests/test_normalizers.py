import math

import pytest

from commons.normalizers import (
    empty_to_none,
    parse_float_strict,
    percent_decode_or_raw,
    to_bool_or_none,
)


def test_empty_to_none():
    assert empty_to_none("") is None
    assert empty_to_none("   ") is None
    assert empty_to_none("x") == "x"
    assert empty_to_none(0) == 0
    assert empty_to_none(None) is None


@pytest.mark.parametrize("value,expected", [
    ("true", True),
    ("Yes", True),
    (1, True),
    ("0", False),
    ("false", False),
    (False, False),
    ("maybe", None),
    (None, None),
])
def test_to_bool_or_none(value, expected):
    assert to_bool_or_none(value) is expected


@pytest.mark.parametrize("value,expected", [
    ("12.5", 12.5),
    ("300", 300.0),
    ("-0.25", -0.25),
    ("1e-3", 0.001),
    (7, 7.0),
    (2.5, 2.5),
    ("", None),
    (" 12", None),
    ("12 ", None),
    ("1_000", None),
    ("12s", None),
    ("0x10", 16.0),
    ("-0x1p-2", -0.25),
    ("0x", None),
    ("\u0661\u0662", None),
    ("\uff13", None),
    (None, None),
    (True, None),
    ([1], None),
])
def test_parse_float_strict(value, expected):
    assert parse_float_strict(value) == expected


def test_parse_float_strict_special_values():
    assert math.isinf(parse_float_strict("-inf"))
    assert math.isnan(parse_float_strict("nan"))


@pytest.mark.parametrize("value,expected", [
    ("plain", "plain"),
    ("Bad%20thing", "Bad thing"),
    ("a%2Fb%2fc", "a/b/c"),
    ("%E4%B8%AD", "中"),
    ("a+b", "a+b"),
    ("100%", "100%"),
    ("%zz", "%zz"),
    ("ok%20%zz", "ok%20%zz"),
    ("%E4%B8", "%E4%B8"),
    ("%FF", "%FF"),
])
def test_percent_decode_or_raw(value, expected):
    assert percent_decode_or_raw(value) == expected
