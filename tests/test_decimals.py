import math

import pytest

from parsekit.conv.decimals import format_decimal, parse_decimal


@pytest.mark.parametrize(
    "text, expected",
    [
        ("5", 5.0),
        ("5.1", 5.1),
        ("0.0000000000000000000000000005", 5e-28),
        ("18446744073709551620", 18446744073709551620.0),
        ("1000000000000000000000000.0000", 1e24),
        ("1000000000000000000000000000000000000000000", 1e42),
    ],
)
def test_parse_decimal(text, expected):
    value, n = parse_decimal(text.encode())
    assert n == len(text)
    assert value == pytest.approx(expected, rel=1e-12)


@pytest.mark.parametrize(
    "text, n, expected",
    [
        ("+1", 0, 0.0),
        ("-1", 2, -1.0),
        (".", 0, 0.0),
        ("1e1", 1, 1.0),
    ],
)
def test_parse_decimal_error(text, n, expected):
    assert parse_decimal(text.encode()) == (expected, n)


def test_parse_decimal_stops_at_second_dot():
    value, n = parse_decimal(b"1.5.3")
    assert n == 3
    assert value == pytest.approx(1.5)


@pytest.mark.parametrize(
    "value, dec, expected",
    [
        (0.0, 0, "0"),
        (1.0, 2, "1"),
        (-1.0, 2, "-1"),
        (1.2, 2, "1.2"),
        (1.23, 2, "1.23"),
        (1.234, 2, "1.23"),
        (1.235, 2, "1.24"),
        (0.1, 2, "0.1"),
        (0.01, 2, "0.01"),
        (0.001, 2, "0"),
        (0.005, 2, "0.01"),
        (-75.8077501, 6, "-75.80775"),
    ],
)
def test_format_decimal(value, dec, expected):
    assert format_decimal(value, dec) == expected.encode()


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_format_decimal_non_finite_is_empty(value):
    assert format_decimal(value, 2) == b""


def test_format_then_parse_decimal():
    for value in (3.25, -12.5, 1000.75, 0.125):
        text = format_decimal(value, 4)
        parsed, n = parse_decimal(text)
        assert n == len(text)
        assert parsed == pytest.approx(value)