import math
import random

import pytest

from parsekit.conv.floats import format_float, parse_float


@pytest.mark.parametrize(
    "text, expected",
    [
        ("5", 5.0),
        ("5.1", 5.1),
        ("-5.1", -5.1),
        ("5.1e-2", 5.1e-2),
        ("5.1e+2", 5.1e2),
        ("0.0e1", 0.0),
        ("18446744073709551620", 18446744073709551620.0),
        ("1e23", 1e23),
    ],
)
def test_parse_float(text, expected):
    value, n = parse_float(text.encode())
    assert n == len(text)
    assert value == expected


@pytest.mark.parametrize(
    "text, n, expected",
    [
        ("e1", 0, 0.0),
        (".", 0, 0.0),
        ("1e", 1, 1.0),
        ("1e+", 1, 1.0),
        ("1e+1", 4, 10.0),
    ],
)
def test_parse_float_error(text, n, expected):
    assert parse_float(text.encode()) == (expected, n)


def test_parse_float_stops_at_invalid_character():
    assert parse_float(b"2.5kg") == (2.5, 3)


@pytest.mark.parametrize(
    "value, prec, expected",
    [
        (0.0, 6, "0"),
        (1.0, 6, "1"),
        (9.0, 6, "9"),
        (9.99999, 6, "9.99999"),
        (123.0, 6, "123"),
        (0.123456, 6, ".123456"),
        (0.066, 6, ".066"),
        (0.0066, 6, ".0066"),
        (12e2, 6, "1200"),
        (12e3, 6, "12e3"),
        (0.1, 6, ".1"),
        (0.001, 6, ".001"),
        (0.0001, 6, "1e-4"),
        (-1.0, 6, "-1"),
        (-123.0, 6, "-123"),
        (-123.456, 6, "-123.456"),
        (-12e3, 6, "-12e3"),
        (-0.1, 6, "-.1"),
        (-0.0001, 6, "-1e-4"),
        (0.000100009, 10, "100009e-9"),
        (0.0001000009, 10, "1.000009e-4"),
        (1e18, 0, "1e18"),
        (1e1, 0, "10"),
        (1e2, 1, "100"),
        (1e3, 2, "1e3"),
        (1e10, -1, "1e10"),
        (1e15, -1, "1e15"),
        (1e-5, 6, "1e-5"),
        (0.0, 19, "0"),
        (0.000923361977200859392, -1, "9.23361977200859392e-4"),
        (1234.0, 2, "1.23e3"),
        (12345.0, 2, "1.23e4"),
        (12.345, 2, "12.3"),
        (12.345, 3, "12.34"),
        (12.34, -1, "12.34"),
    ],
)
def test_format_float(value, prec, expected):
    assert format_float(value, prec) == expected.encode()


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_format_float_rejects_non_finite(value):
    with pytest.raises(ValueError):
        format_float(value, 0)


def test_format_float_round_trips_within_tolerance():
    rng = random.Random(99)
    for _ in range(500):
        value = rng.expovariate(1.0)
        text = format_float(value, -1)
        assert abs(float(text.decode()) - value) <= 1e-6


def test_format_then_parse_float():
    for value in (0.5, 3.25, 1200.0, 12000.0, 0.0001):
        text = format_float(value, 6)
        parsed, n = parse_float(text)
        assert n == len(text)
        assert parsed == pytest.approx(value)