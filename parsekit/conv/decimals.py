"""Parsing and formatting of plain decimal numbers such as ``1.2``."""

from __future__ import annotations

import math
from typing import Union

from .floats import _POW10_TABLE, _pow10
from .integers import len_uint

BytesLike = Union[bytes, bytearray, memoryview]


def parse_decimal(b: BytesLike) -> tuple[float, int]:
    """Parse a decimal number without exponent at the start of ``b``.

    Only an optional leading minus, digits and one dot are accepted. Returns
    the value and the number of bytes consumed.
    """
    data = bytes(b)
    size = len(data)
    i = 0
    sign = 1.0
    if data[:1] == b"-":
        sign = -1.0
        i = 1

    start = -1
    dot = -1
    n = 0
    while i < size:
        c = data[i]
        if 0x30 <= c <= 0x39:
            # keep up to 18 significant positions, ignoring leading zeros
            if start == -1:
                if c != 0x30:
                    n = c - 0x30
                    start = i
            elif i - start < 18:
                n = n * 10 + (c - 0x30)
        elif c == 0x2E:
            if dot != -1:
                break
            dot = i
        else:
            break
        i += 1

    if i == 1 and dot == 0:
        return 0.0, 0
    if start == -1:
        return 0.0, i
    if dot == -1:
        dot = i

    exp = (dot - start) - len_uint(n)
    if dot < start:
        exp += 1
    if exp > 1023:
        return math.copysign(math.inf, sign), i
    if exp < -1022:
        return 0.0, i

    f = sign * float(n)
    if 0 <= exp < 23:
        return f * _POW10_TABLE[exp], i
    return f * _pow10(exp), i


def format_decimal(f: float, dec: int) -> bytes:
    """Format ``f`` rounded to at most ``dec`` decimals, without trailing zeros.

    A negative or too large ``dec`` means 17. NaN and infinities give an
    empty result.
    """
    if math.isnan(f) or math.isinf(f):
        return b""
    if dec < 0 or dec > 17:
        dec = 17
    f *= _pow10(dec)
    f += 0.5 if f >= 0.0 else -0.5

    num = int(f)
    if num == 0:
        return b"0"
    while dec > 0 and num % 10 == 0:
        num //= 10
        dec -= 1

    sign = "-" if num < 0 else ""
    digits = str(abs(num))
    if dec == 0:
        return f"{sign}{digits}".encode()
    digits = digits.rjust(dec + 1, "0")
    return f"{sign}{digits[:-dec]}.{digits[-dec:]}".encode()