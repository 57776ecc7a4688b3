"""Parsing and compact formatting of floating-point numbers in byte strings."""

from __future__ import annotations

import math
import struct
from typing import Union

from .integers import len_int, parse_int

BytesLike = Union[bytes, bytearray, memoryview]

_UINT64_MAX = (1 << 64) - 1
_LOG10_2 = 0.3010299956639812

# Exact powers of ten 1e0..1e31, plus coarse steps used to build any power.
_POW10_TABLE = tuple(float(f"1e{k}") for k in range(32))
_POW10_POS32 = tuple(float(f"1e{32 * k}") for k in range(10))
_POW10_NEG32 = tuple(float(f"1e-{32 * k}") for k in range(11))


def _pow10(n: int) -> float:
    """Return 10**n as a float, saturating to infinity or zero."""
    if 0 <= n <= 308:
        return _POW10_POS32[n // 32] * _POW10_TABLE[n % 32]
    if -323 <= n <= 0:
        return _POW10_NEG32[-n // 32] / _POW10_TABLE[-n % 32]
    return math.inf if n > 0 else 0.0


def _float64exp(f: float) -> int:
    """Estimate the decimal exponent of ``f`` from its binary exponent."""
    exp2 = 0
    if f != 0.0:
        bits = struct.unpack("<Q", struct.pack("<d", f))[0]
        exp2 = ((bits >> 52) & 0x7FF) - 1023 + 1
    exp10 = exp2 * _LOG10_2
    if exp10 < 0:
        exp10 -= 1.0
    return int(exp10)


def parse_float(b: BytesLike) -> tuple[float, int]:
    """Parse a float at the start of ``b``.

    Parsing stops at the first invalid character. Returns the value and the
    number of bytes consumed; ``(0.0, 0)`` when there is no number.
    """
    data = bytes(b)
    size = len(data)
    i = 0
    neg = False
    if data[:1] in (b"+", b"-"):
        neg = data[:1] == b"-"
        i = 1
    start = i
    dot = -1
    trunk = -1
    n = 0
    while i < size:
        c = data[i]
        if 0x30 <= c <= 0x39:
            if trunk == -1:
                candidate = n * 10 + (c - 0x30)
                if candidate > _UINT64_MAX:
                    trunk = i
                else:
                    n = candidate
        elif dot == -1 and c == 0x2E:
            dot = i
        else:
            break
        i += 1
    if i == start or (i == start + 1 and dot == start):
        return 0.0, 0

    f = float(n)
    if neg:
        f = -f

    mant_exp = 0
    if dot != -1:
        if trunk == -1:
            trunk = i
        mant_exp = trunk - dot - 1 if trunk > dot else trunk - dot
    elif trunk != -1:
        mant_exp = trunk - i

    exp_exp = 0
    if i < size and data[i] in b"eE":
        value, length = parse_int(data[i + 1:])
        if length > 0:
            exp_exp = value
            i += 1 + length
    exp = exp_exp - mant_exp

    if exp == 0:
        return f, i
    if 0 < exp <= 15 + 22:
        scaled, k = f, exp
        if k > 22:
            scaled *= _POW10_TABLE[k - 22]
            k = 22
        if -1e15 <= scaled <= 1e15:
            return scaled * _POW10_TABLE[k], i
    elif -22 <= exp < 0:
        return f / _POW10_TABLE[-exp], i
    return f * _pow10(-mant_exp) * _pow10(exp_exp), i


def format_float(f: float, prec: int) -> bytes:
    """Format ``f`` in its shortest form with ``prec`` decimals of precision.

    ``prec + 1`` is the number of significant digits; a negative or too large
    ``prec`` means 17. Leading zeros before the dot are dropped and an
    exponent is used when it is shorter. Raises ``ValueError`` for NaN and
    infinities.
    """
    if math.isnan(f) or math.isinf(f):
        raise ValueError(f"cannot format non-finite value {f!r}")

    neg = f < 0.0
    if neg:
        f = -f
    if prec < 0 or prec > 17:
        prec = 17
    prec -= _float64exp(f)
    f *= _pow10(prec)

    mant = int(f)
    mant_len = len_int(mant)
    mant_exp = mant_len - prec - 1
    if mant == 0:
        return b"0"

    exp = 0
    exp_len = 0
    if mant_exp > 0:
        # a mantissa scaled down to fit loses its zeros, so the exponent is fixed here
        if prec < 0:
            exp = mant_exp
        exp_len = 1 + len_int(exp)
    elif mant_exp < -3:
        exp = mant_exp
        exp_len = 1 + len_int(exp)
    elif mant_exp < -1:
        mant_len += -mant_exp - 1

    buf = bytearray(1 + mant_len + exp_len + (1 if neg else 0))
    i = 0
    if neg:
        buf[0] = 0x2D
        i = 1

    # digits are written right to left; trailing zeros are trimmed afterwards
    zero = True
    last = i + mant_len
    dot = last - prec - exp
    j = last
    while mant > 0:
        if j == dot:
            buf[j] = 0x2E
            j -= 1
        mant, digit = divmod(mant, 10)
        if zero and digit > 0:
            if dot < j:
                i = j + 1
                if exp < 0:
                    new_exp = exp - (j - dot)
                    # dropping the dot must not add a digit to the exponent
                    if len_int(new_exp) == len_int(exp):
                        exp = new_exp
                        dot = j
                        j -= 1
                        i -= 1
            else:
                i = dot
            last = j
            zero = False
        buf[j] = 0x30 + digit
        j -= 1

    if dot < j:
        while dot < j:
            buf[j] = 0x30
            j -= 1
        buf[j] = 0x2E
    elif last + 3 < dot:
        # three or more zeros before the dot are shorter as an exponent
        i = last + 1
        exp = dot - last - 1
    elif j == dot:
        buf[j] = 0x2E

    if exp == 1:
        buf[i:i + 1] = b"0"
        i += 1
    elif exp == 2:
        buf[i:i + 2] = b"00"
        i += 2
    elif exp != 0:
        suffix = b"e%d" % exp
        buf[i:i + len(suffix)] = suffix
        i += len(suffix)
    return bytes(buf[:i])