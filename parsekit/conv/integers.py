"""Parsing and formatting of 64-bit integers in byte strings."""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

_INT64_MAX = (1 << 63) - 1
_INT64_NEG_LIMIT = 1 << 63
_UINT64_MAX = (1 << 64) - 1


def _accumulate(data: bytes, limit: int) -> tuple[int, int] | None:
    """Read leading decimal digits; ``None`` on overflow beyond ``limit``."""
    value = 0
    count = 0
    for c in data:
        if not 0x30 <= c <= 0x39:
            break
        digit = c - 0x30
        if value > limit // 10 or limit - digit < value * 10:
            return None
        value = value * 10 + digit
        count += 1
    return value, count


def parse_int(b: BytesLike) -> tuple[int, int]:
    """Parse a signed 64-bit integer at the start of ``b``.

    Returns the value and the number of bytes consumed; ``(0, 0)`` when there
    are no digits or the value does not fit.
    """
    data = bytes(b)
    sign = data[:1]
    offset = 1 if sign in (b"+", b"-") else 0
    result = _accumulate(data[offset:], _INT64_NEG_LIMIT)
    if result is None or result[1] == 0:
        return 0, 0
    value, count = result
    if sign == b"-":
        return -value, offset + count
    if value > _INT64_MAX:
        return 0, 0
    return value, offset + count


def parse_uint(b: BytesLike) -> tuple[int, int]:
    """Parse an unsigned 64-bit integer at the start of ``b``.

    Returns the value and the number of bytes consumed; ``(0, 0)`` on overflow.
    """
    result = _accumulate(bytes(b), _UINT64_MAX)
    if result is None:
        return 0, 0
    return result


def format_int(num: int) -> bytes:
    """Return the decimal representation of ``num``."""
    return b"%d" % num


def len_uint(i: int) -> int:
    """Return the number of decimal digits of a non-negative integer."""
    return len(str(i))


def len_int(i: int) -> int:
    """Return the written length of an integer, minus sign included."""
    if i < 0:
        return 1 + len_uint(-i)
    return len_uint(i)