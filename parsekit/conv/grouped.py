"""Parsing and formatting of numbers with digit grouping and a decimal symbol."""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]
Symbol = Union[str, int]

_INT64_MAX = (1 << 63) - 1
_INT64_MIN = -(1 << 63)
_INT64_MAX_DIV10 = _INT64_MAX // 10
_INT64_MIN_DIV10 = -((1 << 63) // 10)


def _valid_char(sym: Symbol) -> str | None:
    """Return ``sym`` as a single encodable character, or ``None``."""
    if isinstance(sym, int):
        if not 0 <= sym <= 0x10FFFF:
            return None
        sym = chr(sym)
    if len(sym) != 1:
        return None
    try:
        sym.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return sym


def parse_number(b: BytesLike, group_sym: Symbol, dec_sym: Symbol) -> tuple[int, int, int]:
    """Parse a grouped decimal number as a scaled 64-bit integer.

    Returns the digits as an integer, the number of decimals and the number
    of bytes consumed. Parsing stops at an invalid character or before a
    digit that would overflow a signed 64-bit integer.
    """
    data = bytes(b)
    size = len(data)
    group_char = _valid_char(group_sym)
    dec_char = _valid_char(dec_sym)
    group = group_char.encode("utf-8") if group_char is not None else None
    decimal = dec_char.encode("utf-8") if dec_char is not None else None

    pos = 0
    dec = 0
    sign = 1
    num = 0
    has_decimals = False
    if data[:1] == b"-":
        sign = -1
        pos = 1
    while pos < size:
        c = data[pos]
        if 0x30 <= c <= 0x39:
            digit = sign * (c - 0x30)
            if sign == 1 and (num > _INT64_MAX_DIV10 or _INT64_MAX - digit < num * 10):
                break
            if sign == -1 and (num < _INT64_MIN_DIV10 or num * 10 < _INT64_MIN - digit):
                break
            num = num * 10 + digit
            if has_decimals:
                dec += 1
            pos += 1
        elif not has_decimals and decimal is not None and data.startswith(decimal, pos):
            has_decimals = True
            pos += len(decimal)
        elif not has_decimals and group is not None and data.startswith(group, pos):
            pos += len(group)
        else:
            break
    return num, dec, pos


def format_number(
    num: int, dec: int, group_size: int, group_sym: Symbol, dec_sym: Symbol
) -> bytes:
    """Format the scaled integer ``num`` with ``dec`` decimal digits.

    Integer digits are grouped by ``group_size`` with ``group_sym``; a NUL
    group symbol or a non-positive size disables grouping. Invalid symbols
    fall back to ``.`` for grouping and ``,`` for decimals.
    """
    dec = max(dec, 0)
    group = _valid_char(group_sym) or "."
    decimal = _valid_char(dec_sym) or ","

    digits = str(abs(num)).rjust(dec + 1, "0")
    split = len(digits) - dec
    int_part, frac_part = digits[:split], digits[split:]

    if group_size > 0 and group != "\0":
        head = len(int_part) % group_size or group_size
        chunks = [int_part[:head]]
        chunks.extend(int_part[k:k + group_size] for k in range(head, len(int_part), group_size))
        int_part = group.join(chunks)

    text = int_part + (decimal + frac_part if dec > 0 else "")
    if num < 0:
        text = "-" + text
    return text.encode("utf-8")