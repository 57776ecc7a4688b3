"""Byte-level helpers shared by the lexers and parsers."""

from __future__ import annotations

import unicodedata
from typing import Protocol, Union

BytesLike = Union[bytes, bytearray, memoryview]

_WHITESPACE = frozenset(b" \t\n\r\f")
_NEWLINES = frozenset(b"\n\r")
_GRAPHIC_CATEGORIES = frozenset("LMNPS")


def copy(src: BytesLike) -> bytearray:
    """Return an independent, mutable copy of ``src``."""
    return bytearray(src)


def to_lower(src: BytesLike) -> BytesLike:
    """Convert ASCII A-Z to a-z.

    A ``bytearray`` is changed in place and returned; immutable input gives
    a new ``bytes`` object.
    """
    lowered = bytes(src).lower()
    if isinstance(src, bytearray):
        src[:] = lowered
        return src
    return lowered


def equal_fold(s: BytesLike, target_lower: BytesLike) -> bool:
    """Tell whether ``s`` equals the lowercase ``target_lower`` ignoring ASCII case."""
    if len(s) != len(target_lower):
        return False
    for d, c in zip(bytes(s), bytes(target_lower)):
        if d != c and not (0x41 <= d <= 0x5A and d + 0x20 == c):
            return False
    return True


def _is_graphic(ch: str) -> bool:
    category = unicodedata.category(ch)
    return category[0] in _GRAPHIC_CATEGORIES or category == "Zs"


def printable(r: str | int) -> str:
    """Return a printable representation of a single character."""
    code = ord(r) if isinstance(r, str) else r
    ch = chr(code)
    if _is_graphic(ch):
        return ch
    if code < 128:
        return f"0x{code:02X}"
    return f"U+{code:04X}"


def is_whitespace(c: int) -> bool:
    """Tell whether byte ``c`` is space, \\t, \\n, \\r or \\f."""
    return c in _WHITESPACE


def is_newline(c: int) -> bool:
    """Tell whether byte ``c`` is \\n or \\r."""
    return c in _NEWLINES


def is_all_whitespace(b: BytesLike) -> bool:
    """Tell whether every byte in ``b`` is whitespace."""
    return all(c in _WHITESPACE for c in bytes(b))


def trim_whitespace(b: BytesLike) -> bytes:
    """Strip leading and trailing space, \\t, \\n, \\r and \\f."""
    return bytes(b).strip(b" \t\n\r\f")


class _Writer(Protocol):
    def write(self, data): ...


class Indenter:
    """Writer wrapper that indents every line after a newline by a fixed amount."""

    def __init__(self, writer: _Writer, n: int) -> None:
        if isinstance(writer, Indenter):
            n += writer.indent()
            writer = writer._writer
        self._writer = writer
        self._width = n

    def indent(self) -> int:
        """Return the number of spaces inserted after each newline."""
        return self._width

    def _emit(self, chunk) -> int:
        written = self._writer.write(chunk)
        return len(chunk) if written is None else written

    def write(self, b):
        """Write ``b``, inserting the indentation after every newline.

        Returns the number of units written to the underlying writer,
        indentation included.
        """
        newline, pad = ("\n", " " * self._width) if isinstance(b, str) else (b"\n", b" " * self._width)
        *lines, rest = b.split(newline)
        total = 0
        for line in lines:
            total += self._emit(line + newline)
            total += self._emit(pad)
        return total + self._emit(rest)