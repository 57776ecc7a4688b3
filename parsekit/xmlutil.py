"""Escaping helpers for XML attribute values and CDATA sections."""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

_CDATA_WRAPPER_LEN = len(b"<![CDATA[]]>")


def escape_attr_val(b: BytesLike) -> bytes:
    """Quote an attribute value, choosing the quote that needs fewer escapes."""
    data = bytes(b)
    singles = data.count(b"'")
    doubles = data.count(b'"')
    if doubles > singles:
        quote, escaped = b"'", b"&#39;"
    else:
        quote, escaped = b'"', b"&#34;"
    return quote + data.replace(quote, escaped) + quote


def escape_cdata_val(b: BytesLike) -> tuple[bytes, bool]:
    """Escape CDATA contents as plain text when that is not longer than the CDATA wrapper.

    Returns the escaped text and ``True``, or the original bytes and ``False``
    when the content is better kept inside a CDATA section.
    """
    data = bytes(b)
    extra = 0
    for c in data:
        if c == 0x3C:
            extra += 3
        elif c == 0x26:
            extra += 4
        else:
            continue
        if extra > _CDATA_WRAPPER_LEN:
            return data, False
    return data.replace(b"&", b"&amp;").replace(b"<", b"&lt;"), True