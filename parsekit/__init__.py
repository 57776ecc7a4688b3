"""Byte-level helpers: whitespace utilities, an indenting writer, XML escaping and number conversion."""

__version__ = "0.1.0"