# parsekit

Small helpers with no dependencies for working with raw bytes in parsers and
minifiers.

## Modules

### `parsekit.util`

- `copy(src)` returns an independent `bytearray` copy.
- `to_lower(src)` converts ASCII `A`-`Z` to lower case. A `bytearray` is
  changed in place and returned. Other input gives new `bytes`.
- `equal_fold(s, target_lower)` compares `s` with a lowercase target and
  ignores ASCII case.
- `printable(r)` takes a character or a code point. A graphic character comes
  back as itself, another ASCII code as `0xNN`, and anything else as `U+XXXX`.
- `is_whitespace(c)`, `is_newline(c)`, `is_all_whitespace(b)` and
  `trim_whitespace(b)` treat space, `\t`, `\n`, `\r` and `\f` as whitespace.
  Only `\n` and `\r` count as newlines.
- `Indenter(writer, n)` wraps any object that has a `write` method. After each
  newline it writes `n` spaces. It accepts `str` or `bytes`. Wrapping an
  `Indenter` adds to its indentation. `indent()` returns the width.

### `parsekit.xmlutil`

- `escape_attr_val(b)` quotes an attribute value. It picks the quote that
  needs fewer escapes, and writes each such quote inside the value as `&#34;`
  or `&#39;`.
- `escape_cdata_val(b)` returns `(escaped, True)` when the content can be
  written as escaped text (`&lt;`, `&amp;`) without growing more than a CDATA
  wrapper would. Otherwise it returns `(original, False)`.

### `parsekit.conv.integers`

`parse_int`, `parse_uint`, `format_int`, `len_int` and `len_uint` cover
signed and unsigned 64-bit integers. The parse functions return `(0, 0)` when
there are no digits or when the value overflows.

### `parsekit.conv.decimals`

- `parse_decimal(b)` parses numbers such as `-1.25`. It accepts no `+` sign
  and no exponent.
- `format_decimal(f, dec)` rounds to at most `dec` decimals and drops trailing
  zeros. For NaN and infinities it returns `b""`.

### `parsekit.conv.floats`

- `parse_float(b)` parses an optional sign, digits, a dot and an exponent.
- `format_float(f, prec)` writes the shortest form, such as `.1`, `12e3` or
  `1e-4`, with `prec + 1` significant digits. For NaN and infinities it raises
  `ValueError`.

### `parsekit.conv.grouped`

- `parse_number(b, group_sym, dec_sym)` reads numbers such as `-1.000,25` as
  a scaled integer. It returns `(num, decimals, consumed)`.
- `format_number(num, dec, group_size, group_sym, dec_sym)` does the reverse.

## Conventions

All formatting functions return `bytes`. The parse functions read only as much
of the input as forms a valid number. They return the value together with the
number of bytes consumed.

## Example

```python
from parsekit.conv.floats import format_float, parse_float
from parsekit.conv.grouped import format_number
from parsekit.util import trim_whitespace

parse_float(b"5.1e+2xyz")                     # (510.0, 6)
format_float(12e3, 6)                         # b"12e3"
format_number(123456789012, 2, 3, ".", ",")   # b"1.234.567.890,12"
trim_whitespace(b"  text \n")                 # b"text"
```

## What it does not do

This is a set of building blocks. It contains no XML or JSON lexer, no parser
and no command-line tool. The XML module only escapes values.

## Running the tests

```
pip install -e .[test]
pytest
```