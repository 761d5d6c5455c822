# ftkit

A small toolkit of low-level helpers and a printf-style formatter that
returns or writes bytes.

## Modules

- `ftkit.chars`: ASCII character tests and case mapping: `is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `is_space`, `to_lower`
  and `to_upper`. Each takes a character code or a one-character string.
  `to_lower` and `to_upper` return a value of the same type they were given.
- `ftkit.numbers`: `absolute(x)` and `itoa(n)`.
- `ftkit.memory`: byte-buffer operations on `bytearray`. They are `memset`,
  `bzero`, `memalloc`, `memcpy`, `memccpy`, `memchr`, `memcmp` and
  `memmove(buf, dst, src, n)`, which copies within one buffer. A span that
  reaches past the end of a buffer raises `IndexError`. `memchr` and
  `memccpy` return an index, or `None` when the byte is not found.
- `ftkit.lists`: a singly linked `Node(content, next)`. Iterating a node
  yields it and every node after it. It also has `append`, `prepend`
  (which returns the new head), `each`, `map`, `release` and `dispose`.
  `map` returns `None` when the callback returns `None` for any node.
- `ftkit.hashing`: `djb2(data, capacity)`. It hashes a `str` (as UTF-8) or
  bytes up to the first NUL byte, wraps at 64 bits and reduces modulo
  `capacity`.
- `ftkit.scan`: parses conversion specifications. It provides
  `parse_spec(text, pos, args)`, the `FormatSpec` dataclass, the `Length`
  enum of length modifiers and the `Arguments` cursor over call arguments.
- `ftkit.intfmt`, `ftkit.textfmt`, `ftkit.floatfmt`: the field formatters
  that work from a `FormatSpec`. `ftkit.intfmt` has `format_integer`,
  `format_signed`, `format_unsigned` and `digit`. `ftkit.textfmt` has
  `format_char`, `format_wide_char`, `format_string`, `format_wide_string`,
  `encode_utf8` and `utf8_length`. `ftkit.floatfmt` has `format_float` and
  `float_to_text`.
- `ftkit.printf`: `format_bytes(fmt, *args)` and
  `printf(fmt, *args, stream=None)`.

## Installation

```
pip install .
```

## Formatting

```python
from ftkit.printf import format_bytes, printf

format_bytes("%5d|%-4s|%#x", 42, "ab", 255)
# b'   42|ab  |0xff'

format_bytes("%.3f", 3.14159)
# b'3.142'

printf("%s and %2$s\n", "one", "two")
```

The format may be a `str`, which is encoded as UTF-8, or a bytes object.

- Integers: `d i u o x X p b`, and `D I O U`, which mean the same as the
  lower-case forms with the `l` modifier. The argument is treated as a
  64-bit machine integer. It is then narrowed to the width that the length
  modifier names (`hh`, `h`, none, `l`, `ll`, `j`, `t`, `z`).
- Floating point: `f F e E g G`. Every one of them prints fixed-point
  notation. The value is expanded exactly and rounded half to even. The
  default precision is 6. `F` only upper-cases `INF` and `NAN`.
- Characters and strings: `c`, `s`, and the wide forms `C`, `S`, `lc` and
  `ls`, which write code points as UTF-8. With wide strings the precision
  and width count bytes. `r` prints a string with each unprintable byte
  shown as a backslash and its octal code. `None` prints as `(null)`.
- `%%` prints `%`. Any other conversion character is printed itself,
  padded to the field width.

The flags are `- + space # 0`. A width or precision can be given as a
number, as `*` (taken from the next argument) or as `*N$`. `N$` selects the
argument for a conversion. Missing arguments raise `IndexError`. An
argument of the wrong type raises `TypeError`.

When a wide character cannot be encoded (a code point that is negative or
at least 2**21), output stops there. The earlier conversions are kept.

`printf` writes to standard output or to the given `stream`. The stream may
be binary or text. `printf` returns the number of bytes produced.

## What it does not do

- `djb2` only computes a bucket index. There is no hash-table container.
- `e`, `E`, `g` and `G` do not use exponent notation.
- Brace tags such as `{RED}` in a format have no special meaning. They are
  printed as written, apart from a `%` before them, which begins a
  conversion.

## Running the tests

```
pip install .[test]
pytest
```