# ftkit

A small toolbox of everyday helpers for characters, numbers, text and simple
data structures. It has no dependencies outside the standard library.

## Modules

- `ftkit.chars`: ASCII tests and case mapping: `is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`. Each accepts an
  integer code point or a one-character string. The case mappers return the
  same kind of value they were given.
- `ftkit.ftmath`: `imin`, `imax`, `iabs`, `clamp` for integers and `fmin`,
  `fmax`, `fabs`, `fclamp` for floats. `fmin` and `fmax` return NaN if either
  argument is NaN. In `clamp(low, x, high)`, `low` wins when it exceeds `high`.
- `ftkit.bits`: `bit_get`, `bit_set` and `bit_invert`. The setters return the
  updated integer. A negative bit index raises `ValueError`.
- `ftkit.conversions`: integers to and from text.
  - `atoi` and `atoi_base` parse leniently. They skip leading whitespace and
    stop at the first character that is not a digit. The result wraps to a
    32-bit signed integer.
  - `atoi_strict` accepts only an optional `-` followed by digits in the 32-bit
    range. Anything else raises `ValueError`.
  - `itoa` writes a number in decimal.
  - `itoa_base` writes a number as an unsigned 32-bit value with the digits of
    any base.
- `ftkit.strbuilder`: `StringBuilder` gathers text with `add_char`, `add_str`
  and `set_chars` into chunks of `CHUNK_SIZE` (128) characters. `build()`
  returns the text. `len()` and `chunk_count()` report the text length and the
  number of chunks.
- `ftkit.textops`: string helpers:
  - `split` and `split_by`, which drop empty pieces.
  - `find_if`, `index_of`, `find_char`, `rfind_char` and `find_in`, which
    return `-1` when nothing is found.
  - `trim`, `substr`, `join` and `join_all`.
  - `ncompare`, which returns the difference of the first differing code
    points.
  - `replace_char`, which returns the new text and the number of
    replacements.
  - `map_indexed`.
- `ftkit.formatting`: `sprintf`, `fprintf(stream, ...)` and `printf` support
  `%s`, `%d`, `%u`, `%x`, `%X` and `%c`.
  - `%s` of `None` prints `(null)`.
  - Any other character after `%` is copied through together with the `%`, so
    `"%%"` stays `"%%"`.
  - Too few arguments raise `TypeError`.
- `ftkit.output`: `put_char`, `put_str`, `put_nbr` and `put_nbr_base` write to a
  text stream (standard output by default). Each returns the number of
  characters written.
- `ftkit.linkedlist`: `LinkedList` of `Node`s. It offers:
  - `from_iterable`, `push_front`, `push_back` and `last`.
  - `clear(delete)`, which hands each content to `delete`, last first.
  - `each_reversed`.
  - `map(func, delete)`, which stops at the first `None` result.
  - `to_list`, iteration and `len()`.
- `ftkit.dumps`: `hexdump(data, bytes_per_line=16)` and
  `bindump(data, bytes_per_line=16)` return the dump of a byte string as text.
- `ftkit.reader`:
  - `LineReader(stream, buffer_size=64)` reads a text or binary stream in
    chunks. `read_line()` returns lines with their newline, and `None` at the
    end. The reader can also be iterated over.
  - `read_file(path, buffer_size=4096)` returns a file's bytes with the final
    byte dropped.
- `ftkit.vartree`: `VarTree`, a binary search tree of `Variable`s (name and
  value) ordered by name. It offers:
  - `fetch`, which creates a variable if it is missing. `get` creates a
    missing name too, without a value.
  - `set` and `find`, which never creates.
  - `find_min`, `remove` and `clear`.
  - `export`, which gives `name=value` strings in name order.
  - `dump(stream)`, which writes `'name'='value'` lines.
  - `len()`, iteration and `in`.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from ftkit.formatting import sprintf
from ftkit.textops import split, trim
from ftkit.conversions import atoi, itoa_base
from ftkit.strbuilder import StringBuilder
from ftkit.vartree import VarTree

sprintf("%s has %d items (0x%x)", "box", 42, 255)   # 'box has 42 items (0xff)'
split("  a  b c ", " ")                              # ['a', 'b', 'c']
trim("xxhixx", "x")                                  # 'hi'
atoi("  -123abc")                                    # -123
itoa_base(255, "01")                                 # '11111111'

builder = StringBuilder()
builder.add_str("hello, ", 7)
builder.set_chars("!", 3)
builder.build()                                      # 'hello, !!!'

env = VarTree()
env.set("HOME", "/home/user")
env.set("PATH", "/usr/bin")
env.export()                                         # ['HOME=/home/user', 'PATH=/usr/bin']
```

## What it does not do

This is a library only: it installs no command-line tool. The dump functions
return text rather than printing it.