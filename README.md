# cstrkit

Small helpers for ASCII characters, byte buffers, NUL-terminated strings,
writing to file descriptors or streams, and singly linked lists. They keep
the well-known edge cases, limits and return values of the classic string
and memory routines. Search functions return indices rather than pointers,
and where nothing is found they return `None`. Errors are raised as
ordinary exceptions.

## Installation

```
pip install cstrkit
```

To run the tests:

```
pip install "cstrkit[test]"
pytest
```

## Modules

### `cstrkit.chars`

`isalpha`, `isalnum`, `isdigit`, `isascii`, `isprint`, `toupper` and
`tolower`. Each one takes either an integer code or a one-character string.
Only the ASCII ranges count. The case functions return a value of the same
kind they were given.

```python
from cstrkit.chars import isalpha, toupper

isalpha("q")      # True
isalpha(0xE9)     # False
toupper("a")      # 'A'
toupper(97)       # 65
```

### `cstrkit.memory`

These operate on byte buffers. Buffers that are written to must support
slice assignment, such as a `bytearray`.

- `memset(buf, c, length)`: fills the first `length` bytes with `c & 0xFF`
  and returns `buf`.
- `bzero(buf, n)`: sets the first `n` bytes to zero.
- `calloc(count, size)`: returns a zeroed `bytearray` of `count * size`
  bytes.
- `memcpy(dst, src, n)`: copies `n` bytes and returns `dst`. If both
  arguments are `None` it returns `None`.
- `memccpy(dst, src, c, n)`: copies up to and including the first byte
  `c`. It returns the offset just past that byte, or `None` if `c` is not
  among the first `n` bytes.
- `memmove(buf, dst, src, length)`: moves bytes between two offsets of the
  same buffer. The regions may overlap.
- `memchr(data, c, n)`: returns the offset of the first matching byte.
  Bytes are read as signed values.
- `memcmp(s1, s2, n)`: returns the difference of the first unsigned pair
  that differs, or 0 if they all match.

Counts that are negative or that run past a buffer raise `ValueError`.

```python
from cstrkit.memory import calloc, memset, memmove, memcmp

buf = calloc(4, 2)           # bytearray(8)
memset(buf, ord("x"), 3)     # bytearray(b'xxx\x00\x00\x00\x00\x00')
memmove(buf, 2, 0, 3)        # bytearray(b'xxxxx\x00\x00\x00')
memcmp(b"abc", b"abd", 3)    # -1
```

### `cstrkit.strings`

These read `str` or bytes-like values up to their first NUL.

- `strlen`: returns the length up to the first NUL.
- `strlcpy` and `strlcat`: write into a `bytearray` and return the length
  of the string they tried to build.
- `strchr` and `strrchr`: return the index of the first or last match.
  Searching for NUL finds the terminator.
- `strncmp`: compares up to `n` characters and returns the difference of
  the first pair that differs, or 0.
- `strnstr`: finds a needle within the first `length` characters.
- `strdup`: returns a copy of the same kind as its argument.
- `atoi`: parses a leading integer after whitespace and one sign.

For `atoi`, a value above `LONG_MAX` gives `-1` and one below `LONG_MIN`
gives `0`. Any other value is reduced to a 32-bit signed int.

```python
from cstrkit.strings import strlcpy, strchr, strnstr, atoi

dst = bytearray(8)
strlcpy(dst, b"hello", 4)         # 5, dst now starts with b"hel\x00"
strchr("hello", "l")              # 2
strchr("hello", "\0")             # 5
strnstr("foo bar", "bar", 5)      # None
atoi("   +123abc")                # 123
atoi("99999999999999999999")      # -1
```

### `cstrkit.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to a target. The
target is an integer file descriptor or a file object:

- text streams receive `str`;
- descriptors and binary streams receive UTF-8 bytes.

```python
import sys
from cstrkit.output import put_nbr, put_endl

put_nbr(-2024, sys.stdout)
put_endl("", sys.stdout)
```

### `cstrkit.strops`

These build new strings. Each input is read up to its first NUL, and the
result is of the same kind as the input.

- `substr`: takes at most `length` characters starting at `start`.
- `strjoin`: concatenates two strings.
- `strtrim`: strips the given characters from both ends.
- `split`: splits on one character and drops empty fields.
- `itoa`: returns the decimal text of an integer.
- `strmapi`: builds a string from `f(index, char)` for each character.

```python
from cstrkit.strops import split, strtrim, itoa, substr, strmapi

split("  hello  world ", " ")              # ['hello', 'world']
strtrim("xxabcxx", "x")                    # 'abc'
substr("hello", 1, 3)                      # 'ell'
itoa(-42)                                  # '-42'
strmapi("abc", lambda i, c: c.upper())     # 'ABC'
```

### `cstrkit.lists`

`LinkedList` is a singly linked list made of `Node` links. Each `Node` has
`content` and `next`. The list supports:

- `push_front`, `push_back`;
- `len()` and iteration;
- `last`;
- `remove_first(delete)`, `clear(delete)`;
- `iterate(f)`;
- `map(f, delete)`.

`map` returns a new list. If `f` raises, the values already produced are
passed to `delete` and the exception propagates.

```python
from cstrkit.lists import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
len(items)                                  # 4
items.last()                                # 3
list(items.map(lambda x: x * 10, None))     # [0, 10, 20, 30]
items.clear(print)                          # prints 0, 1, 2, 3
```