# ftkit

A small toolkit of low-level helpers in the style of the C standard library. It covers ASCII character tests, byte buffers, bounded string operations, string building, a singly linked list, a minimal `printf` and line-by-line reading from file descriptors.

## Installation

```
pip install ftkit
```

To run the test suite:

```
pip install "ftkit[test]"
pytest
```

## Modules

- `ftkit.chars`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `tolower`, `toupper`. Each accepts a one-character string or an integer code. The case converters return a value of the same kind they were given.
- `ftkit.memory`: work on byte buffers: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`, `calloc`. `memmove(buffer, dst, src, length)` copies between two offsets within one `bytearray`, and overlapping regions are handled. `memchr` returns an index or `None`. `calloc` returns a zeroed `bytearray` and raises `OverflowError` when the size cannot be addressed.
- `ftkit.strings`: `strlcpy`, `strlcat`, `strchr`, `strrchr`, `strnstr`, `strncmp`, `atoi`, `itoa`.
  - Searches return an index or `None`.
  - `strlcpy` and `strlcat` return a tuple `(new_text, attempted_length)`, so truncation can be detected.
  - `atoi` mimics a C `int` result. It skips leading whitespace, wraps to 32 bits, and returns -1 or 0 when the 64-bit accumulator overflows.
  - `itoa` accepts only values in the 32-bit signed range.
- `ftkit.transform`: `substr`, `strjoin`, `strtrim`, `split` (empty words are dropped), `strmapi`, and `striteri`. `striteri` works in place on a mutable sequence of characters.
- `ftkit.linked`: `Node` and `LinkedList`. A list supports `len`, iteration, `push_front`, `push_back`, `last`, `clear(delete)`, `for_each(func)` and `map(func, delete)`.
- `ftkit.printf`: `format_string(fmt, *args)` returns the formatted text. `printf(fmt, *args)` writes it to standard output and returns the number of bytes written.
  - Supported conversions: `%c %s %p %d %i %u %x %X %%`.
  - Integers are masked to 32 bits, or to 64 bits for `%p`.
  - `%s` of `None` prints `(null)`.
- `ftkit.nextline`: `LineReader(buffer_size)` and the module-level `get_next_line(fd)`. They return one line at a time as `bytes`, keeping the trailing newline. `None` is returned at end of input.

## Examples

```python
from ftkit.strings import atoi, itoa, strlcpy
from ftkit.transform import split, strtrim
from ftkit.printf import format_string

atoi("   -42abc")                       # -42
itoa(-2147483648)                       # "-2147483648"
strlcpy("", "hello", 3)                 # ("he", 5)
split("  hello  world ", " ")           # ["hello", "world"]
strtrim("xxhixx", "x")                  # "hi"
format_string("%d%% of %s", 50, "it")   # "50% of it"
format_string("%x", -1)                 # "ffffffff"
```

Linked lists:

```python
from ftkit.linked import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
items.push_back(4)
list(items)                             # [0, 1, 2, 3, 4]
doubled = items.map(lambda x: x * 2)
len(doubled)                            # 5
```

If `func` raises during `map`, the contents produced so far are passed to `delete` before the error propagates.

Reading lines:

```python
import os
from ftkit.nextline import LineReader

reader = LineReader(4096)
fd = os.open("notes.txt", os.O_RDONLY)
while (line := reader.next_line(fd)) is not None:
    print(line.decode(), end="")
os.close(fd)
```

One reader keeps separate buffered state for each descriptor, so calls for several descriptors can be interleaved. `forget(fd)` discards what is buffered for a descriptor. A read error drops that state and is raised as `OSError`.

## What it does not do

There are no helpers for writing single characters, strings or numbers to an arbitrary file descriptor. `printf` writes only to standard output, and `format_string` only builds text. The package has no command-line entry point.