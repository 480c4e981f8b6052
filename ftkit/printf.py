"""A small formatted-output routine supporting %c %s %p %d %i %u %x %X and %%.

Integers are treated the way the matching C argument type would receive
them: ``%d``/``%i`` take a 32-bit signed int, ``%u``/``%x``/``%X`` a 32-bit
unsigned int and ``%p`` a 64-bit address. A ``%`` followed by any other
character swallows that character, and a lone ``%`` at the end of the
format is dropped.
"""

import operator
import os
import sys
from typing import Any, Callable, Dict, Iterator

_U32_MASK = (1 << 32) - 1
_U64_MASK = (1 << 64) - 1
_NULL_TEXT = "(null)"


def _as_int(arg: Any, spec: str) -> int:
    try:
        return operator.index(arg)
    except TypeError:
        raise TypeError(
            f"%{spec} needs an integer argument, got {type(arg).__name__}"
        ) from None


def _convert_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError(f"%c needs a single character, got {arg!r}")
        return arg
    return chr(_as_int(arg, "c") & 0xFF)


def _convert_string(arg: Any) -> str:
    if arg is None:
        return _NULL_TEXT
    if not isinstance(arg, str):
        raise TypeError(f"%s needs a string argument, got {type(arg).__name__}")
    return arg


def _convert_signed(arg: Any) -> str:
    value = _as_int(arg, "d") & _U32_MASK
    if value >= 1 << 31:
        value -= 1 << 32
    return str(value)


def _convert_unsigned(arg: Any) -> str:
    return str(_as_int(arg, "u") & _U32_MASK)


def _convert_lower_hex(arg: Any) -> str:
    return format(_as_int(arg, "x") & _U32_MASK, "x")


def _convert_upper_hex(arg: Any) -> str:
    return format(_as_int(arg, "X") & _U32_MASK, "X")


def _convert_pointer(arg: Any) -> str:
    if arg is None:
        address = 0
    elif isinstance(arg, int):
        address = arg
    else:
        address = id(arg)
    return "0x" + format(address & _U64_MASK, "x")


_CONVERTERS: Dict[str, Callable[[Any], str]] = {
    "c": _convert_char,
    "s": _convert_string,
    "p": _convert_pointer,
    "d": _convert_signed,
    "i": _convert_signed,
    "u": _convert_unsigned,
    "x": _convert_lower_hex,
    "X": _convert_upper_hex,
}


def _pieces(fmt: str, args: tuple) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            yield "%"
            continue
        converter = _CONVERTERS.get(spec)
        if converter is None:
            continue
        try:
            arg = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        yield converter(arg)


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return the bytes written.

    Raises ``OSError`` if the write fails.
    """
    data = format_string(fmt, *args).encode()
    sys.stdout.flush()
    view = memoryview(data)
    while view:
        written = os.write(1, view)
        view = view[written:]
    return len(data)