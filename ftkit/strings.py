"""Bounded string copying, searching, comparison and integer conversion.

Strings are ordinary Python ``str`` values. Searches return an index into
the string, or ``None`` where nothing is found. Functions that fill a
fixed-size destination return the resulting text together with the length
they tried to create, so callers can detect truncation.
"""

from itertools import islice, zip_longest
from typing import Optional, Tuple, Union

Char = Union[str, int]

_U64_MASK = (1 << 64) - 1
_U32_MASK = (1 << 32) - 1
_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1
_WHITESPACE = frozenset("\t\n\v\f\r ")


def _check_length(length: int, what: str = "length") -> None:
    if length < 0:
        raise ValueError(f"{what} must not be negative, got {length}")


def _as_char(c: Char) -> str:
    """Turn ``c`` into a one-character string; integers are taken mod 256."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return chr(c & 0xFF)


def strlcpy(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a destination of ``size`` slots, NUL slot included.

    Returns the new destination text and ``len(src)``. With ``size`` 0 the
    destination is left as it was.
    """
    _check_length(size, "size")
    if size == 0:
        return dst, len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a destination of ``size`` slots.

    Returns the new destination text and the length the full concatenation
    would have had. When ``size`` does not exceed the length of ``dst`` the
    destination is unchanged and ``len(src) + size`` is reported.
    """
    _check_length(size, "size")
    dst_len = min(len(dst), size)
    src_len = len(src)
    if size <= dst_len:
        return dst, src_len + size
    room = size - dst_len - 1
    return dst + src[:room], dst_len + src_len


def strchr(text: str, c: Char) -> Optional[int]:
    """Return the index of the first ``c`` in ``text``, or ``None``.

    Searching for the NUL character finds the end of the string.
    """
    target = _as_char(c)
    index = text.find(target)
    if index >= 0:
        return index
    if target == "\0":
        return len(text)
    return None


def strrchr(text: str, c: Char) -> Optional[int]:
    """Return the index of the last ``c`` in ``text``, or ``None``.

    Searching for the NUL character finds the end of the string.
    """
    target = _as_char(c)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return index if index >= 0 else None


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    Returns the index of the first occurrence, 0 for an empty needle, or
    ``None``.
    """
    _check_length(length)
    if not needle:
        return 0
    index = haystack.find(needle, 0, min(length, len(haystack)))
    return index if index >= 0 else None


def strncmp(text1: str, text2: str, length: int) -> int:
    """Compare at most ``length`` characters of two strings.

    Returns the difference of the first unequal pair of character codes,
    the end of a string counting as 0, or 0 when they agree.
    """
    _check_length(length)
    for left, right in islice(zip_longest(text1, text2, fillvalue=""), length):
        if left != right:
            return (ord(left) if left else 0) - (ord(right) if right else 0)
    return 0


def _overflows(value: int) -> bool:
    return value != 0 and (value * 10) & _U64_MASK <= value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way a C ``int`` would receive it.

    Leading whitespace and one sign are skipped and parsing stops at the
    first non-digit. A magnitude that runs past the 64-bit accumulator
    gives -1 for positive input and 0 for negative input; otherwise the
    result wraps into the 32-bit signed range.
    """
    position = 0
    while position < len(text) and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if position < len(text) and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    result = 0
    for ch in text[position:]:
        if not "0" <= ch <= "9":
            break
        result = (result * 10 + ord(ch) - ord("0")) & _U64_MASK
        if _overflows(result):
            return -1 if sign == 1 else 0
    wrapped = (result * sign) & _U32_MASK
    return wrapped - (1 << 32) if wrapped > _INT_MAX else wrapped


def itoa(number: int) -> str:
    """Return the decimal form of a C ``int``."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, got {type(number).__name__}")
    if not _INT_MIN <= number <= _INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit int")
    return str(number)