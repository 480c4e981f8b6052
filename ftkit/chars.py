"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer
character code. Predicates return booleans; the case converters return
a value of the same kind they were given.
"""

from typing import Union

Char = Union[str, int]


def _code(c: Char) -> int:
    """Return the integer code of ``c``, validating its form."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return c


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def isalpha(c: Char) -> bool:
    """Tell whether ``c`` is an ASCII letter."""
    code = _code(c)
    return _is_lower(code) or _is_upper(code)


def isdigit(c: Char) -> bool:
    """Tell whether ``c`` is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: Char) -> bool:
    """Tell whether ``c`` is an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: Char) -> bool:
    """Tell whether ``c`` lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isprint(c: Char) -> bool:
    """Tell whether ``c`` is a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def tolower(c: Char) -> Char:
    """Map an ASCII upper-case letter to lower case; return others unchanged."""
    code = _code(c)
    if _is_upper(code):
        code += 32
    return chr(code) if isinstance(c, str) else code


def toupper(c: Char) -> Char:
    """Map an ASCII lower-case letter to upper case; return others unchanged."""
    code = _code(c)
    if _is_lower(code):
        code -= 32
    return chr(code) if isinstance(c, str) else code