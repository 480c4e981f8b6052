"""Building new strings from old ones: slicing, joining, trimming,
splitting and per-character mapping."""

from typing import Callable, List, MutableSequence, Optional


def _check_non_negative(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A ``start`` at or past the end of ``text`` gives an empty string.
    """
    _check_non_negative(start, "start")
    _check_non_negative(length, "length")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(text1: str, text2: str) -> str:
    """Return ``text1`` followed by ``text2``."""
    return text1 + text2


def strtrim(text: str, trim_set: str) -> str:
    """Remove every character found in ``trim_set`` from both ends of ``text``."""
    if text is None or trim_set is None:
        raise TypeError("strtrim needs both a string and a trim set")
    if not trim_set:
        return text
    return text.strip(trim_set)


def split(text: str, separator: str) -> List[str]:
    """Split ``text`` on ``separator``, dropping the empty words that runs of
    separators and separators at either end would produce."""
    if not isinstance(separator, str) or len(separator) != 1:
        raise ValueError(f"separator must be a single character, got {separator!r}")
    return [word for word in text.split(separator) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to each character."""
    if func is None:
        raise TypeError("strmapi needs a function")
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` on each element of ``chars`` in place.

    A value returned by ``func`` replaces the element; ``None`` leaves it as
    it was.
    """
    if func is None:
        raise TypeError("striteri needs a function")
    for index, char in enumerate(chars):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement