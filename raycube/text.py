"""String helpers: number parsing and formatting, splitting, searching and trimming."""

from __future__ import annotations

from itertools import chain, repeat
from typing import Callable, Iterator

_INT_BITS = 32
_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = frozenset("0123456789")


def _to_int32(value: int) -> int:
    value &= (1 << _INT_BITS) - 1
    return value - (1 << _INT_BITS) if value & (1 << (_INT_BITS - 1)) else value


def _require_char(char: str, what: str = "char") -> None:
    if len(char) != 1:
        raise ValueError(f"{what} must be a single character, got {char!r}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping like a 32-bit ``int``.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. An empty string, or one starting with a non-ASCII character,
    gives 0.
    """
    if not text or ord(text[0]) > 127:
        return 0
    rest = text.lstrip("".join(_WHITESPACE))
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    result = 0
    for char in rest:
        if char not in _DIGITS:
            break
        result = result * 10 + int(char)
    return _to_int32(-result if negative else result)


def itoa(number: int) -> str:
    """Format an integer in decimal."""
    return f"{number:d}"


def _words(text: str, sep: str) -> Iterator[str]:
    _require_char(sep, "separator")
    return (part for part in text.split(sep) if part)


def count_words(text: str, sep: str) -> int:
    """Number of non-empty runs of characters other than ``sep``."""
    return sum(1 for _ in _words(text, sep))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return list(_words(text, sep))


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``.

    A ``start`` past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def strnstr(haystack: str, needle: str, length: int) -> int:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at 0; -1 means not found.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    return haystack[:length].find(needle)


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def first_word(command: str) -> str:
    """The first word of ``command`` after skipping at most one leading space."""
    start = 1 if command.startswith(" ") else 0
    end = command.find(" ", start)
    if end == -1:
        end = len(command)
    return command[start:end]


def find_chars(text: str, chars: str) -> int:
    """Index in ``text`` of the first character of ``chars`` that occurs there.

    Characters are tried in the order of ``chars``; -1 means none occurs.
    """
    for char in chars:
        index = text.find(char)
        if index != -1:
            return index
    return -1


def _codes(text: str) -> Iterator[int]:
    return chain(map(ord, text), repeat(0))


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; the end of a string counts as 0.

    Returns the difference of the first differing character codes, 0 when
    equal, and -1 when ``n`` is not positive.
    """
    if n <= 0:
        return -1
    for _, left, right in zip(range(n), _codes(first), _codes(second)):
        if left != right or left == 0:
            return left - right
    return 0


def strchr(text: str, char: str) -> int:
    """Index of the first ``char`` in ``text``, or -1.

    The NUL character is found at ``len(text)``.
    """
    _require_char(char)
    if char == "\0":
        return len(text)
    return text.find(char)


def strrchr(text: str, char: str) -> int:
    """Index of the last ``char`` in ``text``, or -1.

    The NUL character is found at ``len(text)``.
    """
    _require_char(char)
    if char == "\0":
        return len(text)
    return text.rfind(char)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, char) for index, char in enumerate(text))