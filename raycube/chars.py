"""Character classification and case mapping on ASCII character codes."""

from __future__ import annotations

_UPPER_A = ord("A")
_UPPER_Z = ord("Z")
_LOWER_A = ord("a")
_LOWER_Z = ord("z")
_DIGIT_0 = ord("0")
_DIGIT_9 = ord("9")
_CASE_OFFSET = _LOWER_A - _UPPER_A


def isalpha(code: int) -> bool:
    """True for the codes of ASCII letters."""
    return _UPPER_A <= code <= _UPPER_Z or _LOWER_A <= code <= _LOWER_Z


def isdigit(code: int) -> bool:
    """True for the codes of ASCII decimal digits."""
    return _DIGIT_0 <= code <= _DIGIT_9


def isalnum(code: int) -> bool:
    """True for the codes of ASCII letters and digits."""
    return isdigit(code) or isalpha(code)


def isascii(code: int) -> bool:
    """True for codes 0 to 127."""
    return 0 <= code <= 127


def isprint(code: int) -> bool:
    """True for printable ASCII codes, space to tilde."""
    return 32 <= code <= 126


def toupper(code: int) -> int:
    """Map a lower-case ASCII letter code to upper case; other codes pass through."""
    return code - _CASE_OFFSET if _LOWER_A <= code <= _LOWER_Z else code


def tolower(code: int) -> int:
    """Map an upper-case ASCII letter code to lower case; other codes pass through."""
    return code + _CASE_OFFSET if _UPPER_A <= code <= _UPPER_Z else code