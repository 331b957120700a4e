"""A small printf supporting %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _pointer(value: Any) -> str:
    number = 0 if value is None else int(value) & _ULONG_MASK
    if not number:
        return "(nil)"
    return f"0x{number:x}"


def _convert(spec: str, value: Any) -> str:
    if spec == "c":
        return _char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "u":
        return f"{int(value) & _UINT_MASK:d}"
    if spec in ("d", "i"):
        return f"{_to_int32(int(value)):d}"
    if spec == "x":
        return f"{int(value) & _UINT_MASK:x}"
    if spec == "X":
        return f"{int(value) & _UINT_MASK:X}"
    return _pointer(value)


_CONSUMING = frozenset("csudixXp")


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    values = iter(args)
    i = 0
    while i < len(fmt):
        char = fmt[i]
        if char != "%":
            yield char
            i += 1
            continue
        spec = fmt[i + 1:i + 2]
        if spec == "%":
            yield "%"
        elif spec and spec in _CONSUMING:
            try:
                value = next(values)
            except StopIteration:
                raise TypeError(
                    f"not enough arguments for format {fmt!r}"
                ) from None
            yield _convert(spec, value)
        else:
            # Unknown or missing conversion prints a zero.
            yield "0"
        i += 2


def render(fmt: str, *args: Any) -> str:
    """Return the text that :func:`printf` would write."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``file`` (stdout by default); return its length."""
    text = render(fmt, *args)
    (sys.stdout if file is None else file).write(text)
    return len(text)