"""Reading XPM pixmaps, from files or from in-memory string tables."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from raycube.colors import lookup_color
from raycube.image import Image

# Pixel value used for the transparent colour "None".
TRANSPARENT = 0xFF000000

_ATOI = re.compile(r"[\t\n\v\f\r ]*([+-]?\d+)")
_WORD = re.compile(r"[^ \t]+")


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


def _until_nul(text: str) -> str:
    return text.split("\0", 1)[0]


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return _WORD.findall(_until_nul(text))


def find(text: str, needle: str, length: int) -> int:
    """Position of ``needle`` in ``text``, or -1.

    The search fails at once when ``needle`` is longer than ``length``.
    """
    if not needle:
        raise ValueError("needle must not be empty")
    if len(needle) > length:
        return -1
    return _until_nul(text).find(needle)


def find_unquoted(text: str, needle: str, length: int) -> int:
    """Like :func:`find`, but skip matches inside double-quoted strings."""
    if not needle:
        raise ValueError("needle must not be empty")
    if len(needle) > length:
        return -1
    text = _until_nul(text)
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def strip_comments(text: str) -> str:
    """Blank out C comments that are not inside quotes, keeping the length."""
    size = len(text)
    chars = list(text)

    def blank(begin: int, count: int) -> None:
        for index in range(begin, min(begin + count, size)):
            chars[index] = " "

    for opener, closer, extra in (("/*", "*/", 4), ("//", "\n", 3)):
        current = "".join(chars)
        while (begin := find_unquoted(current, opener, size)) != -1:
            end = find(current[begin + 2:], closer, size - begin - 2)
            blank(begin, end + extra)
            current = "".join(chars)
    return "".join(chars)


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in ``text``."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def _color_key(line: str, cpp: int) -> int:
    chars = line[:cpp].ljust(cpp, "\0")
    key = 0
    for char in chars:
        code = ord(char) & 0xFF
        if code > 127:
            code -= 256
        key = (key << 8) + code
    key &= 0xFFFFFFFF
    return key - (1 << 32) if key & 0x80000000 else key


def _next_line(lines: Iterator[str], what: str) -> str:
    line = next(lines, None)
    if line is None:
        raise XpmError(f"missing {what}")
    return line


def _read_header(lines: Iterator[str]) -> tuple[int, int, int, int]:
    words = split_words(_next_line(lines, "header line"))
    if len(words) < 4:
        raise XpmError("header needs width, height, colours and chars per pixel")
    values = tuple(_atoi(word) for word in words[:4])
    if not all(values):
        raise XpmError(f"invalid header values {values}")
    return values  # type: ignore[return-value]


def _read_colors(lines: Iterator[str], count: int, cpp: int) -> dict[int, int]:
    # One or two chars per pixel: a later definition replaces an earlier one.
    # Longer keys: the first definition of a key is the one used.
    last_wins = cpp <= 2
    palette: dict[int, int] = {}
    for _ in range(count):
        line = _next_line(lines, "colour line")
        words = split_words(line[cpp:])
        try:
            value_at = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour line without 'c' key: {line!r}") from None
        if value_at >= len(words):
            raise XpmError(f"colour line without a colour: {line!r}")
        end: Optional[str] = words[value_at + 1] if value_at + 1 < len(words) else None
        color = lookup_color(words[value_at], end)
        key = _color_key(line, cpp)
        if last_wins or key not in palette:
            palette[key] = color
    return palette


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from XPM lines: header, colour table, then pixel rows."""
    rows = iter(lines)
    width, height, count, cpp = _read_header(rows)
    palette = _read_colors(rows, count, cpp)
    try:
        image = Image(width, height)
    except ValueError as exc:
        raise XpmError(str(exc)) from exc
    for y in range(height):
        line = _next_line(rows, "pixel row")
        for x in range(width):
            color = palette.get(_color_key(line[cpp * x:], cpp), 0)
            if color == -1:
                color = TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def xpm_to_image(xpm_data: Iterable[str]) -> Image:
    """Build an image from an in-memory XPM table.

    Each entry is read without its final character, as the table reader
    copies one character fewer than the entry holds.
    """
    return parse_xpm(entry[:-1] for entry in xpm_data)


def xpm_file_to_image(path: Union[str, Path]) -> Image:
    """Load an XPM file; comments are ignored and quoted strings read as lines."""
    text = Path(path).read_bytes().decode("latin-1")
    return parse_xpm(quoted_lines(strip_comments(text)))