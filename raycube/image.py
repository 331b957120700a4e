"""Off-screen images with 32-bit pixels and colour conversion for shallow visuals."""

from __future__ import annotations

BITS_PER_PIXEL = 32
# Extra columns reserved per row when the pixel store is allocated.
_PAD_COLUMNS = 32
_BYTES_PER_PIXEL = BITS_PER_PIXEL // 8


class Image:
    """A ZPixmap image whose pixels are 32-bit little-endian words.

    ``data`` is the raw pixel store; a pixel lives at
    ``y * size_line + x * (bpp // 8)``.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"invalid image size {width}x{height}")
        self.width = width
        self.height = height
        self.bpp = BITS_PER_PIXEL
        self.size_line = width * _BYTES_PER_PIXEL
        self.endian = 0
        self.data = bytearray((width + _PAD_COLUMNS) * height * _BYTES_PER_PIXEL)

    def __repr__(self) -> str:
        return f"Image({self.width}, {self.height})"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self.width}x{self.height} image"
            )
        return y * self.size_line + x * (self.bpp // 8)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` as an unsigned 32-bit word at ``(x, y)``."""
        offset = self._offset(x, y)
        self.data[offset:offset + 4] = (color & 0xFFFFFFFF).to_bytes(4, "little")

    def get_pixel(self, x: int, y: int) -> int:
        """Read the pixel at ``(x, y)`` as a signed 32-bit integer."""
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + 4], "little", signed=True)

    def fill(self, color: int) -> None:
        """Set every visible pixel to ``color``."""
        row = (color & 0xFFFFFFFF).to_bytes(4, "little") * self.width
        for y in range(self.height):
            start = y * self.size_line
            self.data[start:start + len(row)] = row


def _mask_shift(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"colour mask must be a positive bit field, got {mask:#x}")
    shift = (mask & -mask).bit_length() - 1
    run = mask >> shift
    bits = (~run & (run + 1)).bit_length() - 1
    return shift, bits


def mask_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Return ``(red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits)``."""
    result: list[int] = []
    for mask in (red_mask, green_mask, blue_mask):
        result.extend(_mask_shift(mask))
    return tuple(result)


def convert_color(color: int, depth: int, shifts: tuple[int, ...]) -> int:
    """Convert ``0xRRGGBB`` to a pixel value for a visual of ``depth`` bits.

    Visuals of 24 bits or more take the colour unchanged; shallower ones pack
    the channels using ``shifts`` as returned by :func:`mask_shifts`.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - shifts[1])) << shifts[0])
        + ((green >> (16 - shifts[3])) << shifts[2])
        + ((blue >> (16 - shifts[5])) << shifts[4])
    )