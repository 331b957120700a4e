import pytest

from raycube.image import Image, convert_color, mask_shifts


def test_put_and_get_round_trip():
    img = Image(4, 3)
    img.put_pixel(2, 1, 0x123456)
    assert img.get_pixel(2, 1) == 0x123456
    assert img.get_pixel(1, 2) == 0


def test_new_image_is_black():
    img = Image(5, 5)
    assert all(img.get_pixel(x, y) == 0 for x in range(5) for y in range(5))


def test_get_pixel_is_signed():
    img = Image(1, 1)
    img.put_pixel(0, 0, 0xFFFFFFFF)
    assert img.get_pixel(0, 0) == -1


def test_pixel_layout_little_endian():
    img = Image(2, 2)
    img.put_pixel(1, 1, 0x00AABBCC)
    offset = img.size_line + 4
    assert bytes(img.data[offset:offset + 4]) == (0x00AABBCC).to_bytes(4, "little")


def test_geometry():
    img = Image(7, 3)
    assert img.bpp == 32
    assert img.size_line == img.width * (img.bpp // 8)
    assert len(img.data) >= img.size_line * img.height


def test_fill_sets_every_pixel():
    img = Image(3, 4)
    img.fill(0xABCDEF)
    assert {img.get_pixel(x, y) for x in range(3) for y in range(4)} == {0xABCDEF}


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (3, 0), (0, 2)])
def test_out_of_range_raises(x, y):
    img = Image(3, 2)
    with pytest.raises(IndexError):
        img.put_pixel(x, y, 1)
    with pytest.raises(IndexError):
        img.get_pixel(x, y)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Image(-1, 4)


def test_deep_visual_keeps_color():
    assert convert_color(0x123456, 24, (0, 0, 0, 0, 0, 0)) == 0x123456


def test_mask_shifts_rgb888():
    assert mask_shifts(0xFF0000, 0xFF00, 0xFF) == (16, 8, 8, 8, 0, 8)


@pytest.mark.parametrize("color", [0x000000, 0x102030, 0xFFFFFF, 0x7F80FE])
def test_eight_bit_channels_are_identity(color):
    shifts = mask_shifts(0xFF0000, 0xFF00, 0xFF)
    assert convert_color(color, 16, shifts) == color & 0xFFFFFF


def test_rgb565_white_fills_all_bits():
    shifts = mask_shifts(0xF800, 0x7E0, 0x1F)
    assert convert_color(0xFFFFFF, 16, shifts) == 0xF800 | 0x7E0 | 0x1F


def test_rgb565_black():
    shifts = mask_shifts(0xF800, 0x7E0, 0x1F)
    assert convert_color(0, 16, shifts) == 0


def test_empty_mask_rejected():
    with pytest.raises(ValueError):
        mask_shifts(0, 0xFF00, 0xFF)