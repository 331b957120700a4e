import pytest

from raycube.colors import COLOR_TABLE, lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("red", 0xFF0000),
        ("snow", 0xFFFAFA),
        ("ghost white", 0xF8F8FF),
        ("black", 0x0),
        ("none", -1),
    ],
)
def test_table_values(name, expected):
    assert lookup_color(name) == expected


def test_lookup_is_case_insensitive():
    assert lookup_color("RED") == lookup_color("red")
    assert lookup_color("Ghost White") == lookup_color("ghost white")


def test_duplicate_names_take_first_entry():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_every_name_resolves_to_its_first_entry():
    seen = {}
    for name, color in COLOR_TABLE:
        seen.setdefault(name.lower(), color)
    for name, color in seen.items():
        assert lookup_color(name) == color
        assert lookup_color(name.upper()) == color


def test_two_word_name_is_joined_with_space():
    assert lookup_color("ghost", "white") == lookup_color("ghost white")
    assert lookup_color("dark", "slate") == lookup_color("dark slate")


def test_unknown_name_gives_zero():
    assert lookup_color("not-a-colour") == 0
    assert lookup_color("red", "herring") == 0


def test_hex_spec_is_parsed():
    assert lookup_color("#1a2b3c") == 0x1A2B3C
    assert lookup_color("#FF00ff") == 0xFF00FF


def test_hex_spec_ignores_end_and_trailing_text():
    assert lookup_color("#abc", "red") == 0xABC
    assert lookup_color("#12zz") == 0x12


def test_hex_spec_without_digits_is_zero():
    assert lookup_color("#") == 0
    assert lookup_color("#xyz") == 0


def test_hex_spec_wraps_to_signed_32_bits():
    assert lookup_color("#ffffffff") == lookup_color("none")


def test_gray_and_grey_agree():
    for level in range(101):
        assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_overlong_joined_name_is_truncated_and_unknown():
    long_first = "white" * 20
    assert lookup_color(long_first, "smoke") == 0