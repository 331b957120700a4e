import io

import pytest

from raycube.printf import printf, render


def test_plain_text_passes_through():
    assert render("hello world") == "hello world"


def test_percent_literal():
    assert render("%%") == "%"


@pytest.mark.parametrize("number", [0, 7, -7, 12345, -99999, 2147483647])
def test_decimal_round_trip(number):
    assert int(render("%d", number)) == number
    assert render("%i", number) == render("%d", number)


def test_int_min():
    assert render("%d", -2147483648) == "-2147483648"


def test_decimal_wraps_to_32_bits():
    assert render("%d", 2 ** 31) == render("%d", -(2 ** 31))


@pytest.mark.parametrize("number", [0, 1, 42, 2 ** 31, 2 ** 32 - 1])
def test_unsigned_round_trip(number):
    assert int(render("%u", number)) == number


def test_unsigned_of_negative():
    assert int(render("%u", -1)) == 2 ** 32 - 1


@pytest.mark.parametrize("number", [0, 9, 10, 255, 0xDEADBEEF, -1])
def test_hex_round_trip(number):
    text = render("%x", number)
    assert text == text.lower()
    assert int(text, 16) == number & 0xFFFFFFFF
    assert render("%X", number) == text.upper()


def test_pointer_null():
    assert render("%p", 0) == "(nil)"
    assert render("%p", None) == "(nil)"


@pytest.mark.parametrize("address", [1, 255, 0x7FFE12345678])
def test_pointer_round_trip(address):
    text = render("%p", address)
    assert text.startswith("0x")
    assert int(text[2:], 16) == address


def test_string_and_null_string():
    assert render("[%s]", "abc") == "[abc]"
    assert render("%s", None) == "(null)"


def test_char_from_str_and_code():
    assert render("%c", "z") == "z"
    assert render("%c", 65) == chr(65)


def test_char_rejects_long_string():
    with pytest.raises(ValueError):
        render("%c", "ab")


def test_unknown_specifier_prints_zero_without_consuming():
    assert render("%q%d", 5) == "05"


def test_trailing_percent():
    assert render("ab%") == "ab0"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        render("%d %d", 1)


def test_printf_writes_and_counts():
    out = io.StringIO()
    count = printf("%s=%d", "x", 3, file=out)
    assert out.getvalue() == render("%s=%d", "x", 3)
    assert count == len(out.getvalue())


def test_printf_default_stdout(capsys):
    count = printf("%x|%p", 255, 0)
    captured = capsys.readouterr().out
    assert captured == render("%x|%p", 255, 0)
    assert count == len(captured)