import io

import pytest

from raycube.output import put_char, put_endl, put_nbr, put_str


def test_put_char():
    out = io.StringIO()
    put_char("x", out)
    assert out.getvalue() == "x"


def test_put_char_rejects_strings():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_char_sequence_builds_string():
    out = io.StringIO()
    text = "there is a tring here"
    for char in text:
        put_char(char, out)
    assert out.getvalue() == text


def test_put_str():
    out = io.StringIO()
    put_str("there is a tring here", out)
    assert out.getvalue() == "there is a tring here"


def test_put_endl_appends_newline():
    out = io.StringIO()
    put_endl("abc", out)
    assert out.getvalue() == "abc" + "\n"


def test_put_nbr():
    out = io.StringIO()
    put_nbr(745, out)
    assert out.getvalue() == "745"


def test_put_nbr_int_min():
    out = io.StringIO()
    put_nbr(-2147483648, out)
    assert out.getvalue() == "-2147483648"


@pytest.mark.parametrize("number", [0, 7, -3, 2147483647, -2147483648])
def test_put_nbr_round_trip(number):
    out = io.StringIO()
    put_nbr(number, out)
    assert int(out.getvalue()) == number


def test_put_nbr_rejects_non_integers():
    with pytest.raises(ValueError):
        put_nbr(1.5, io.StringIO())


def test_default_stream_is_stdout(capsys):
    put_str("hi")
    put_endl("")
    assert capsys.readouterr().out == "hi\n"