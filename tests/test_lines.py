import io

import pytest

from raycube.lines import LineReader, read_lines


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 21, 100])
def test_lines_keep_newlines(buffer_size):
    text = "first\nsecond line\n\nlast"
    lines = read_lines(io.StringIO(text), buffer_size)
    assert lines == ["first\n", "second line\n", "\n", "last"]


@pytest.mark.parametrize("buffer_size", [1, 4, 21])
def test_join_round_trip(buffer_size):
    text = "a" * 50 + "\n" + "b" * 3 + "\n"
    assert "".join(read_lines(io.StringIO(text), buffer_size)) == text


def test_empty_stream_has_no_lines():
    assert read_lines(io.StringIO("")) == []


def test_next_line_after_end_stays_none():
    reader = LineReader(io.StringIO("only\n"), 3)
    assert reader.next_line() == "only\n"
    assert reader.next_line() is None
    assert reader.next_line() is None


def test_binary_stream():
    lines = read_lines(io.BytesIO(b"xy\nz"), 2)
    assert lines == [b"xy\n", b"z"]


def test_iteration_matches_next_line():
    reader = LineReader(io.StringIO("1\n2\n3\n"))
    assert list(reader) == ["1\n", "2\n", "3\n"]


@pytest.mark.parametrize("buffer_size", [0, -5])
def test_invalid_buffer_size(buffer_size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), buffer_size)


def test_read_error_propagates():
    class Broken(io.StringIO):
        def read(self, size=-1):
            raise OSError("read failed")

    reader = LineReader(Broken())
    with pytest.raises(OSError):
        reader.next_line()