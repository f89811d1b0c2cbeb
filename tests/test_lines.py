import io

import pytest

from wireframe.lines import LineReader, iter_lines

SAMPLE = "0 0 1\n2 3,0xFF0000 4\n\nlast line without newline"


@pytest.mark.parametrize("buffer_size", [1, 2, 5, 42, 1000])
def test_lines_rejoin_to_input(buffer_size):
    lines = list(iter_lines(io.StringIO(SAMPLE), buffer_size))
    assert "".join(lines) == SAMPLE
    assert all(line.endswith("\n") for line in lines[:-1])
    assert all(line.count("\n") <= 1 for line in lines)


def test_line_contents():
    lines = list(iter_lines(io.StringIO(SAMPLE), 3))
    assert lines == [
        "0 0 1\n",
        "2 3,0xFF0000 4\n",
        "\n",
        "last line without newline",
    ]


@pytest.mark.parametrize("buffer_size", [1, 4, 42])
def test_binary_stream(buffer_size):
    data = SAMPLE.encode()
    lines = list(iter_lines(io.BytesIO(data), buffer_size))
    assert b"".join(lines) == data
    assert lines[0] == b"0 0 1\n"


def test_read_line_returns_none_at_end_and_stays_none():
    reader = LineReader(io.StringIO("a\nb\n"))
    assert reader.read_line() == "a\n"
    assert reader.read_line() == "b\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_stream():
    assert LineReader(io.StringIO("")).read_line() is None
    assert list(iter_lines(io.BytesIO(b""))) == []


def test_trailing_newline_gives_no_empty_last_line():
    lines = list(iter_lines(io.StringIO("x\ny\n"), 1))
    assert lines == ["x\n", "y\n"]


@pytest.mark.parametrize("buffer_size", [0, -1])
def test_bad_buffer_size(buffer_size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a"), buffer_size)


def test_reader_is_iterable():
    reader = LineReader(io.StringIO("1\n2\n3"), 2)
    assert list(reader) == ["1\n", "2\n", "3"]


def test_read_errors_propagate():
    class Broken:
        def read(self, size):
            raise OSError("read failed")

    with pytest.raises(OSError):
        LineReader(Broken()).read_line()