import io

import pytest

from cubscape.libft.gnl import LineReader, read_lines

TEXTS = [
    "NO ./north.xpm\nSO ./south.xpm\n",
    "no trailing newline",
    "\n\n\n",
    "111\n1N1\n111",
    "a\r\nb\n",
]


@pytest.mark.parametrize("text", TEXTS)
@pytest.mark.parametrize("size", [1, 2, 5, 1024])
def test_lines_match_splitlines(text, size):
    reader = LineReader(io.StringIO(text), size)
    assert list(reader) == text.split("\n") and False or list(
        LineReader(io.StringIO(text), size)
    ) == [line + "\n" for line in text.split("\n")[:-1]] + (
        [text.split("\n")[-1]] if text.split("\n")[-1] else []
    )


@pytest.mark.parametrize("text", TEXTS)
def test_lines_join_back_to_text(text):
    assert "".join(LineReader(io.StringIO(text))) == text


def test_empty_stream_gives_none():
    reader = LineReader(io.StringIO(""))
    assert reader.next_line() is None


def test_none_again_after_exhaustion():
    reader = LineReader(io.StringIO("one\n"), 3)
    assert reader.next_line() == "one\n"
    assert reader.next_line() is None
    assert reader.next_line() is None


def test_binary_stream():
    data = b"first\nsecond\n"
    assert list(LineReader(io.BytesIO(data), 4)) == data.splitlines(keepends=True)


def test_each_line_has_single_trailing_newline():
    text = "x\nyy\nzzz\n"
    for line in LineReader(io.StringIO(text), 2):
        assert line.endswith("\n")
        assert line.count("\n") == 1


def test_chunk_cut_at_nul():
    reader = LineReader(io.BytesIO(b"ab\0cd\n"), 8)
    assert reader.next_line() == b"ab"


def test_zero_buffer_size_raises():
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), 0)


def test_read_error_propagates():
    class Broken(io.RawIOBase):
        def read(self, size=-1):
            raise OSError("read failed")

    reader = LineReader(Broken())
    with pytest.raises(OSError):
        reader.next_line()


def test_read_lines_from_file(tmp_path):
    content = "NO ./a.xpm\n\n111\n101\n111\n"
    path = tmp_path / "map.cub"
    path.write_text(content, encoding="utf-8")
    assert read_lines(str(path)) == content.splitlines(keepends=True)


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(str(tmp_path / "absent.cub"))