"""Tests for content loading and line splitting."""

from pathlib import Path

import pytest

from termview.content import ContentBuffer, load_content, split_lines


@pytest.mark.parametrize(
    "text,expected",
    [
        ("", ()),
        ("hello", ("hello",)),
        ("hello\nworld", ("hello", "world")),
        ("hello\nworld\n", ("hello", "world")),
        ("a\r\nb\r\n", ("a", "b")),
        ("a\n\nb", ("a", "", "b")),
        ("\n", ("",)),
        ("  indented\t", ("  indented\t",)),
    ],
)
def test_split_lines(text, expected):
    """Lines split on newline with CRLF and final newline handled."""
    assert split_lines(text) == expected


def test_row_count_matches_line_breaks_plus_one():
    """Content without a trailing newline has one line per break plus one."""
    text = "one\ntwo\nthree\nfour"
    assert len(ContentBuffer.from_text(text)) == text.count("\n") + 1


class TestContentBuffer:
    """Tests for the immutable ContentBuffer."""

    def test_empty_by_default(self):
        buffer = ContentBuffer()
        assert len(buffer) == 0
        assert list(buffer) == []
        assert not buffer

    def test_iterates_in_order(self):
        buffer = ContentBuffer.from_text("hello\nworld")
        assert list(buffer) == ["hello", "world"]
        assert buffer

    def test_is_frozen(self):
        """ContentBuffer cannot be reassigned after creation."""
        buffer = ContentBuffer.from_text("x")
        with pytest.raises(AttributeError):
            buffer.lines = ("y",)

    def test_markup_kept_verbatim(self):
        """Markup-looking text is not interpreted."""
        buffer = ContentBuffer.from_text("<html>[bold]hi[/bold]</html>")
        assert list(buffer) == ["<html>[bold]hi[/bold]</html>"]


class TestLoadContent:
    """Tests for load_content silent fallback behavior."""

    def test_loads_file(self, tmp_path: Path):
        path = tmp_path / "page.html"
        path.write_text("hello\nworld", encoding="utf-8")

        buffer = load_content(path)

        assert list(buffer) == ["hello", "world"]

    def test_no_path_gives_empty_buffer(self):
        assert len(load_content(None)) == 0

    def test_missing_file_gives_empty_buffer(self, tmp_path: Path):
        assert len(load_content(tmp_path / "missing.txt")) == 0

    def test_directory_gives_empty_buffer(self, tmp_path: Path):
        assert len(load_content(tmp_path)) == 0

    def test_invalid_utf8_gives_empty_buffer(self, tmp_path: Path):
        path = tmp_path / "binary.bin"
        path.write_bytes(b"\xff\xfe\x00bad")

        assert len(load_content(path)) == 0

    def test_empty_file_gives_empty_buffer(self, tmp_path: Path):
        path = tmp_path / "empty.txt"
        path.write_text("", encoding="utf-8")

        assert len(load_content(path)) == 0

    def test_lone_carriage_return_is_not_a_line_break(self, tmp_path: Path):
        path = tmp_path / "cr.txt"
        path.write_bytes(b"a\rb\r\nc\n")

        buffer = load_content(path)

        assert len(buffer) == 2
        assert list(buffer) == ["a\rb", "c"]
