"""Tests for loading ANSI art documents."""

from pathlib import Path

import pytest

import ansi_raster as ansi
from ansi_raster.config import Settings
from ansi_raster.core.errors import (
    GridLimitError,
    InputTooLargeError,
    OperationLimitError,
    ParseError,
)

from conftest import build_sauce


class TestLoadBytes:
    """Tests that work without external files."""

    def test_plain(self) -> None:
        doc = ansi.load_bytes(b"\x1b[36mHello\n\x1b[33mWorld")
        assert doc.height == 2
        assert doc.width == 5
        assert doc.grid.get(0, 0).foreground == 6
        assert doc.grid.get(0, 1).foreground == 3
        assert doc.sauce is None
        assert doc.title == "Untitled"
        assert doc.author == ""

    def test_operations_kept(self) -> None:
        doc = ansi.load_bytes(b"\x1b[1mA")
        assert len(doc.operations) == 2

    def test_sauce_metadata(self) -> None:
        doc = ansi.load_bytes(b"AB" + build_sauce(title="Demo", author="Someone", comments=("hi",)))
        assert doc.title == "Demo"
        assert doc.author == "Someone"
        assert doc.sauce.comments == ["hi"]
        assert doc.render_to_text() == "AB"

    def test_sauce_width_used(self) -> None:
        doc = ansi.load_bytes(b"x" * 50 + build_sauce(width=40))
        assert doc.width == 40
        assert doc.height == 2

    def test_explicit_width_wins(self) -> None:
        doc = ansi.load_bytes(b"x" * 50 + build_sauce(width=40), width=100)
        assert doc.height == 1

    def test_settings_width(self) -> None:
        doc = ansi.load_bytes(b"x" * 50, settings=Settings(width=25))
        assert doc.height == 2

    def test_non_character_sauce_width_ignored(self) -> None:
        doc = ansi.load_bytes(b"x" * 50 + build_sauce(width=40, data_type=2))
        assert doc.height == 1

    def test_limits(self) -> None:
        with pytest.raises(OperationLimitError):
            ansi.load_bytes(b"ABCDEF", settings=Settings(max_operations=3))
        with pytest.raises(GridLimitError):
            ansi.load_bytes(b"\x1b[50BX", settings=Settings(max_rows=20))
        with pytest.raises(InputTooLargeError):
            ansi.load_bytes(b"ABCDEF", settings=Settings(max_input_bytes=3))

    def test_parse_error_propagates(self) -> None:
        with pytest.raises(ParseError):
            ansi.load_bytes(b"AB\x1b[")


class TestLoadFile:
    def test_load(self, tmp_path: Path) -> None:
        path = tmp_path / "demo.ans"
        path.write_bytes(b"\x1b[1;37mHI")
        doc = ansi.load(path)
        assert doc.source_path == path
        assert doc.title == "demo"
        assert doc.grid.get(1, 0).foreground == 15

    def test_document_load(self, tmp_path: Path) -> None:
        path = tmp_path / "demo.ans"
        path.write_bytes(b"abc")
        assert ansi.AnsiDocument.load(path).render_to_text() == "abc"

    def test_size_checked_before_reading(self, tmp_path: Path) -> None:
        path = tmp_path / "big.ans"
        path.write_bytes(b"x" * 100)
        with pytest.raises(InputTooLargeError):
            ansi.load(path, settings=Settings(max_input_bytes=10))

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            ansi.load(tmp_path / "missing.ans")


@pytest.mark.external
class TestExternalFiles:
    """Tests that require external .ans files."""

    def test_load_single_file(self, single_ans_file: Path) -> None:
        doc = ansi.load(single_ans_file)
        assert doc.height > 0
        assert doc.width > 0

    def test_render_to_text(self, single_ans_file: Path) -> None:
        text = ansi.load(single_ans_file).render_to_text()
        assert isinstance(text, str)
        assert '\x1b[' not in text

    @pytest.mark.slow
    def test_load_all(self, ans_file: Path) -> None:
        doc = ansi.load(ans_file)
        assert doc.grid.height == len(list(doc.grid.rows()))


class TestParseBytes:
    def test_sauce_split_off(self) -> None:
        from ansi_raster.io.reader import parse_bytes

        operations, sauce = parse_bytes(b"AB" + build_sauce(title="Demo"))
        assert len(operations) == 2
        assert sauce.title == "Demo"

    def test_limits(self) -> None:
        from ansi_raster.io.reader import parse_bytes

        with pytest.raises(OperationLimitError):
            parse_bytes(b"ABCD", Settings(max_operations=2))
