"""Tests for the virtual terminal screen renderer."""

import pytest

import ansi_raster as ansi
from ansi_raster.codec.ansi_parser import parse
from ansi_raster.codec.screen import ScreenRenderer, render_sequence
from ansi_raster.core.cell import DEFAULT_CELL, Blink, Cell
from ansi_raster.core.errors import (
    CursorStackUnderflowError,
    GridLimitError,
    RenderError,
    UnhandledClearError,
    UnhandledOperationError,
    UnhandledRenditionError,
)
from ansi_raster.core.operation import (
    Character,
    Clear,
    ClearKind,
    CursorBackward,
    CursorDown,
    CursorForward,
    CursorUp,
    MoveCursorTo,
    RestoreCursorPosition,
    SaveCursorPosition,
    SelectGraphicsRendition,
)


def glyphs(grid: ansi.CharacterGrid) -> list[str]:
    """Rows of the grid as strings, unwritten cells shown as '.'."""
    return [
        ''.join(chr(cell.glyph) if cell.glyph else '.' for cell in row)
        for row in grid.rows()
    ]


class TestDefaults:
    def test_initial_state(self) -> None:
        screen = ScreenRenderer()
        assert screen.width == 80
        assert (screen.cursor_row, screen.cursor_col) == (1, 1)
        assert screen.foreground == 7
        assert screen.background == 0
        assert screen.bold_offset == 0
        assert screen.blink is Blink.NONE
        assert screen.saved_cursors == []
        assert screen.rows == []

    def test_empty_sequence(self) -> None:
        grid = render_sequence([])
        assert grid.width == 0
        assert grid.height == 0
        assert grid.is_empty

    def test_invalid_width(self) -> None:
        with pytest.raises(ValueError):
            ScreenRenderer(width=0)


class TestCharacters:
    def test_plain_text_scenario(self) -> None:
        grid = ansi.decode(b"AB\n C")
        assert grid.height == 2
        assert grid.width == 2
        assert grid.get(0, 0).glyph == ord("A")
        assert grid.get(1, 0).glyph == ord("B")
        assert grid.get(0, 1).glyph == 32
        assert grid.get(1, 1).glyph == ord("C")

    def test_default_attributes(self) -> None:
        cell = ansi.decode(b"A").get(0, 0)
        assert cell == Cell(glyph=65, foreground=7, background=0, blink=Blink.NONE)

    def test_carriage_return_ignored(self) -> None:
        grid = ansi.decode(b"AB\rC")
        assert glyphs(grid) == ["ABC"]

    def test_crlf(self) -> None:
        assert glyphs(ansi.decode(b"AB\r\nCD")) == ["AB", "CD"]

    def test_rows_padded_to_widest(self) -> None:
        grid = ansi.decode(b"ABCD\nE\n\nFG")
        assert grid.width == 4
        assert grid.height == 4
        assert glyphs(grid) == ["ABCD", "E...", "....", "FG.."]
        assert grid.get(3, 1) == DEFAULT_CELL

    def test_sparse_write(self) -> None:
        grid = ansi.decode(b"\x1b[3;5HX")
        assert grid.height == 3
        assert grid.width == 5
        assert glyphs(grid) == [".....", ".....", "....X"]
        assert grid.get(4, 2).glyph == ord("X")
        assert grid.get(0, 0) == DEFAULT_CELL

    def test_overwrite(self) -> None:
        grid = ansi.decode(b"ABC\x1b[1;2HX")
        assert glyphs(grid) == ["AXC"]

    def test_negative_cursor_clamped_at_write(self) -> None:
        screen = ScreenRenderer()
        grid = screen.render([CursorUp(5), CursorBackward(3), Character(65)])
        assert glyphs(grid) == ["A"]
        # The cursor itself is not corrected
        assert screen.cursor_row == -4
        assert screen.cursor_col == -1


class TestWrap:
    def test_81st_character_wraps(self) -> None:
        grid = ansi.decode(b"x" * 80 + b"Y")
        assert grid.height == 2
        assert grid.get(0, 1).glyph == ord("Y")
        assert grid.get(79, 0).glyph == ord("x")

    def test_custom_width(self) -> None:
        grid = render_sequence(parse(b"ABCDE"), width=2)
        assert glyphs(grid) == ["AB", "CD", "E."]

    def test_large_forward_motion(self) -> None:
        screen = ScreenRenderer(width=80)
        screen.apply(CursorForward(200))
        # Column 201 wraps twice to column 41
        assert (screen.cursor_row, screen.cursor_col) == (3, 41)

    def test_exact_multiple(self) -> None:
        screen = ScreenRenderer(width=80)
        screen.apply(MoveCursorTo(1, 160))
        assert (screen.cursor_row, screen.cursor_col) == (2, 80)

    def test_huge_motion_is_cheap(self) -> None:
        screen = ScreenRenderer(width=80)
        screen.apply(CursorForward(10**15))
        assert 1 <= screen.cursor_col <= 80


class TestCursorMotion:
    def test_relative_motion(self) -> None:
        screen = ScreenRenderer()
        for op in (CursorDown(4), CursorForward(9), CursorUp(1), CursorBackward(2)):
            screen.apply(op)
        assert (screen.cursor_row, screen.cursor_col) == (4, 8)

    def test_line_feed_resets_column(self) -> None:
        screen = ScreenRenderer()
        screen.render([CursorForward(10), Character(10)])
        assert (screen.cursor_row, screen.cursor_col) == (2, 1)

    def test_save_restore(self) -> None:
        screen = ScreenRenderer()
        screen.render([
            MoveCursorTo(5, 7),
            SaveCursorPosition(),
            CursorDown(3),
            CursorForward(20),
            RestoreCursorPosition(),
        ])
        assert (screen.cursor_row, screen.cursor_col) == (5, 7)

    def test_nested_save_restore(self) -> None:
        screen = ScreenRenderer()
        screen.render([
            MoveCursorTo(2, 2),
            SaveCursorPosition(),
            MoveCursorTo(3, 3),
            SaveCursorPosition(),
            MoveCursorTo(9, 9),
            RestoreCursorPosition(),
        ])
        assert (screen.cursor_row, screen.cursor_col) == (3, 3)
        screen.apply(RestoreCursorPosition())
        assert (screen.cursor_row, screen.cursor_col) == (2, 2)

    def test_restore_without_save(self) -> None:
        with pytest.raises(CursorStackUnderflowError):
            render_sequence([RestoreCursorPosition()])


class TestClear:
    def test_clear_screen_discards_rows_keeps_cursor(self) -> None:
        screen = ScreenRenderer()
        screen.render([Character(65), Character(10), Character(66)])
        before = (screen.cursor_row, screen.cursor_col)
        screen.apply(Clear(ClearKind.SCREEN))
        assert screen.rows == []
        assert (screen.cursor_row, screen.cursor_col) == before

    def test_writes_after_clear(self) -> None:
        grid = ansi.decode(b"AAA\nBBB\x1b[2JC")
        # Only the new write survives, still on row 2 column 4
        assert grid.height == 2
        assert grid.width == 4
        assert all(cell.glyph in (0, ord("C")) for _, _, cell in grid.cells_with_position())
        assert grid.get(3, 1).glyph == ord("C")

    @pytest.mark.parametrize("kind", [
        ClearKind.TO_END_OF_SCREEN,
        ClearKind.TO_BEGINNING_OF_SCREEN,
        ClearKind.SCREEN_AND_SCROLLBACK,
        7,
    ])
    def test_other_kinds_unhandled(self, kind: int) -> None:
        with pytest.raises(UnhandledClearError) as excinfo:
            render_sequence([Clear(kind)])
        assert excinfo.value.kind == kind


class TestGraphicsRendition:
    def test_color_scenario(self) -> None:
        cell = ansi.decode(b"\x1b[31mA").get(0, 0)
        assert cell.glyph == 65
        assert cell.foreground == 1
        assert cell.background == 0
        assert cell.blink is Blink.NONE

    def test_bold_adds_offset(self) -> None:
        cell = ansi.decode(b"\x1b[1;34mA").get(0, 0)
        assert cell.foreground == 12

    def test_bold_persists_across_color_change(self) -> None:
        grid = ansi.decode(b"\x1b[1;31mA\x1b[32mB")
        assert grid.get(0, 0).foreground == 9
        assert grid.get(1, 0).foreground == 10

    def test_background(self) -> None:
        cell = ansi.decode(b"\x1b[1;44mA").get(0, 0)
        assert cell.background == 4

    def test_default_foreground_clears_bold(self) -> None:
        cell = ansi.decode(b"\x1b[1;33;44m\x1b[39mA").get(0, 0)
        assert cell.foreground == 7
        assert cell.background == 4

    def test_reset(self) -> None:
        cell = ansi.decode(b"\x1b[1;5;31;42m\x1b[0mA").get(0, 0)
        assert cell == Cell(glyph=65)

    def test_empty_sgr_resets(self) -> None:
        cell = ansi.decode(b"\x1b[35;1m\x1b[mA").get(0, 0)
        assert cell.foreground == 7

    def test_blink(self) -> None:
        grid = ansi.decode(b"\x1b[5mA\x1b[6mB")
        assert grid.get(0, 0).blink is Blink.SLOW
        assert grid.get(1, 0).blink is Blink.FAST

    def test_attributes_persist_across_lines(self) -> None:
        grid = ansi.decode(b"\x1b[36;41mA\nB")
        assert grid.get(0, 1).foreground == 6
        assert grid.get(0, 1).background == 1

    @pytest.mark.parametrize("code", [2, 22, 38, 49, 90, 107])
    def test_unhandled_codes(self, code: int) -> None:
        with pytest.raises(UnhandledRenditionError) as excinfo:
            render_sequence([SelectGraphicsRendition(code)])
        assert excinfo.value.code == code


class TestLimitsAndErrors:
    def test_grid_limit(self) -> None:
        screen = ScreenRenderer(max_rows=10)
        with pytest.raises(GridLimitError) as excinfo:
            screen.render([CursorDown(10), Character(65)])
        assert excinfo.value.row == 11

    def test_grid_limit_disabled(self) -> None:
        grid = ScreenRenderer(max_rows=None).render([CursorDown(20), Character(65)])
        assert grid.height == 21

    def test_unknown_operation(self) -> None:
        with pytest.raises(UnhandledOperationError):
            render_sequence(["not an operation"])  # type: ignore[list-item]

    def test_render_errors_are_value_errors(self) -> None:
        with pytest.raises(RenderError):
            render_sequence([SelectGraphicsRendition(99)])
        with pytest.raises(ValueError):
            render_sequence([SelectGraphicsRendition(99)])


class TestDeterminism:
    DATA = (
        b"\x1b[2J\x1b[1;1H\x1b[1;33;44mTitle\x1b[0m\n"
        b"\x1b[s\x1b[10C\x1b[5mX\x1b[u\x1b[32mY\x1b[3B\x1b[1;37mZ"
    )

    def test_replay_is_identical(self) -> None:
        operations = parse(self.DATA)
        assert render_sequence(operations) == render_sequence(operations)

    def test_renderer_reuse(self) -> None:
        screen = ScreenRenderer()
        first = screen.render(parse(self.DATA))
        screen.render(parse(b"garbage\n\n\n"))
        assert screen.render(parse(self.DATA)) == first
