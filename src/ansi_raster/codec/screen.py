"""Virtual terminal that replays Operations into a CharacterGrid."""

import logging
from typing import Iterable

from ansi_raster.core.cell import DEFAULT_CELL, Blink, Cell
from ansi_raster.core.color import BOLD_OFFSET, DEFAULT_BACKGROUND, DEFAULT_FOREGROUND
from ansi_raster.core.constants import CR, DEFAULT_MAX_ROWS, DEFAULT_WIDTH, LF
from ansi_raster.core.errors import (
    CursorStackUnderflowError,
    GridLimitError,
    UnhandledClearError,
    UnhandledOperationError,
    UnhandledRenditionError,
)
from ansi_raster.core.grid import CharacterGrid
from ansi_raster.core.operation import (
    Character,
    Clear,
    ClearKind,
    CursorBackward,
    CursorDown,
    CursorForward,
    CursorUp,
    GraphicsRendition,
    MoveCursorTo,
    Operation,
    RestoreCursorPosition,
    SaveCursorPosition,
    SelectGraphicsRendition,
)

logger = logging.getLogger(__name__)


class ScreenRenderer:
    """
    Stateful interpreter for terminal operations.

    Tracks a 1-based cursor, a stack of saved cursor positions and the
    current graphics rendition, and writes cells into rows that grow on
    demand. The cursor is never clamped; out-of-range positions are only
    clamped to the first row/column when a character is written.
    """

    def __init__(self, width: int = DEFAULT_WIDTH, max_rows: int | None = DEFAULT_MAX_ROWS):
        if width < 1:
            raise ValueError(f"screen width must be positive, got {width}")
        if max_rows is not None and max_rows < 1:
            raise ValueError(f"max_rows must be positive, got {max_rows}")
        self.width = width
        self.max_rows = max_rows
        self.reset()

    def reset(self) -> None:
        """Return to the power-on state with an empty screen."""
        self.rows: list[list[Cell]] = []
        self.cursor_row = 1
        self.cursor_col = 1
        self.saved_cursors: list[tuple[int, int]] = []
        self.foreground = int(DEFAULT_FOREGROUND)
        self.background = int(DEFAULT_BACKGROUND)
        self.bold_offset = 0
        self.blink = Blink.NONE

    def render(self, operations: Iterable[Operation]) -> CharacterGrid:
        """Replay operations on a fresh screen and return the result."""
        self.reset()
        for operation in operations:
            self.apply(operation)
        return self.snapshot()

    def apply(self, operation: Operation) -> None:
        """Apply a single operation, then wrap the cursor at the right edge."""
        if isinstance(operation, Character):
            self._character(operation.code)
        elif isinstance(operation, Clear):
            if operation.kind != ClearKind.SCREEN:
                raise UnhandledClearError(operation.kind)
            # Cursor position is left where it is
            self.rows = []
        elif isinstance(operation, CursorUp):
            self.cursor_row -= operation.n
        elif isinstance(operation, CursorDown):
            self.cursor_row += operation.n
        elif isinstance(operation, CursorForward):
            self.cursor_col += operation.n
        elif isinstance(operation, CursorBackward):
            self.cursor_col -= operation.n
        elif isinstance(operation, MoveCursorTo):
            self.cursor_row = operation.row
            self.cursor_col = operation.col
        elif isinstance(operation, SaveCursorPosition):
            self.saved_cursors.append((self.cursor_row, self.cursor_col))
        elif isinstance(operation, RestoreCursorPosition):
            if not self.saved_cursors:
                raise CursorStackUnderflowError()
            self.cursor_row, self.cursor_col = self.saved_cursors.pop()
        elif isinstance(operation, SelectGraphicsRendition):
            self._select_graphics_rendition(operation.code)
        else:
            raise UnhandledOperationError(operation)

        self._wrap()

    def snapshot(self) -> CharacterGrid:
        """Build the dense grid from the rows written so far."""
        grid = CharacterGrid.from_rows(self.rows)
        logger.debug("rendered %dx%d grid", grid.width, grid.height)
        return grid

    def _character(self, code: int) -> None:
        if code == LF:
            self.cursor_row += 1
            self.cursor_col = 1
            return
        if code == CR:
            # Line feed alone performs the newline
            return

        y = max(self.cursor_row - 1, 0)
        x = max(self.cursor_col - 1, 0)
        if self.max_rows is not None and y >= self.max_rows:
            raise GridLimitError(y + 1, self.max_rows)

        while len(self.rows) <= y:
            self.rows.append([])
        row = self.rows[y]
        if len(row) <= x:
            row.extend([DEFAULT_CELL] * (x + 1 - len(row)))
        row[x] = Cell(
            glyph=code,
            foreground=self.foreground + self.bold_offset,
            background=self.background,
            blink=self.blink,
        )
        self.cursor_col += 1

    def _select_graphics_rendition(self, code: int) -> None:
        if code == GraphicsRendition.RESET:
            self.background = int(DEFAULT_BACKGROUND)
            self.foreground = int(DEFAULT_FOREGROUND)
            self.bold_offset = 0
            self.blink = Blink.NONE
        elif code == GraphicsRendition.BOLD:
            self.bold_offset = BOLD_OFFSET
        elif code == GraphicsRendition.DEFAULT_FOREGROUND:
            # Resets bold together with the color
            self.foreground = int(DEFAULT_FOREGROUND)
            self.bold_offset = 0
        elif GraphicsRendition.FOREGROUND_0 <= code <= GraphicsRendition.FOREGROUND_7:
            self.foreground = code - GraphicsRendition.FOREGROUND_0
        elif GraphicsRendition.BACKGROUND_0 <= code <= GraphicsRendition.BACKGROUND_7:
            self.background = code - GraphicsRendition.BACKGROUND_0
        elif code == GraphicsRendition.BLINK_SLOW:
            self.blink = Blink.SLOW
        elif code == GraphicsRendition.BLINK_FAST:
            self.blink = Blink.FAST
        else:
            raise UnhandledRenditionError(code)

    def _wrap(self) -> None:
        # Same result as subtracting the width until the column fits
        if self.cursor_col > self.width:
            lines = (self.cursor_col - 1) // self.width
            self.cursor_col -= lines * self.width
            self.cursor_row += lines


def render_sequence(
    operations: Iterable[Operation],
    width: int = DEFAULT_WIDTH,
    max_rows: int | None = DEFAULT_MAX_ROWS,
) -> CharacterGrid:
    """Render operations on a fresh screen of the given width."""
    return ScreenRenderer(width=width, max_rows=max_rows).render(operations)
