"""CharacterGrid - the finished screen handed to output renderers."""

from dataclasses import dataclass
from typing import Iterator, Sequence

from ansi_raster.core.cell import DEFAULT_CELL, Cell


@dataclass(frozen=True)
class CharacterGrid:
    """
    A dense, immutable 2D grid of Cells.

    Cells are stored row-major. Every row is exactly ``width`` cells long;
    shorter rows written by the screen renderer are padded on the right
    with default cells.
    """
    width: int = 0
    height: int = 0
    cells: tuple[Cell, ...] = ()

    def __post_init__(self) -> None:
        if len(self.cells) != self.width * self.height:
            raise ValueError(
                f"grid of {self.width}x{self.height} needs "
                f"{self.width * self.height} cells, got {len(self.cells)}"
            )

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]]) -> "CharacterGrid":
        """Build a grid from ragged rows, padding each to the longest."""
        width = max((len(row) for row in rows), default=0)
        cells: list[Cell] = []
        for row in rows:
            cells.extend(row)
            cells.extend([DEFAULT_CELL] * (width - len(row)))
        return cls(width=width, height=len(rows), cells=tuple(cells))

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def get(self, x: int, y: int) -> Cell:
        """Get the cell at column x, row y (both 0-based)."""
        if x < 0 or x >= self.width:
            raise IndexError(f"x={x} out of bounds (width={self.width})")
        if y < 0 or y >= self.height:
            raise IndexError(f"y={y} out of bounds (height={self.height})")
        return self.cells[y * self.width + x]

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        """Get cell using indexing: grid[x, y]."""
        x, y = pos
        return self.get(x, y)

    def rows(self) -> Iterator[tuple[Cell, ...]]:
        """Iterate over rows."""
        for y in range(self.height):
            start = y * self.width
            yield self.cells[start:start + self.width]

    def cells_with_position(self) -> Iterator[tuple[int, int, Cell]]:
        """Iterate over all cells as (x, y, cell) tuples."""
        for y, row in enumerate(self.rows()):
            for x, cell in enumerate(row):
                yield x, y, cell
