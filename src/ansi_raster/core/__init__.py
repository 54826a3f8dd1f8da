"""Core data structures: operations, cells, grids and errors."""

from ansi_raster.core.cell import Blink, Cell
from ansi_raster.core.color import VGA_PALETTE, ColorIndex
from ansi_raster.core.document import AnsiDocument
from ansi_raster.core.grid import CharacterGrid

__all__ = ["AnsiDocument", "Blink", "Cell", "CharacterGrid", "ColorIndex", "VGA_PALETTE"]
