"""Cell - atomic unit of the character grid."""

from dataclasses import dataclass
from enum import IntEnum

from ansi_raster.core.color import DEFAULT_BACKGROUND, DEFAULT_FOREGROUND


class Blink(IntEnum):
    """Blink mode of a cell."""
    NONE = 0
    SLOW = 1
    FAST = 2


@dataclass(frozen=True, slots=True)
class Cell:
    """
    A single character cell with resolved colors.

    ``foreground`` already includes the bold offset, so both color fields
    are direct indices into the 16-color palette.
    """
    glyph: int = 0
    foreground: int = int(DEFAULT_FOREGROUND)
    background: int = int(DEFAULT_BACKGROUND)
    blink: Blink = Blink.NONE

    @property
    def bright(self) -> bool:
        """True if the foreground is one of the bright palette entries."""
        return self.foreground >= 8

    def is_default(self) -> bool:
        """Check if this cell has never been written."""
        return self == DEFAULT_CELL


DEFAULT_CELL = Cell()
