"""16-color VGA palette used to resolve cell color indices."""

from enum import IntEnum


class ColorIndex(IntEnum):
    """Palette index of each of the 16 text-mode colors.

    Indices 0-7 are the base colors selected by SGR 30-37/40-47; adding
    the bold offset (8) gives the bright variant.
    """
    BLACK = 0
    RED = 1
    GREEN = 2
    BROWN = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    LIGHT_GRAY = 7
    DARK_GRAY = 8
    BRIGHT_RED = 9
    BRIGHT_GREEN = 10
    YELLOW = 11
    BRIGHT_BLUE = 12
    BRIGHT_MAGENTA = 13
    BRIGHT_CYAN = 14
    WHITE = 15


BOLD_OFFSET = 8

DEFAULT_FOREGROUND = ColorIndex.LIGHT_GRAY
DEFAULT_BACKGROUND = ColorIndex.BLACK

RGB = tuple[int, int, int]

# Standard VGA text-mode palette, indexed by ColorIndex
VGA_PALETTE: tuple[RGB, ...] = (
    (0, 0, 0),
    (170, 0, 0),
    (0, 170, 0),
    (170, 85, 0),
    (0, 0, 170),
    (170, 0, 170),
    (0, 170, 170),
    (170, 170, 170),
    (85, 85, 85),
    (255, 85, 85),
    (85, 255, 85),
    (255, 255, 85),
    (85, 85, 255),
    (255, 85, 255),
    (85, 255, 255),
    (255, 255, 255),
)


def palette_bytes(palette: tuple[RGB, ...] = VGA_PALETTE) -> bytes:
    """Flatten a palette into the r,g,b,r,g,b... layout Pillow expects."""
    if len(palette) != 16:
        raise ValueError(f"palette must have 16 entries, got {len(palette)}")
    data = bytearray()
    for r, g, b in palette:
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        data.extend((r, g, b))
    return bytes(data)

