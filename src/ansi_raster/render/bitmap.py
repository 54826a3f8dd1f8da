"""Rasterize a CharacterGrid into a paletted Pillow image.

Each cell becomes a ``font.width`` x ``font.height`` block of pixels:
glyph bits that are set take the cell's foreground index, the rest its
background index. The image carries the 16-color palette, so saving it
as PNG or GIF stores one byte (or less) per pixel.

Example:
    from ansi_raster import decode
    from ansi_raster.render import BitmapFont, Rasterizer

    grid = decode(open("art.ans", "rb").read())
    image = Rasterizer(BitmapFont.load("vga.f16")).rasterize(grid)
    image.save("art.png")
"""

import logging

from ansi_raster.core.cell import Cell
from ansi_raster.core.color import RGB, VGA_PALETTE, palette_bytes
from ansi_raster.core.errors import RasterError
from ansi_raster.core.grid import CharacterGrid
from ansi_raster.render.font import BitmapFont

try:
    from PIL import Image
    HAS_PIL = True
except ImportError:
    HAS_PIL = False

logger = logging.getLogger(__name__)


def _check_pil() -> None:
    """Raise ImportError if PIL is not available."""
    if not HAS_PIL:
        raise ImportError(
            "Pillow is required for bitmap output. "
            "Install with: uv pip install ansi-raster[image]"
        )


class Rasterizer:
    """Render a CharacterGrid to a mode "P" image using a bitmap font."""

    def __init__(self, font: BitmapFont, palette: tuple[RGB, ...] = VGA_PALETTE):
        self.font = font
        self.palette = palette
        self._palette_data = palette_bytes(palette)
        self._strips: dict[tuple[int, int, int], list[bytes]] = {}

    def rasterize(self, grid: CharacterGrid, scale: int = 1) -> "Image.Image":
        """Draw every cell of the grid; ``scale`` enlarges pixels."""
        _check_pil()
        if grid.is_empty:
            raise RasterError("nothing to rasterize: the grid is empty")
        if scale < 1:
            raise RasterError(f"scale must be at least 1, got {scale}")

        width = grid.width * self.font.width
        height = grid.height * self.font.height
        pixels = bytearray()
        for row in grid.rows():
            strips = [self._glyph_strip(cell) for cell in row]
            for y in range(self.font.height):
                pixels.extend(b"".join(strip[y] for strip in strips))

        image = Image.frombytes("P", (width, height), bytes(pixels))
        image.putpalette(self._palette_data)
        if scale > 1:
            image = image.resize((width * scale, height * scale), Image.Resampling.NEAREST)
        logger.debug("rasterized %dx%d cells to %dx%d pixels", grid.width, grid.height, *image.size)
        return image

    def _glyph_strip(self, cell: Cell) -> list[bytes]:
        """Pixel rows of one cell, cached per glyph and color pair."""
        key = (cell.glyph, cell.foreground, cell.background)
        strip = self._strips.get(key)
        if strip is None:
            font = self.font
            top_bit = font.bytes_per_row * 8 - 1
            strip = []
            for y in range(font.height):
                mask = font.glyph_row(cell.glyph, y)
                strip.append(bytes(
                    cell.foreground if (mask >> (top_bit - x)) & 1 else cell.background
                    for x in range(font.width)
                ))
            self._strips[key] = strip
        return strip
