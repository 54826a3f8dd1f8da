"""Save rasterized ANSI art as image files."""

import logging
from pathlib import Path

from ansi_raster.core.color import RGB, VGA_PALETTE
from ansi_raster.core.grid import CharacterGrid
from ansi_raster.render.bitmap import Rasterizer
from ansi_raster.render.font import BitmapFont

logger = logging.getLogger(__name__)


def save_image(
    grid: CharacterGrid,
    path: str | Path,
    font: BitmapFont,
    palette: tuple[RGB, ...] = VGA_PALETTE,
    scale: int = 1,
    format: str | None = None,
) -> None:
    """
    Rasterize a grid and write it to disk.
    
    The image format is taken from the file extension unless ``format``
    (a Pillow format name such as "PNG" or "GIF") is given.
    """
    path = Path(path)
    image = Rasterizer(font, palette=palette).rasterize(grid, scale=scale)
    image.save(path, format=format)
    logger.debug("wrote %s (%dx%d)", path, *image.size)
