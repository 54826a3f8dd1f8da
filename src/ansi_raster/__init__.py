"""
ansi-raster: decode BBS-era ANSI art into character grids and bitmaps

Quick Start:
    >>> import ansi_raster as ansi
    >>> doc = ansi.load("artwork.ans")
    >>> print(doc.render_to_text())
    >>> font = ansi.BitmapFont.load("vga.f16")
    >>> doc.save_image("artwork.png", font)

Features:
    - Byte-level parser for CP437 text with CSI escape sequences
    - Virtual 80-column terminal (cursor motion, save/restore, SGR colors)
    - Dense character grid with resolved 16-color palette indices
    - Rasterization with raw VGA, PSF1 or PSF2 bitmap fonts (Pillow)
    - SAUCE metadata reading
"""

__version__ = "0.1.0"

from ansi_raster.codec.ansi_parser import AnsiParser, parse
from ansi_raster.codec.screen import ScreenRenderer, render_sequence
from ansi_raster.config import Settings
from ansi_raster.core.cell import Blink, Cell
from ansi_raster.core.color import VGA_PALETTE
from ansi_raster.core.document import AnsiDocument
from ansi_raster.core.errors import AnsiError, ParseError, RenderError
from ansi_raster.core.grid import CharacterGrid
from ansi_raster.io.reader import load, load_bytes
from ansi_raster.render.bitmap import Rasterizer
from ansi_raster.render.font import BitmapFont
from ansi_raster.sauce.record import SauceRecord


def decode(data: bytes, width: int = 80) -> CharacterGrid:
    """Parse ANSI bytes and render them on a screen of the given width."""
    return render_sequence(parse(data), width=width)


__all__ = [
    # Version
    "__version__",
    # Pipeline
    "AnsiParser",
    "ScreenRenderer",
    "Rasterizer",
    "parse",
    "render_sequence",
    "decode",
    # Types
    "AnsiDocument",
    "BitmapFont",
    "Blink",
    "Cell",
    "CharacterGrid",
    "SauceRecord",
    "Settings",
    "VGA_PALETTE",
    # Errors
    "AnsiError",
    "ParseError",
    "RenderError",
    # I/O
    "load",
    "load_bytes",
]
