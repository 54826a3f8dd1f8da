"""Decoding of ANSI byte streams into operations and character grids."""

from ansi_raster.codec.ansi_parser import AnsiParser, parse
from ansi_raster.codec.cp437 import glyph_to_unicode
from ansi_raster.codec.scanner import ByteScanner
from ansi_raster.codec.screen import ScreenRenderer, render_sequence

__all__ = [
    "AnsiParser",
    "ByteScanner",
    "ScreenRenderer",
    "glyph_to_unicode",
    "parse",
    "render_sequence",
]
