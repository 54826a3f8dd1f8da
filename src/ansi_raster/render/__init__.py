"""Renderers for outputting character grids to various formats."""

from ansi_raster.render.bitmap import Rasterizer
from ansi_raster.render.font import BitmapFont
from ansi_raster.render.terminal import TerminalRenderer
from ansi_raster.render.text import TextRenderer

__all__ = ["BitmapFont", "Rasterizer", "TerminalRenderer", "TextRenderer"]
