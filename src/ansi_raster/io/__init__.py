"""File I/O for ANSI art files."""

from ansi_raster.io.reader import load, load_bytes, parse_bytes, read_file
from ansi_raster.io.writer import save_image

__all__ = ["load", "load_bytes", "parse_bytes", "read_file", "save_image"]
