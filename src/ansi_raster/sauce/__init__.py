"""SAUCE metadata handling."""

from ansi_raster.sauce.record import DataType, FileType, SauceRecord
from ansi_raster.sauce.reader import parse_sauce_bytes, strip_sauce

__all__ = ["DataType", "FileType", "SauceRecord", "parse_sauce_bytes", "strip_sauce"]
