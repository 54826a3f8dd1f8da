"""CP437 (IBM PC) glyph codes to Unicode."""

from ansi_raster.core.constants import CP437_TO_UNICODE


def glyph_to_unicode(code: int) -> str:
    """Return the Unicode character drawn for a glyph code.

    Glyph 0 is an unwritten cell and is shown as a space.
    """
    if code == 0:
        return ' '
    return CP437_TO_UNICODE[code]

