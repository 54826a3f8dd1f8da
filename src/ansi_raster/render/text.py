"""Render a character grid to plain text (strip colors)."""

from ansi_raster.codec.cp437 import glyph_to_unicode
from ansi_raster.core.grid import CharacterGrid


class TextRenderer:
    """Render a CharacterGrid to plain Unicode text without any styling."""
    
    def __init__(self, preserve_whitespace: bool = False):
        self.preserve_whitespace = preserve_whitespace
    
    def render(self, grid: CharacterGrid) -> str:
        """Render grid to plain text."""
        lines: list[str] = []
        
        for row in grid.rows():
            line = ''.join(glyph_to_unicode(cell.glyph) for cell in row)
            if not self.preserve_whitespace:
                line = line.rstrip()
            lines.append(line)
        
        result = '\n'.join(lines)
        
        if not self.preserve_whitespace:
            # Remove trailing empty lines
            result = result.rstrip('\n')
        
        return result
