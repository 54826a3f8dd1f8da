"""Render a character grid to terminal-compatible escape sequences."""

from ansi_raster.codec.cp437 import glyph_to_unicode
from ansi_raster.core.cell import DEFAULT_CELL, Blink, Cell
from ansi_raster.core.color import BOLD_OFFSET
from ansi_raster.core.constants import CSI, RESET
from ansi_raster.core.grid import CharacterGrid

_BLINK_SGR = {Blink.NONE: '25', Blink.SLOW: '5', Blink.FAST: '6'}


class TerminalRenderer:
    """
    Render a CharacterGrid to 16-color ANSI output for a terminal preview.
    
    Optimizes output by only emitting SGR codes when attributes change.
    """
    
    def __init__(self, reset_at_end: bool = True):
        self.reset_at_end = reset_at_end
    
    def render(self, grid: CharacterGrid) -> str:
        """Render grid to ANSI string."""
        lines: list[str] = []
        
        for row in grid.rows():
            line_parts: list[str] = []
            last = DEFAULT_CELL
            
            # Find last visible cell to avoid trailing blanks
            last_col = -1
            for x, cell in enumerate(row):
                if cell.glyph not in (0, 32) or cell.background != DEFAULT_CELL.background:
                    last_col = x
            
            for cell in row[:last_col + 1]:
                sgr_parts = self._changes(last, cell)
                if sgr_parts:
                    line_parts.append(f"{CSI}{';'.join(sgr_parts)}m")
                line_parts.append(glyph_to_unicode(cell.glyph))
                last = cell
            
            # Reset at end of each line to prevent color bleeding
            if (last.foreground, last.background, last.blink) != (
                DEFAULT_CELL.foreground, DEFAULT_CELL.background, DEFAULT_CELL.blink
            ):
                line_parts.append(RESET)
            
            lines.append(''.join(line_parts))
        
        result = '\n'.join(lines)
        
        if self.reset_at_end:
            result += RESET
        
        return result
    
    @staticmethod
    def _changes(last: Cell, cell: Cell) -> list[str]:
        """SGR parameters turning the attributes of ``last`` into ``cell``'s."""
        parts: list[str] = []
        if cell.bright != last.bright:
            parts.append('1' if cell.bright else '22')
        if cell.foreground % BOLD_OFFSET != last.foreground % BOLD_OFFSET:
            parts.append(str(30 + cell.foreground % BOLD_OFFSET))
        if cell.background != last.background:
            if cell.background < BOLD_OFFSET:
                parts.append(str(40 + cell.background))
            else:
                parts.append(str(100 + cell.background - BOLD_OFFSET))
        if cell.blink != last.blink:
            parts.append(_BLINK_SGR[cell.blink])
        return parts
